from typing import Any, Optional, TypeVar

from signed_grid.index import CellEmptyError, EMPTY, Existence, NegativeIndexed, check_index

T = TypeVar("T")  # Element type.


class SlotRef:
    """ Mutable handle on a single slot of an axis. The slot may be empty.
        Writes go straight through to the axis, so they are visible to later reads. """

    __slots__ = ["_axis", "_index"]

    def __init__(self, axis:"SignedAxis", index:int) -> None:
        self._axis = axis    # Axis owning the slot.
        self._index = index  # Logical index of the slot within the axis.

    @property
    def index(self) -> int:
        return self._index

    @property
    def empty(self) -> bool:
        return self._axis._load(self._index) is EMPTY

    def get(self, default:Any=None) -> Any:
        """ Return the slot's value, or <default> if it has none. """
        item = self._axis._load(self._index)
        return default if item is EMPTY else item

    def set(self, value:Any) -> None:
        self._axis._store(self._index, value)

    def __repr__(self) -> str:
        return f"SlotRef({self._index}, {self._axis._load(self._index)!r})"


class SignedAxis(NegativeIndexed[T]):
    """ One-dimensional list addressable by any signed integer. Grows on write to cover the index.
        Every slot starts out empty; growth alone never makes a slot hold a value. """

    def _blank(self) -> object:
        return EMPTY

    def set(self, index:int, value:T) -> None:
        """ Store <value> at <index>, growing the storage on that side first if needed. """
        index = check_index(index)
        self.grow_to_include(index)
        self._store(index, value)

    def get(self, index:int, default:Any=None) -> Any:
        """ Return the value at <index>, or <default> if it was never written. Does not grow anything. """
        index = check_index(index)
        if self.existence(index) is Existence.NONEXISTENT:
            return default
        item = self._load(index)
        return default if item is EMPTY else item

    def get_mutable(self, index:int) -> Optional[SlotRef]:
        """ Return a handle on the slot at <index> if storage covers it, else None.
            The handle may still be empty. Storage is not grown; only set() does that. """
        index = check_index(index)
        if self.existence(index) is Existence.NONEXISTENT:
            return None
        return SlotRef(self, index)

    def contains(self, index:int) -> bool:
        """ Return True if a value has been written at <index>. """
        return self.get(index, EMPTY) is not EMPTY

    __contains__ = contains
    __setitem__ = set

    def __getitem__(self, index:int) -> T:
        item = self.get(index, EMPTY)
        if item is EMPTY:
            raise CellEmptyError(f"No value at index {index}")
        return item

    def __repr__(self) -> str:
        filled = sum(item is not EMPTY for side in (self._positive, self._negative) for item in side)
        return f"{type(self).__name__}(positive_len={self.positive_len()}, " \
               f"negative_len={self.negative_len()}, filled={filled})"
