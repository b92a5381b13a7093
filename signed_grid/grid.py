from typing import Any, NamedTuple, Optional, Tuple, TypeVar

from signed_grid.axis import SignedAxis, SlotRef
from signed_grid.index import CellEmptyError, EMPTY, Existence, NegativeIndexed, check_index
from signed_grid.log import get_logger

T = TypeVar("T")  # Element type.


class Bounds(NamedTuple):
    """ Smallest box containing every coordinate written to a grid (and the origin). """
    min_x: int
    max_x: int
    min_y: int
    max_y: int


class SparseGrid(NegativeIndexed[Optional[SignedAxis[T]]]):
    """ Two-dimensional grid addressable by any pair of signed integers.
        Columns are kept in two-sided storage by x. Each column is a SignedAxis by y, created on its first write.
        The bounding box of all writes is tracked as we go. It starts as a single point at the origin
        and only ever widens, so a grid with no writes reports (0, 0) bounds without holding a value there. """

    def __init__(self) -> None:
        super().__init__()
        self._min_x = 0
        self._max_x = 0
        self._min_y = 0
        self._max_y = 0

    def _blank(self) -> None:
        return None

    def min_x(self) -> int:
        return self._min_x

    def max_x(self) -> int:
        return self._max_x

    def min_y(self) -> int:
        return self._min_y

    def max_y(self) -> int:
        return self._max_y

    def bounds(self) -> Bounds:
        return Bounds(self._min_x, self._max_x, self._min_y, self._max_y)

    def ensure_x_capacity(self, x:int) -> None:
        """ Grow the column storage so that slot <x> exists. New slots hold no column. """
        self.grow_to_include(x)

    def ensure_column(self, x:int) -> SignedAxis[T]:
        """ Return the column at <x>, creating an empty one first if the slot has none.
            The column storage is grown to cover <x> if set() has not done so already. """
        x = check_index(x)
        self.ensure_x_capacity(x)
        column = self._load(x)
        if column is None:
            column = SignedAxis()
            self._store(x, column)
            get_logger().debug(f"{type(self).__name__}: created column {x}")
        return column

    def update_bounds(self, x:int, y:int) -> None:
        """ Widen the bounding box to include <x, y>. """
        x = check_index(x)
        y = check_index(y)
        if x < self._min_x:
            self._min_x = x
        elif x > self._max_x:
            self._max_x = x
        if y < self._min_y:
            self._min_y = y
        elif y > self._max_y:
            self._max_y = y

    def set(self, x:int, y:int, value:T) -> None:
        """ Store <value> at <x, y>. Columns and cells are allocated as needed. """
        x = check_index(x)
        y = check_index(y)
        self.ensure_x_capacity(x)
        column = self.ensure_column(x)
        self.update_bounds(x, y)
        column.set(y, value)

    def _column(self, x:int) -> Optional[SignedAxis[T]]:
        """ Return the column at <x> without creating anything. A covered slot may still hold no column. """
        if self.existence(x) is Existence.NONEXISTENT:
            return None
        return self._load(x)

    def get(self, x:int, y:int, default:Any=None) -> Any:
        """ Return the value at <x, y>, or <default> if it was never written. Does not grow anything. """
        x = check_index(x)
        y = check_index(y)
        column = self._column(x)
        if column is None:
            return default
        return column.get(y, default)

    def get_mutable(self, x:int, y:int) -> Optional[SlotRef]:
        """ Return a handle on the cell at <x, y> if its column covers it, else None. Nothing is created. """
        x = check_index(x)
        y = check_index(y)
        column = self._column(x)
        if column is None:
            return None
        return column.get_mutable(y)

    def contains(self, x:int, y:int) -> bool:
        """ Return True if a value has been written at <x, y>. """
        return self.get(x, y, EMPTY) is not EMPTY

    def __contains__(self, xy:Tuple[int, int]) -> bool:
        x, y = xy
        return self.contains(x, y)

    def __getitem__(self, xy:Tuple[int, int]) -> T:
        x, y = xy
        item = self.get(x, y, EMPTY)
        if item is EMPTY:
            raise CellEmptyError(f"No value at ({x}, {y})")
        return item

    def __setitem__(self, xy:Tuple[int, int], value:T) -> None:
        x, y = xy
        self.set(x, y, value)

    def __repr__(self) -> str:
        ncols = sum(column is not None for side in (self._positive, self._negative) for column in side)
        return f"{type(self).__name__}(bounds={tuple(self.bounds())}, columns={ncols})"
