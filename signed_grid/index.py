""" Module for translating signed indices into two-sided list storage. """

from enum import Enum
from numbers import Integral
from typing import Generic, List, Tuple, TypeVar

from signed_grid.log import get_logger

U = TypeVar("U")  # Slot type. May be an element or another container.


class _Empty:
    """ Marker for a slot that growth has allocated but no write has filled. """

    def __repr__(self) -> str:
        return "EMPTY"

    def __bool__(self) -> bool:
        return False


EMPTY = _Empty()


class GridError(Exception):
    """ Base class for all errors raised by signed grid containers. """


class GridIndexError(GridError, TypeError):
    """ Raised when a coordinate is not an integer. """


class CellEmptyError(GridError, LookupError):
    """ Raised by subscript access on a cell that holds no value. """


class Existence(Enum):
    """ Which side of the storage (if any) currently covers a signed index. """
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NONEXISTENT = "nonexistent"


def translate(index:int) -> Tuple[Existence, int]:
    """ Map a logical <index> to its storage side and the physical offset on that side.
        Index 0 is non-negative. Negative indices are stored by magnitude minus one, so -1 -> 0, -2 -> 1, etc. """
    if index >= 0:
        return Existence.POSITIVE, index
    return Existence.NEGATIVE, -index - 1


def check_index(index:object) -> int:
    """ Return <index> as a plain int, or raise if it isn't an integer. bool is rejected even though it subclasses int. """
    if isinstance(index, bool) or not isinstance(index, Integral):
        raise GridIndexError(f"Grid indices must be integers, not {type(index).__name__}: {index!r}")
    return int(index)


class NegativeIndexed(Generic[U]):
    """ Abstract two-sided list addressable by any signed integer.
        Storage is split into one list for indices >= 0 and another for indices < 0.
        Both lists only ever grow, and are padded with blank slots from _blank() as they do. """

    def __init__(self) -> None:
        self._positive:List[U] = []  # Slots for indices 0, 1, 2...
        self._negative:List[U] = []  # Slots for indices -1, -2, -3...

    def _blank(self) -> U:
        """ Return the value used to pad newly grown slots. """
        raise NotImplementedError

    def positive_len(self) -> int:
        return len(self._positive)

    def negative_len(self) -> int:
        return len(self._negative)

    def existence(self, index:int) -> Existence:
        """ Classify <index> by which list currently has room for it. This is not an occupancy check. """
        index = check_index(index)
        if 0 <= index < len(self._positive):
            return Existence.POSITIVE
        if index < 0 and -index <= len(self._negative):
            return Existence.NEGATIVE
        return Existence.NONEXISTENT

    def grow_to_include(self, index:int) -> None:
        """ Pad one side of the storage with blanks until <index> has a slot. Never shrinks. """
        index = check_index(index)
        side, offset = translate(index)
        slots = self._positive if side is Existence.POSITIVE else self._negative
        old_len = len(slots)
        if offset < old_len:
            return
        blank = self._blank
        slots += [blank() for _ in range(offset - old_len + 1)]
        get_logger().debug(f"{type(self).__name__}: grew {side.value} side to {len(slots)} slots")

    def _load(self, index:int) -> U:
        """ Return the slot for <index>. It must already exist. """
        side, offset = translate(index)
        if side is Existence.POSITIVE:
            return self._positive[offset]
        return self._negative[offset]

    def _store(self, index:int, item:U) -> None:
        """ Overwrite the slot for <index>. It must already exist. """
        side, offset = translate(index)
        if side is Existence.POSITIVE:
            self._positive[offset] = item
        else:
            self._negative[offset] = item
