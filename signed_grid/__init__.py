""" Package for sparse containers addressed by signed integer coordinates. Nothing needs to be sized in advance:
    storage grows on write to cover whatever range of coordinates has actually been touched.

    index - The building block of everything else. A signed index is split into a side (non-negative or negative)
    and an offset within a plain Python list for that side. Index -1 lives at offset 0 of the negative list,
    -2 at offset 1, and so on. The base class here owns both lists and knows how to classify and grow them.

    axis - A one-dimensional list over all the integers. Every slot starts out empty, and an empty slot is never
    confused with a stored None. Slots may be read, written, or handed out as mutable references.

    grid - A two-dimensional grid that applies the same split to x, where each slot holds a lazily created axis
    of cells by y. It also tracks the bounding box of every coordinate written, which only ever widens.

    log/config - Growth and column creation are logged at DEBUG level to a stdlib logger, which stays silent
    until configured in code or from a CFG file.

    None of these containers are thread-safe. Wrap a grid in a single lock if it must be shared. """

from signed_grid.axis import SignedAxis, SlotRef
from signed_grid.config import GridConfig, configure_logging
from signed_grid.grid import Bounds, SparseGrid
from signed_grid.index import CellEmptyError, EMPTY, Existence, GridError, GridIndexError, translate
from signed_grid.log import GridLogger, get_logger
