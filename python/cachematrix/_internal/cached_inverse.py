from __future__ import annotations

import logging
from typing import Any, Callable, Union

import numpy as np

from .cache_cell import CacheCell
from .solve import solve

logger = logging.getLogger(__name__)

CACHE_HIT_MESSAGE = "Using cached inverse"

HitHook = Union[Callable[[CacheCell], Any], bool, None]


def _log_cache_hit(cell: CacheCell) -> None:
    logger.debug(CACHE_HIT_MESSAGE)


def cache_solve(cell: CacheCell, *args: Any, on_hit: HitHook = None, **solver_options: Any) -> np.ndarray:
    """Return the inverse of ``cell``'s matrix, computing it at most once.

    The result is read-only. On a cache hit the stored object is returned
    as-is and ``on_hit`` is called with the cell (default: a DEBUG log
    record; ``False`` silences it; anything else raises TypeError). On a
    miss the matrix is handed to ``solve`` together with ``*args`` and
    ``**solver_options`` unchanged, and the result is cached.

    InversionError from the solver propagates and leaves the cache empty.
    """

    if on_hit is None or on_hit is True:
        notify = _log_cache_hit
    elif on_hit is False:
        notify = None
    elif callable(on_hit):
        notify = on_hit
    else:
        raise TypeError(f"on_hit must be a callable, a bool or None; got {type(on_hit).__name__}")

    inv = cell.getinv()
    if inv is not None:
        if notify is not None:
            notify(cell)
        return inv

    data = cell.get()
    logger.debug("Cache miss; solving matrix of shape %s", cell.shape)
    inv = solve(data, *args, **solver_options)
    inv.setflags(write=False)
    cell.setinv(inv)
    return inv
