from __future__ import annotations

import logging
from typing import Any

import numpy as np

from .coercion import coerce_matrix

logger = logging.getLogger(__name__)


def _owned(x: Any) -> np.ndarray | None:
    # stacklevel=3: callers are the public entry points, one frame below user code.
    matrix = coerce_matrix(x, stacklevel=3)
    if matrix is not None:
        matrix.setflags(write=False)
    return matrix


class CacheCell:
    """A matrix paired with a slot for its cached inverse.

    Replacing the matrix through ``set`` always clears the cached inverse.
    ``setinv`` trusts the caller: it stores whatever it is given as the
    inverse of the current matrix without checking it.

    The stored matrix is a read-only copy, so it can only change through
    ``set``.

    Not thread-safe.
    """

    def __init__(self, x: Any = None) -> None:
        self._matrix: np.ndarray | None = _owned(x)
        self._inverse: np.ndarray | None = None

    def get(self) -> np.ndarray | None:
        return self._matrix

    def set(self, y: Any) -> None:
        self._matrix = _owned(y)
        if self._inverse is not None:
            logger.debug("Matrix replaced; discarding cached inverse")
        self._inverse = None

    def getinv(self) -> np.ndarray | None:
        return self._inverse

    def setinv(self, inv: np.ndarray) -> None:
        self._inverse = inv

    def has_inverse(self) -> bool:
        return self._inverse is not None

    @property
    def shape(self) -> tuple[int, int] | None:
        if self._matrix is None:
            return None
        return tuple(self._matrix.shape)  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"CacheCell(shape={self.shape}, cached={self.has_inverse()})"


def make_cache_matrix(x: Any = None) -> CacheCell:
    """Create a CacheCell for ``x`` (a square numeric matrix, or None for now)."""

    cell = CacheCell()
    cell._matrix = _owned(x)
    return cell
