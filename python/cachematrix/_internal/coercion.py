from __future__ import annotations

import warnings
from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np

from .warnings import CacheMatrixPrecisionWarning


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def _rows_cols(candidate: Any) -> tuple[int, int] | None:
    rows_attr = getattr(candidate, "rows", None)
    cols_attr = getattr(candidate, "cols", None)
    if callable(rows_attr) and callable(cols_attr):
        return int(rows_attr()), int(cols_attr())
    return None


def _read_matrix_like(candidate: Any, shape: tuple[int, int]) -> list[list[Any]]:
    # Objects exposing rows()/cols()/get(i, j) but no array protocol.
    get_attr = getattr(candidate, "get")
    r, c = shape
    return [[get_attr(i, j) for j in range(c)] for i in range(r)]


def _to_real(array: np.ndarray, stacklevel: int) -> np.ndarray:
    if not np.iscomplexobj(array):
        return array
    if np.any(array.imag != 0):
        raise TypeError("Matrix data must be real-valued; got non-zero imaginary parts.")
    warnings.warn(
        "Complex matrix data with zero imaginary part was converted to float64.",
        CacheMatrixPrecisionWarning,
        stacklevel=stacklevel + 1,
    )
    return array.real


def coerce_matrix(candidate: Any, *, stacklevel: int = 2) -> np.ndarray | None:
    """Normalise matrix input to an owned, C-contiguous float64 2-D array.

    ``None`` passes through unchanged and acts as the "no matrix yet"
    placeholder. Shape is deliberately not checked beyond being 2-D: square
    matrices are only required at inversion time.

    ``stacklevel`` is counted from the caller, as in ``warnings.warn``, and
    decides which frame a precision warning is attributed to.
    """

    if candidate is None:
        return None
    if isinstance(candidate, (str, bytes, bytearray)):
        raise TypeError("Matrix data must be a nested sequence or a NumPy array, not a string.")

    if not isinstance(candidate, np.ndarray) and not hasattr(candidate, "__array__"):
        shape = _rows_cols(candidate)
        if shape is not None and callable(getattr(candidate, "get", None)):
            candidate = _read_matrix_like(candidate, shape)
        elif not is_sequence_like(candidate):
            raise TypeError(
                "Matrix data must be provided as a nested sequence, a NumPy array, "
                f"or a matrix-like object; got {type(candidate).__name__}."
            )

    try:
        array = np.asarray(candidate)
    except ValueError as exc:
        raise ValueError("Matrix data must be rectangular (every row the same length).") from exc

    if array.ndim != 2:
        raise ValueError(f"Matrix input must be a 2D structure; got {array.ndim} dimension(s).")

    array = _to_real(array, stacklevel + 1)
    try:
        return np.array(array, dtype=np.float64, order="C", copy=True)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"Matrix entries must be numeric; got dtype {array.dtype}.") from exc
