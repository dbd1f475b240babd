from __future__ import annotations

from typing import Any

import numpy as np

from .config import default_solve_tol
from .errors import InversionError


def reciprocal_condition(a: np.ndarray) -> float:
    """1-norm reciprocal condition number of a square matrix (0.0 if singular)."""

    try:
        with np.errstate(all="ignore"):
            cond = float(np.linalg.cond(a, 1))
    except np.linalg.LinAlgError:
        return 0.0
    if not np.isfinite(cond) or cond == 0.0:
        return 0.0
    return 1.0 / cond


def _check_square(a: Any) -> np.ndarray:
    if a is None:
        raise InversionError("No matrix has been set; call set() before inverting.")

    array = np.asarray(a)
    if array.ndim != 2:
        raise InversionError(
            f"Matrix must be 2D to invert; got {array.ndim} dimension(s).",
            shape=tuple(array.shape),
        )
    rows, cols = array.shape
    if rows != cols:
        raise InversionError(
            f"Matrix must be square to invert; got shape ({rows}, {cols}).",
            shape=(rows, cols),
        )
    if rows == 0:
        raise InversionError("Cannot invert an empty (0x0) matrix.", shape=(0, 0))
    if not np.issubdtype(array.dtype, np.number):
        raise InversionError(f"Matrix entries must be numeric; got dtype {array.dtype}.", shape=(rows, cols))
    if not np.all(np.isfinite(array)):
        raise InversionError("Matrix contains NaN or infinite entries.", shape=(rows, cols))
    return array


def _coerce_rhs(b: Any, n: int) -> np.ndarray:
    if b is None:
        return np.eye(n, dtype=np.float64)
    rhs = np.asarray(b)
    if rhs.ndim not in (1, 2) or rhs.shape[0] != n:
        raise InversionError(
            f"Right-hand side must have {n} rows to match the matrix; got shape {rhs.shape}.",
            shape=(n, n),
        )
    return rhs


def _rcond_from_inverse(a: np.ndarray, inv: np.ndarray) -> float:
    with np.errstate(all="ignore"):
        cond = float(np.linalg.norm(a, 1) * np.linalg.norm(inv, 1))
    if not np.isfinite(cond) or cond == 0.0:
        return 0.0
    return 1.0 / cond


def _raise_if_ill_conditioned(rcond: float, threshold: float, n: int) -> None:
    if rcond < threshold:
        raise InversionError(
            f"Matrix is numerically singular: reciprocal condition number {rcond:.6g} "
            f"is below tolerance {threshold:.6g}.",
            shape=(n, n),
            rcond=rcond,
        )


def solve(a: Any, b: Any = None, *, tol: float | None = None) -> np.ndarray:
    """Solve ``a @ x = b`` for ``x``.

    With ``b`` omitted the right-hand side is the identity, so the result is
    the inverse of ``a``. ``tol`` is the smallest acceptable reciprocal
    condition number (1-norm); anything below it is reported as numerically
    singular. ``tol=None`` uses the configured default, ``tol=0`` only
    rejects exactly singular matrices.

    Without ``b`` the condition number comes from the computed inverse, so
    only one factorisation is done. With an explicit ``b`` and ``tol > 0``
    the check goes through ``np.linalg.cond``, which costs a second
    factorisation.

    Raises InversionError for non-square, empty, non-finite, singular or
    ill-conditioned input, and for a right-hand side of the wrong height.
    """

    array = _check_square(a)
    n = array.shape[0]
    rhs = _coerce_rhs(b, n)

    threshold = default_solve_tol() if tol is None else float(tol)
    if threshold > 0 and b is not None:
        _raise_if_ill_conditioned(reciprocal_condition(array), threshold, n)

    try:
        x = np.linalg.solve(array, rhs)
    except np.linalg.LinAlgError as exc:
        raise InversionError(f"Matrix is singular: {exc}", shape=(n, n), rcond=0.0) from exc

    if threshold > 0 and b is None:
        _raise_if_ill_conditioned(_rcond_from_inverse(array, x), threshold, n)
    return x
