from __future__ import annotations

import os

import numpy as np

SOLVE_TOL_ENV_VAR = "CACHEMATRIX_SOLVE_TOL"


def default_solve_tol(env_var: str = SOLVE_TOL_ENV_VAR) -> float:
    """Return the default reciprocal-condition threshold used by ``solve``.

    Read from the environment on every call so tests and long-running
    sessions can change it without reloading the package.
    """

    raw = os.environ.get(env_var)
    if raw is None or not raw.strip():
        return float(np.finfo(np.float64).eps)
    try:
        tol = float(raw)
    except ValueError:
        raise ValueError(f"{env_var} must be a float, got {raw!r}") from None
    if tol < 0 or tol != tol:
        raise ValueError(f"{env_var} must be a non-negative float, got {raw!r}")
    return tol
