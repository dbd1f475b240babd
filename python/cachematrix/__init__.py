"""Cache the inverse of a matrix so it is computed at most once per value."""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
from importlib.metadata import version as _version

try:
    __version__ = _version("cachematrix")
except _PackageNotFoundError:
    __version__ = "unknown"

import logging as _logging

from ._internal.cache_cell import CacheCell, make_cache_matrix
from ._internal.cached_inverse import CACHE_HIT_MESSAGE, cache_solve
from ._internal.config import SOLVE_TOL_ENV_VAR, default_solve_tol
from ._internal.errors import InversionError
from ._internal.solve import reciprocal_condition, solve
from ._internal.warnings import CacheMatrixPrecisionWarning, CacheMatrixWarning

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    "CACHE_HIT_MESSAGE",
    "CacheCell",
    "CacheMatrixPrecisionWarning",
    "CacheMatrixWarning",
    "InversionError",
    "SOLVE_TOL_ENV_VAR",
    "cache_solve",
    "default_solve_tol",
    "make_cache_matrix",
    "reciprocal_condition",
    "solve",
]
