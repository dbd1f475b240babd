from __future__ import annotations

import numpy as np


class InversionError(np.linalg.LinAlgError):
    """Raised when the solver cannot produce an inverse.

    Covers non-square input, singular or numerically degenerate matrices, and
    cells that never had a matrix set. Subclasses NumPy's ``LinAlgError`` so
    existing ``except np.linalg.LinAlgError`` handlers still catch it.
    """

    def __init__(
        self,
        message: str,
        *,
        shape: tuple[int, ...] | None = None,
        rcond: float | None = None,
    ) -> None:
        super().__init__(message)
        self.shape = shape
        self.rcond = rcond
