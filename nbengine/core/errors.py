from __future__ import annotations

"""Error taxonomy shared by the trainer, predictor and scorer.

Errors subclass :class:`ValueError` so callers that already guard against bad
input with ``except ValueError`` keep working.
"""

from typing import Optional


class EmptyDatasetError(ValueError):
    """Raised when there is nothing to train on or score."""


class DimensionMismatchError(ValueError):
    """Raised when a row, label vector or prediction array has the wrong length."""

    def __init__(
        self,
        message: str,
        *,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class DegenerateVarianceWarning(UserWarning):
    """A class/feature variance fell to the floor and was clamped."""


__all__ = ["EmptyDatasetError", "DimensionMismatchError", "DegenerateVarianceWarning"]
