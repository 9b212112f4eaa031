from __future__ import annotations

"""Splitter return contracts.

Splitters yield a single, stable payload shape so orchestrators never guess
tuple layouts.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Split:
    """A single train/test split."""

    Xtr: np.ndarray
    Xte: np.ndarray
    ytr: np.ndarray
    yte: np.ndarray
