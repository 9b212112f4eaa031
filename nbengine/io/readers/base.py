from __future__ import annotations

"""Reader base contracts and shared helpers."""

from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass
class LabeledTable:
    """Parsed numeric feature matrix plus the raw label column tokens."""

    features: np.ndarray
    labels: np.ndarray
    feature_names: Optional[list[str]] = None
    label_name: Optional[str] = None


def coerce_numeric_matrix(arr: np.ndarray, *, context: str) -> np.ndarray:
    """Ensure a numeric, contiguous float array.

    - Coerces object dtype to float where possible
    - Rejects NaNs and non-numeric data
    """

    arr = np.asarray(arr)
    if arr.dtype == object:
        try:
            arr = arr.astype(float)
        except (TypeError, ValueError) as e:
            raise ValueError(f"{context}: could not convert to float; found non-numeric values.") from e

    if not np.issubdtype(arr.dtype, np.number):
        raise ValueError(f"{context}: expected numeric data; got dtype={arr.dtype}")

    arr = np.asarray(arr, dtype=float)
    if np.isnan(arr).any():
        raise ValueError(f"{context}: contains NaN after parsing; check missing/invalid values.")

    return np.ascontiguousarray(arr)
