from __future__ import annotations

"""Public shape/orientation utilities.

Conventions
-----------
- X is 2D: (n_samples, n_features)
- y is 1D: (n_samples,)

Unlike a permissive loader, nothing here transposes or truncates. A row that
disagrees with the established width is an error.
"""

from typing import Any, Optional, Tuple

import numpy as np

from .errors import DimensionMismatchError, EmptyDatasetError


def coerce_1d(a: Any) -> np.ndarray:
    """Flatten array-likes to 1D; scalars become length-1 arrays."""

    arr = np.asarray(a)
    if arr.ndim == 0:
        return arr.reshape(1)
    return arr.ravel()


def _check_row_widths(rows: Any, expected: Optional[int]) -> None:
    """Walk nested sequences and report the first row with a different width."""

    width = expected
    for i, row in enumerate(rows):
        n = len(row)
        if width is None:
            width = n
        elif n != width:
            raise DimensionMismatchError(
                f"Row {i} has {n} features; expected {width}.",
                expected=width,
                actual=n,
            )


def coerce_feature_matrix(
    X: Any,
    *,
    expected_n_features: Optional[int] = None,
    context: str = "X",
) -> np.ndarray:
    """Return X as a finite float64 matrix of shape (n_samples, n_features).

    - Nested Python sequences are checked row by row so ragged input surfaces as
      :class:`DimensionMismatchError` instead of a numpy object array.
    - When ``expected_n_features`` is given every row must have that width.
    - Zero rows are allowed here; callers decide whether that is an error.
    """

    if hasattr(X, "to_numpy"):
        X = X.to_numpy()

    if not isinstance(X, np.ndarray):
        rows = list(X)
        if rows and all(hasattr(r, "__len__") for r in rows):
            _check_row_widths(rows, expected_n_features)
        X = rows

    arr = np.asarray(X, dtype=float)

    if arr.ndim == 1 and arr.size == 0:
        arr = arr.reshape(0, expected_n_features or 0)

    if arr.ndim != 2:
        raise ValueError(f"{context} must be 2D (n_samples, n_features); got shape {arr.shape}.")

    if expected_n_features is not None and arr.shape[1] != expected_n_features:
        raise DimensionMismatchError(
            f"{context} has {arr.shape[1]} features; expected {expected_n_features}.",
            expected=expected_n_features,
            actual=arr.shape[1],
        )

    if not np.isfinite(arr).all():
        raise ValueError(f"{context} contains NaN or infinite values.")

    return arr


def coerce_labels(y: Any, *, context: str = "y") -> np.ndarray:
    """Return y as a 1D int64 array.

    Integral floats (e.g. ``2.0``) are accepted; anything else is rejected.
    """

    arr = coerce_1d(y)
    if arr.size == 0:
        return arr.astype(np.int64)

    if np.issubdtype(arr.dtype, np.integer) or arr.dtype == bool:
        return arr.astype(np.int64)

    if np.issubdtype(arr.dtype, np.floating):
        if np.isfinite(arr).all() and np.all(arr == np.round(arr)):
            return arr.astype(np.int64)

    raise ValueError(
        f"{context} must hold integer class labels; got dtype={arr.dtype}. "
        "Encode string labels first (see nbengine.io.labels.LabelEncoder)."
    )


def ensure_training_set(X: Any, y: Any) -> Tuple[np.ndarray, np.ndarray]:
    """Validate a labeled training set.

    - at least one row and one feature
    - every row has the same width
    - exactly one integer label per row
    """

    X_arr = coerce_feature_matrix(X, context="X_train")
    if X_arr.shape[0] == 0:
        raise EmptyDatasetError("Cannot fit on an empty dataset (0 rows).")
    if X_arr.shape[1] == 0:
        raise EmptyDatasetError("Cannot fit on a dataset with 0 feature columns.")

    y_arr = coerce_labels(y, context="y_train")
    if y_arr.shape[0] != X_arr.shape[0]:
        raise DimensionMismatchError(
            f"X_train and y_train length mismatch: {X_arr.shape[0]} vs {y_arr.shape[0]}.",
            expected=X_arr.shape[0],
            actual=y_arr.shape[0],
        )

    return X_arr, y_arr
