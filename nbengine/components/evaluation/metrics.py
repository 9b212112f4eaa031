from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np
from sklearn.metrics import balanced_accuracy_score, confusion_matrix, f1_score

from nbengine.core.errors import DimensionMismatchError, EmptyDatasetError
from nbengine.core.shapes import coerce_1d


def _check_len(y_true: np.ndarray, y_pred: np.ndarray, *, allow_empty: bool = False) -> None:
    if y_true.shape[0] != y_pred.shape[0]:
        raise DimensionMismatchError(
            f"Length mismatch: predicted({y_pred.shape[0]}) vs actual({y_true.shape[0]}).",
            expected=y_true.shape[0],
            actual=y_pred.shape[0],
        )
    if y_true.shape[0] == 0 and not allow_empty:
        raise EmptyDatasetError("Cannot score zero predictions.")


def accuracy(predicted: Any, actual: Any) -> float:
    """Fraction of positions where ``predicted[i] == actual[i]``.

    Two empty arrays agree everywhere, so they score 1.0.
    """
    y_pred = coerce_1d(predicted)
    y_true = coerce_1d(actual)
    _check_len(y_true, y_pred, allow_empty=True)
    if y_true.shape[0] == 0:
        return 1.0
    return float(np.count_nonzero(y_pred == y_true) / y_true.shape[0])


def _balanced_accuracy(predicted: Any, actual: Any) -> float:
    y_pred = coerce_1d(predicted)
    y_true = coerce_1d(actual)
    _check_len(y_true, y_pred)
    return float(balanced_accuracy_score(y_true, y_pred))


def _f1_macro(predicted: Any, actual: Any) -> float:
    y_pred = coerce_1d(predicted)
    y_true = coerce_1d(actual)
    _check_len(y_true, y_pred)
    return float(f1_score(y_true, y_pred, average="macro", zero_division=0))


_METRICS = {
    "accuracy": accuracy,
    "balanced_accuracy": _balanced_accuracy,
    "f1_macro": _f1_macro,
}


def score(y_true: Any, y_pred: Any, *, metric: str = "accuracy") -> float:
    if metric not in _METRICS:
        raise ValueError(f"Unknown classification metric '{metric}'. Supported: {list(_METRICS)}")
    return _METRICS[metric](y_pred, y_true)


def confusion(
    y_true: Any,
    y_pred: Any,
    labels: Optional[Sequence[int]] = None,
) -> dict:
    """Confusion matrix as a JSON-friendly dict (rows = actual, cols = predicted)."""
    y_true = coerce_1d(y_true)
    y_pred = coerce_1d(y_pred)
    _check_len(y_true, y_pred)

    if labels is None:
        labels_arr = np.unique(np.concatenate([y_true, y_pred]))
    else:
        labels_arr = np.asarray(list(labels))

    mat = confusion_matrix(y_true, y_pred, labels=labels_arr)
    return {
        "labels": [int(v) for v in labels_arr.tolist()],
        "matrix": mat.astype(int).tolist(),
    }
