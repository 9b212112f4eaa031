from __future__ import annotations

import logging
import warnings
from typing import Any

import numpy as np

from nbengine.components.models.gaussian_nb import DEFAULT_VAR_FLOOR, ClassStatistics, GaussianNBModel
from nbengine.core.errors import DegenerateVarianceWarning
from nbengine.core.shapes import ensure_training_set

logger = logging.getLogger(__name__)


def fit_gaussian_nb(
    X_train: Any,
    y_train: Any,
    *,
    var_floor: float = DEFAULT_VAR_FLOOR,
) -> GaussianNBModel:
    """
    Fit a Gaussian Naive Bayes model in one pass over the training rows.

    Parameters
    ----------
    X_train : array-like of shape (n_samples, n_features)
    y_train : array-like of shape (n_samples,)
        Integer class labels. They need not be contiguous or start at zero.
    var_floor : float, default=1e-9
        Lower bound applied to every per-class feature variance.

    Returns
    -------
    model : GaussianNBModel
        Classes sorted ascending, priors ``count / n_samples``.

    Raises
    ------
    EmptyDatasetError
        If X_train has no rows (or no feature columns).
    DimensionMismatchError
        If rows are ragged or y_train does not have one label per row.
    ValueError
        If labels are not integers, features are not finite, or feature
        magnitudes are large enough that the squared sums overflow.

    Warns
    -----
    DegenerateVarianceWarning
        Once per call when any class/feature variance is at or below the floor.
    """
    X, y = ensure_training_set(X_train, y_train)
    n_samples, n_features = X.shape

    # np.unique sorts, so `classes` is already in ascending order
    classes, row_class = np.unique(y, return_inverse=True)
    row_class = row_class.ravel()

    counts = np.bincount(row_class, minlength=classes.size)
    sums = np.zeros((classes.size, n_features), dtype=float)
    sq_sums = np.zeros((classes.size, n_features), dtype=float)
    # Finite inputs can still overflow here (|x| above ~1e154 squares to inf)
    with np.errstate(over="ignore"):
        np.add.at(sums, row_class, X)
        np.add.at(sq_sums, row_class, X * X)
    if not (np.isfinite(sums).all() and np.isfinite(sq_sums).all()):
        raise ValueError(
            "Feature magnitudes overflow float64 sums/squared sums; rescale X_train before fitting."
        )

    statistics = {
        int(c): ClassStatistics(
            label=int(c),
            count=int(counts[k]),
            feature_sum=sums[k],
            feature_squared_sum=sq_sums[k],
        )
        for k, c in enumerate(classes)
    }
    model = GaussianNBModel(statistics=statistics, n_samples=n_samples, var_floor=var_floor)
    if not np.isfinite(model.variances).all():
        raise ValueError("Per-class feature variances are not finite; rescale X_train before fitting.")

    degenerate = model.degenerate_features()
    if degenerate:
        preview = ", ".join(f"label {c} / feature {j}" for c, j in degenerate[:10])
        more = f" (+{len(degenerate) - 10} more)" if len(degenerate) > 10 else ""
        warnings.warn(
            f"{len(degenerate)} class/feature variance(s) at or below {var_floor:g} were clamped: "
            f"{preview}{more}.",
            DegenerateVarianceWarning,
            stacklevel=2,
        )

    logger.debug(
        "Fitted GaussianNB: n_samples=%d n_features=%d classes=%s",
        n_samples,
        n_features,
        list(model.classes),
    )
    return model
