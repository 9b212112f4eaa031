from __future__ import annotations

from typing import Any

import numpy as np

from nbengine.components.models.gaussian_nb import GaussianNBModel
from nbengine.core.shapes import coerce_feature_matrix

from .density import gaussian_log_density


def predict_log_scores(model: GaussianNBModel, X_test: Any) -> np.ndarray:
    """
    Log-posterior score of every row under every class (up to the shared evidence term).

    Parameters
    ----------
    model : GaussianNBModel
    X_test : array-like of shape (n_samples, n_features)

    Returns
    -------
    scores : ndarray of shape (n_samples, n_classes)
        Column k belongs to ``model.classes[k]``:
        ``log(prior) + sum_j log N(x_j; mean_j, var_j)``.

    Raises
    ------
    DimensionMismatchError
        If any row does not have ``model.n_features`` entries.
    """
    X = coerce_feature_matrix(X_test, expected_n_features=model.n_features, context="X_test")

    means = model.means          # (n_classes, n_features)
    variances = model.variances  # clamped
    # (n_samples, 1, n_features) against (n_classes, n_features)
    log_dens = gaussian_log_density(X[:, None, :], means[None, :, :], variances[None, :, :])
    return model.log_priors[None, :] + log_dens.sum(axis=2)


def predict_labels(model: GaussianNBModel, X_test: Any) -> np.ndarray:
    """
    Predict hard labels: the class with the largest log-posterior score.

    Ties go to the first class in ``model.classes`` (ascending label order),
    which is how ``np.argmax`` resolves equal maxima. A row whose scores are all
    ``-inf`` therefore still receives ``model.classes[0]``.

    Returns
    -------
    y_pred : ndarray of shape (n_samples,), dtype int64
    """
    scores = predict_log_scores(model, X_test)
    classes = np.asarray(model.classes, dtype=np.int64)
    if scores.shape[0] == 0:
        return classes[:0]
    return classes[np.argmax(scores, axis=1)]
