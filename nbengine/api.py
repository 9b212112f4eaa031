"""Public nbengine API.

This module is the **stable public surface**. Prefer importing from here
instead of reaching into internal subpackages:

    from nbengine.api import fit, predict, accuracy
"""

from __future__ import annotations

from nbengine.components.evaluation.metrics import accuracy
from nbengine.components.models.gaussian_nb import ClassStatistics, GaussianNBModel
from nbengine.components.prediction import gaussian_density, gaussian_log_density, predict_log_scores
from nbengine.components.prediction.predicting import predict_labels as predict
from nbengine.components.trainers.fitting import fit_gaussian_nb as fit
from nbengine.core.errors import DegenerateVarianceWarning, DimensionMismatchError, EmptyDatasetError
from nbengine.io.labels import LabelEncoder, encode_labels
from nbengine.io.readers import load_labeled_table
from nbengine.settings import DEFAULT_VAR_FLOOR
from nbengine.use_cases.classification import run_classification, run_classification_on_arrays

__all__ = [
    "fit",
    "predict",
    "predict_log_scores",
    "accuracy",
    "gaussian_density",
    "gaussian_log_density",
    "ClassStatistics",
    "GaussianNBModel",
    "DEFAULT_VAR_FLOOR",
    "EmptyDatasetError",
    "DimensionMismatchError",
    "DegenerateVarianceWarning",
    "LabelEncoder",
    "encode_labels",
    "load_labeled_table",
    "run_classification",
    "run_classification_on_arrays",
]
