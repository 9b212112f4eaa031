from __future__ import annotations
from dataclasses import dataclass
from typing import Any
import numpy as np

from nbengine.components.interfaces import Predictor
from nbengine.components.models.gaussian_nb import GaussianNBModel
from nbengine.components.prediction import predict_labels, predict_log_scores

@dataclass
class GaussianNBPredictor(Predictor):
    """
    Thin adapter around the prediction helpers.
    No state; reads the model only.
    """

    def predict(self, model: GaussianNBModel, X_test: Any) -> np.ndarray:
        return predict_labels(model, X_test)

    def predict_scores(self, model: GaussianNBModel, X_test: Any) -> np.ndarray:
        return predict_log_scores(model, X_test)
