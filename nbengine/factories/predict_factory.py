from __future__ import annotations
from nbengine.components.interfaces import Predictor
from nbengine.components.prediction.predictors import GaussianNBPredictor

def make_predictor() -> Predictor:
    """Create a prediction strategy."""
    return GaussianNBPredictor()
