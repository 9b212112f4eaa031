"""Result contracts (outputs of use-cases)."""

from .common import JSONDict, ResultModel
from .training import ClassSummary, TrainResult

__all__ = ["ResultModel", "JSONDict", "ClassSummary", "TrainResult"]
