from __future__ import annotations
from dataclasses import dataclass, field
import numpy as np

from nbengine.contracts.eval_configs import EvalModel
from nbengine.components.interfaces import Evaluator
from nbengine.components.evaluation.metrics import score as score_fn

@dataclass
class ClassificationEvaluator(Evaluator):
    """
    Scores hard labels with the metric named in EvalModel (accuracy by default).
    """
    cfg: EvalModel = field(default_factory=EvalModel)

    def score(self, y_true: np.ndarray, y_pred: np.ndarray) -> float:
        return score_fn(y_true, y_pred, metric=self.cfg.metric)
