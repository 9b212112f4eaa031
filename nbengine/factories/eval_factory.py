from __future__ import annotations

from nbengine.contracts.eval_configs import EvalModel
from nbengine.components.interfaces import Evaluator
from nbengine.components.evaluation.evaluators import ClassificationEvaluator

def make_evaluator(cfg: EvalModel) -> Evaluator:
    """
    Create an evaluator strategy from config.
    """
    return ClassificationEvaluator(cfg=cfg)
