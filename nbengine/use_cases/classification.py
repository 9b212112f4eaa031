from __future__ import annotations

"""Fit / predict / score orchestration (use-case).

Loads a dataset, checks it, splits it, trains a Gaussian Naive Bayes model,
predicts the test rows and scores them. Warnings raised while checking and
fitting are recorded in ``TrainResult.notes`` and logged.
"""

import logging
import warnings
from typing import Any, List, Optional, Sequence

import numpy as np

from nbengine.components.evaluation.metrics import accuracy, confusion
from nbengine.components.models.gaussian_nb import GaussianNBModel
from nbengine.contracts.eval_configs import EvalModel
from nbengine.contracts.model_configs import GaussianNBConfig
from nbengine.contracts.results.training import ClassSummary, TrainResult
from nbengine.contracts.run_config import RunConfig
from nbengine.contracts.split_configs import SplitResubstitutionModel
from nbengine.core.shapes import ensure_training_set
from nbengine.factories.data_loading_factory import make_data_loader
from nbengine.factories.eval_factory import make_evaluator
from nbengine.factories.predict_factory import make_predictor
from nbengine.factories.sanity_factory import make_sanity_checker
from nbengine.factories.split_factory import make_splitter
from nbengine.factories.training_factory import make_trainer

logger = logging.getLogger(__name__)


def _class_summaries(model: GaussianNBModel, class_names: Optional[Sequence[str]]) -> List[ClassSummary]:
    out: List[ClassSummary] = []
    for c in model.classes:
        stats = model.statistics[c]
        name = None
        if class_names is not None and 0 <= c < len(class_names):
            name = str(class_names[c])
        out.append(
            ClassSummary(
                label=c,
                name=name,
                count=stats.count,
                prior=float(model.priors[c]),
                mean=[float(v) for v in stats.mean],
                variance=[float(v) for v in stats.clamped_variance(model.var_floor)],
            )
        )
    return out


def run_classification_on_arrays(
    X: Any,
    y: Any,
    *,
    split: Any = None,
    model_cfg: Optional[GaussianNBConfig] = None,
    eval_cfg: Optional[EvalModel] = None,
    class_names: Optional[Sequence[str]] = None,
) -> TrainResult:
    """Same as :func:`run_classification` for an in-memory (X, y)."""

    split_cfg = split if split is not None else SplitResubstitutionModel()
    model_cfg = model_cfg or GaussianNBConfig()
    eval_cfg = eval_cfg or EvalModel()

    X, y = ensure_training_set(X, y)

    notes: List[str] = []
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")

        # --- Checks ----------------------------------------------------------
        make_sanity_checker().check(X, y)

        # --- Split -----------------------------------------------------------
        splitter = make_splitter(split_cfg, seed=eval_cfg.seed)
        fold = next(iter(splitter.split(X, y)))

        # --- Fit -------------------------------------------------------------
        model = make_trainer(model_cfg).fit(fold.Xtr, fold.ytr)

    for w in caught:
        msg = f"{w.category.__name__}: {w.message}"
        logger.warning(msg)
        notes.append(msg)

    # --- Predict / score -----------------------------------------------------
    y_pred = make_predictor().predict(model, fold.Xte)
    metric_value = make_evaluator(eval_cfg).score(fold.yte, y_pred)
    acc = accuracy(y_pred, fold.yte)

    logger.info(
        "GaussianNB %s: n_train=%d n_test=%d %s=%.4f",
        split_cfg.mode,
        fold.Xtr.shape[0],
        fold.Xte.shape[0],
        eval_cfg.metric,
        metric_value,
    )

    labels = sorted(set(model.classes) | {int(v) for v in np.unique(fold.yte)})
    return TrainResult(
        metric_name=eval_cfg.metric,
        metric_value=float(metric_value),
        accuracy=float(acc),
        split_mode=split_cfg.mode,
        n_train=int(fold.Xtr.shape[0]),
        n_test=int(fold.Xte.shape[0]),
        n_features=model.n_features,
        classes=_class_summaries(model, class_names),
        confusion=confusion(fold.yte, y_pred, labels=labels),
        notes=notes,
    )


def run_classification(run_config: RunConfig) -> TrainResult:
    """Load ``run_config.data``, fit a Gaussian Naive Bayes model and score it."""

    cfg = run_config

    # --- Load data -----------------------------------------------------------
    loader = make_data_loader(cfg.data)
    X, y = loader.load()
    class_names = loader.encoder.classes_ if loader.encoder is not None else None

    return run_classification_on_arrays(
        X,
        y,
        split=cfg.split,
        model_cfg=cfg.model,
        eval_cfg=cfg.eval,
        class_names=class_names,
    )
