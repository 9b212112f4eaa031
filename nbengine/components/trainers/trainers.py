from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from nbengine.components.interfaces import Trainer
from nbengine.components.models.gaussian_nb import GaussianNBModel
from nbengine.components.trainers.fitting import fit_gaussian_nb
from nbengine.contracts.model_configs import GaussianNBConfig

@dataclass
class GaussianNBTrainer(Trainer):
    """Adapter around fit_gaussian_nb; each call returns a fresh model."""
    cfg: GaussianNBConfig = field(default_factory=GaussianNBConfig)

    def fit(self, X_train: Any, y_train: Any) -> GaussianNBModel:
        return fit_gaussian_nb(X_train, y_train, var_floor=self.cfg.var_floor)
