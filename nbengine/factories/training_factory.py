from __future__ import annotations
from typing import Optional

from nbengine.components.interfaces import Trainer
from nbengine.components.trainers.trainers import GaussianNBTrainer
from nbengine.contracts.model_configs import GaussianNBConfig

def make_trainer(cfg: Optional[GaussianNBConfig] = None) -> Trainer:
    """Create a training strategy. Today: Gaussian Naive Bayes."""
    return GaussianNBTrainer(cfg=cfg or GaussianNBConfig())
