from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np
from sklearn.model_selection import train_test_split

from nbengine.contracts.split_configs import SplitHoldoutModel
from .types import Split
from ..interfaces import Splitter


@dataclass
class ResubstitutionSplitter(Splitter):
    """Train and test on the same rows."""

    def split(self, X: np.ndarray, y: np.ndarray) -> Iterator[Split]:
        yield Split(Xtr=X, Xte=X, ytr=y, yte=y)


@dataclass
class HoldOutSplitter(Splitter):
    cfg: SplitHoldoutModel
    seed: Optional[int] = None

    def split(self, X: np.ndarray, y: np.ndarray) -> Iterator[Split]:
        X = np.asarray(X)
        y = np.asarray(y).ravel()
        idx = np.arange(y.shape[0])
        stratify = y if (self.cfg.stratified and self.cfg.shuffle) else None
        idx_tr, idx_te = train_test_split(
            idx,
            train_size=self.cfg.train_frac,
            shuffle=self.cfg.shuffle,
            stratify=stratify,
            random_state=self.seed if self.cfg.shuffle else None,
        )
        yield Split(
            Xtr=X[idx_tr],
            Xte=X[idx_te],
            ytr=y[idx_tr],
            yte=y[idx_te],
        )
