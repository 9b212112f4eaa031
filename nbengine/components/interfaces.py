from __future__ import annotations
from typing import Any, Iterator, Protocol, Tuple

import numpy as np

from nbengine.components.models.gaussian_nb import GaussianNBModel
from nbengine.components.splitters.types import Split


class DataLoader(Protocol):
    def load(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return (X, y) with integer labels."""
        ...

class SanityChecker(Protocol):
    def check(self, X: np.ndarray, y: np.ndarray) -> None:
        """Raise/warn for basic dataset sanity (classes, sizes, etc.)."""
        ...

class Splitter(Protocol):
    def split(self, X: np.ndarray, y: np.ndarray) -> Iterator[Split]:
        """Yield train/test splits as :class:`nbengine.components.splitters.types.Split`."""
        ...

class Trainer(Protocol):
    def fit(self, X_train: Any, y_train: Any) -> GaussianNBModel:
        """Fit on (X_train, y_train) and return a new, immutable model."""
        ...

class Predictor(Protocol):
    def predict(self, model: GaussianNBModel, X_test: Any) -> np.ndarray:
        """Return one hard label per row of X_test."""
        ...

    def predict_scores(self, model: GaussianNBModel, X_test: Any) -> np.ndarray:
        """Return per-class log-posterior scores, columns in ``model.classes`` order."""
        ...

class Evaluator(Protocol):
    def score(self, y_true: np.ndarray, y_pred: np.ndarray) -> float:
        """Return a scalar metric in [0, 1]."""
        ...
