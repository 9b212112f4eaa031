from __future__ import annotations

"""Fitted Gaussian Naive Bayes model.

The model keeps the raw per-class sufficient statistics (count, feature sums and
squared sums) and derives mean/variance from them on demand. Everything is
read-only after construction; retraining builds a new model.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

import numpy as np

from nbengine.settings import DEFAULT_VAR_FLOOR


def _frozen(a: np.ndarray) -> np.ndarray:
    arr = np.array(a, dtype=float, copy=True)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class ClassStatistics:
    """Sufficient statistics for one class label."""

    label: int
    count: int
    feature_sum: np.ndarray
    feature_squared_sum: np.ndarray

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"ClassStatistics for label {self.label} needs count >= 1; got {self.count}.")
        object.__setattr__(self, "feature_sum", _frozen(self.feature_sum))
        object.__setattr__(self, "feature_squared_sum", _frozen(self.feature_squared_sum))
        if self.feature_sum.shape != self.feature_squared_sum.shape:
            raise ValueError("feature_sum and feature_squared_sum must have the same shape.")

    @property
    def n_features(self) -> int:
        return int(self.feature_sum.shape[0])

    @property
    def mean(self) -> np.ndarray:
        return self.feature_sum / self.count

    @property
    def variance(self) -> np.ndarray:
        """Population variance (divides by count, not count - 1).

        Can come out slightly negative through cancellation; use
        :meth:`clamped_variance` before evaluating a density.
        """
        mean = self.mean
        return self.feature_squared_sum / self.count - mean * mean

    def clamped_variance(self, floor: float = DEFAULT_VAR_FLOOR) -> np.ndarray:
        return np.maximum(self.variance, floor)


@dataclass(frozen=True, eq=False)
class GaussianNBModel:
    """Immutable result of one training call.

    ``classes`` is sorted ascending and is the iteration order used everywhere
    (priors, stacked parameters, score columns, tie-breaks).
    """

    statistics: Mapping[int, ClassStatistics]
    n_samples: int
    var_floor: float = DEFAULT_VAR_FLOOR
    classes: Tuple[int, ...] = field(init=False)
    priors: Mapping[int, float] = field(init=False)

    def __post_init__(self) -> None:
        if not self.statistics:
            raise ValueError("GaussianNBModel needs at least one class.")
        if self.var_floor <= 0:
            raise ValueError(f"var_floor must be > 0; got {self.var_floor}.")

        classes = tuple(sorted(int(k) for k in self.statistics))
        ordered = {c: self.statistics[c] for c in classes}

        widths = {s.n_features for s in ordered.values()}
        if len(widths) != 1:
            raise ValueError(f"All classes must share the same feature count; got {sorted(widths)}.")

        total = sum(s.count for s in ordered.values())
        if total != self.n_samples:
            raise ValueError(f"Class counts sum to {total}, but n_samples={self.n_samples}.")

        object.__setattr__(self, "classes", classes)
        object.__setattr__(self, "statistics", MappingProxyType(ordered))
        object.__setattr__(
            self,
            "priors",
            MappingProxyType({c: ordered[c].count / self.n_samples for c in classes}),
        )

    @property
    def n_features(self) -> int:
        return self.statistics[self.classes[0]].n_features

    @property
    def n_classes(self) -> int:
        return len(self.classes)

    # Stacked views, rows in `classes` order
    @property
    def means(self) -> np.ndarray:
        return np.vstack([self.statistics[c].mean for c in self.classes])

    @property
    def variances(self) -> np.ndarray:
        return np.vstack([self.statistics[c].clamped_variance(self.var_floor) for c in self.classes])

    @property
    def log_priors(self) -> np.ndarray:
        return np.log(np.array([self.priors[c] for c in self.classes], dtype=float))

    def degenerate_features(self) -> list[tuple[int, int]]:
        """(label, feature index) pairs whose raw variance is at or below the floor."""
        out: list[tuple[int, int]] = []
        for c in self.classes:
            idx = np.flatnonzero(self.statistics[c].variance <= self.var_floor)
            out.extend((c, int(j)) for j in idx)
        return out
