from __future__ import annotations
from dataclasses import dataclass
import warnings

import numpy as np


@dataclass
class BasicClassificationSanity:
    warn_on_single_class: bool = True
    warn_on_few_per_class: bool = True
    min_per_class: int = 2  # warn if any class has fewer rows than this

    def check(self, X: np.ndarray, y: np.ndarray) -> None:
        y = np.asarray(y).ravel()
        classes, counts = np.unique(y, return_counts=True)
        if self.warn_on_single_class and classes.size == 1:
            warnings.warn(
                f"y contains a single class ({classes[0]}); every prediction will be that label.",
                UserWarning,
            )
        if self.warn_on_few_per_class and (counts < self.min_per_class).any():
            few = [int(c) for c, n in zip(classes, counts) if n < self.min_per_class]
            warnings.warn(
                f"Fewer than {self.min_per_class} rows for class(es) {few}; "
                "their variances will be degenerate and results may be unstable.",
                UserWarning,
            )
