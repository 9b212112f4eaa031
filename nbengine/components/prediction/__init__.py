"""Prediction components (compute layer).

Public API:
- predict_labels
- predict_log_scores
- gaussian_density / gaussian_log_density
"""

from .density import gaussian_density, gaussian_log_density
from .predicting import predict_labels, predict_log_scores

__all__ = [
    "predict_labels",
    "predict_log_scores",
    "gaussian_density",
    "gaussian_log_density",
]
