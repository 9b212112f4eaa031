from __future__ import annotations

import math

import numpy as np

_LOG_2PI = math.log(2.0 * math.pi)


def gaussian_density(x, mean, variance):
    """Normal probability density N(x; mean, variance).

    Works element-wise on scalars or broadcastable arrays. ``variance`` must be
    strictly positive; clamp it first.
    """
    x = np.asarray(x, dtype=float)
    mean = np.asarray(mean, dtype=float)
    variance = np.asarray(variance, dtype=float)
    if np.any(variance <= 0):
        raise ValueError("variance must be > 0; apply the variance floor before evaluating the density.")
    return np.exp(-((x - mean) ** 2) / (2.0 * variance)) / np.sqrt(2.0 * np.pi * variance)


def gaussian_log_density(x, mean, variance):
    """log N(x; mean, variance) in closed form.

    Equal to ``log(gaussian_density(...))`` wherever the density does not
    underflow, and finite where it does.
    """
    x = np.asarray(x, dtype=float)
    mean = np.asarray(mean, dtype=float)
    variance = np.asarray(variance, dtype=float)
    if np.any(variance <= 0):
        raise ValueError("variance must be > 0; apply the variance floor before evaluating the density.")
    return -0.5 * (_LOG_2PI + np.log(variance)) - ((x - mean) ** 2) / (2.0 * variance)
