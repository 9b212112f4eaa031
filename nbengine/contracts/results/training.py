from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from nbengine.contracts.choices import MetricName, SplitMode

from .common import JSONDict, ResultModel


class ClassSummary(ResultModel):
    """Fitted parameters of one class."""

    label: int
    # Original token when labels were encoded from strings
    name: Optional[str] = None
    count: int
    prior: float
    mean: List[float]
    variance: List[float]


class TrainResult(ResultModel):
    """Fit + predict + score on one dataset."""

    metric_name: MetricName
    metric_value: float
    accuracy: float

    split_mode: SplitMode
    n_train: int
    n_test: int
    n_features: int

    classes: List[ClassSummary] = Field(default_factory=list)
    confusion: JSONDict = Field(default_factory=dict)
    notes: List[str] = Field(default_factory=list)
