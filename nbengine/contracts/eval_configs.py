from __future__ import annotations

from typing import Optional
from pydantic import BaseModel

from .choices import MetricName

class EvalModel(BaseModel):
    metric: MetricName = "accuracy"
    seed: Optional[int] = None
