from __future__ import annotations

from typing import Literal
from pydantic import BaseModel, Field

class SplitResubstitutionModel(BaseModel):
    """Evaluate on the training rows themselves."""
    mode: Literal["resubstitution"] = "resubstitution"

class SplitHoldoutModel(BaseModel):
    mode: Literal["holdout"] = "holdout"
    train_frac: float = Field(default=0.75, gt=0.0, lt=1.0)
    stratified: bool = True
    shuffle: bool = True
