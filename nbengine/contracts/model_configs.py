from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from nbengine.settings import default_var_floor


class GaussianNBConfig(BaseModel):
    algo: Literal["gnb"] = "gnb"

    # Per-class feature variances are clamped to at least this value
    var_floor: float = Field(default_factory=default_var_floor, gt=0)
