from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field

from .choices import LabelMode
from .eval_configs import EvalModel
from .model_configs import GaussianNBConfig
from .split_configs import SplitHoldoutModel, SplitResubstitutionModel


class DataModel(BaseModel):
    # Relative paths are resolved against NBENGINE_DATA_ROOT
    path: str

    # Optional parsing hints for csv/tsv/txt tables
    delimiter: Optional[str] = None
    has_header: Optional[bool] = None
    encoding: Optional[str] = None

    # Column holding the class label; negative indices count from the end
    label_column: int = -1
    label_mode: LabelMode = "auto"


class RunConfig(BaseModel):
    data: DataModel
    split: Union[SplitResubstitutionModel, SplitHoldoutModel] = Field(
        default_factory=SplitResubstitutionModel, discriminator="mode"
    )
    model: GaussianNBConfig = Field(default_factory=GaussianNBConfig)
    eval: EvalModel = Field(default_factory=EvalModel)
