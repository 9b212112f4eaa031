"""Configuration and result contracts.

Pydantic models and Literal-based choice types that validate run payloads.
Keep module imports explicit in most of the codebase:
    from nbengine.contracts.run_config import RunConfig
"""

from .choices import LabelMode, MetricName, SplitMode
from .eval_configs import EvalModel
from .model_configs import GaussianNBConfig
from .run_config import DataModel, RunConfig
from .split_configs import SplitHoldoutModel, SplitResubstitutionModel

__all__ = [
    "LabelMode",
    "MetricName",
    "SplitMode",
    "EvalModel",
    "GaussianNBConfig",
    "DataModel",
    "RunConfig",
    "SplitHoldoutModel",
    "SplitResubstitutionModel",
]
