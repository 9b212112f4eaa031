from __future__ import annotations
from typing import Optional, Union

from nbengine.components.interfaces import Splitter
from nbengine.components.splitters.splitters import HoldOutSplitter, ResubstitutionSplitter
from nbengine.contracts.split_configs import SplitHoldoutModel, SplitResubstitutionModel

def make_splitter(
    cfg: Union[SplitResubstitutionModel, SplitHoldoutModel],
    *,
    seed: Optional[int] = None,
) -> Splitter:
    if isinstance(cfg, SplitHoldoutModel):
        return HoldOutSplitter(cfg=cfg, seed=seed)
    if isinstance(cfg, SplitResubstitutionModel):
        return ResubstitutionSplitter()
    raise ValueError(f"Unsupported split mode: {getattr(cfg, 'mode', cfg)!r}")
