from __future__ import annotations

from nbengine.contracts.run_config import DataModel
from nbengine.components.data_loaders.data_loaders import TabularLoader


def make_data_loader(cfg: DataModel) -> TabularLoader:
    """Return the delimited-text loader."""
    return TabularLoader(cfg)
