from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from nbengine.components.interfaces import DataLoader
from nbengine.contracts.run_config import DataModel
from nbengine.io.labels import LabelEncoder, encode_labels
from nbengine.io.readers import TabularReader
from nbengine.settings import resolve_data_path

logger = logging.getLogger(__name__)


@dataclass
class TabularLoader(DataLoader):
    """Load (X, y) from a delimited text file described by a DataModel.

    After :meth:`load`, ``encoder`` holds the string-label mapping (or None when
    the labels were already integers) and ``feature_names`` the header, if any.
    """

    cfg: DataModel
    encoder: Optional[LabelEncoder] = field(default=None, init=False)
    feature_names: Optional[list[str]] = field(default=None, init=False)

    def load(self) -> Tuple[np.ndarray, np.ndarray]:
        path = resolve_data_path(self.cfg.path)
        reader = TabularReader(
            delimiter=self.cfg.delimiter,
            has_header=self.cfg.has_header,
            label_column=self.cfg.label_column,
            encoding=self.cfg.encoding,
        )
        table = reader.read(path)
        y, self.encoder = encode_labels(table.labels, mode=self.cfg.label_mode)
        self.feature_names = table.feature_names

        logger.info(
            "Loaded %s: %d rows, %d features, %d distinct labels",
            path.name,
            table.features.shape[0],
            table.features.shape[1],
            np.unique(y).size,
        )
        return table.features, y
