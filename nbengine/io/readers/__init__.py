"""Parsing adapters (readers).

Readers are responsible for *format parsing* only. Label encoding lives in
:mod:`nbengine.io.labels`; shape checks live in :mod:`nbengine.core.shapes`.
"""

from .base import LabeledTable
from .tabular_reader import TabularReader, load_labeled_table

__all__ = ["LabeledTable", "TabularReader", "load_labeled_table"]
