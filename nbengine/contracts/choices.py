from __future__ import annotations

"""Literal-based "choice" types used across contracts.

Keep this file dependency-free (stdlib + typing only).
"""

from typing import Literal, TypeAlias


# Hard-label classification metrics understood by the evaluator
MetricName: TypeAlias = Literal["accuracy", "balanced_accuracy", "f1_macro"]

# How the label column of a table is turned into integer codes
LabelMode: TypeAlias = Literal["auto", "int", "string"]

SplitMode: TypeAlias = Literal["resubstitution", "holdout"]

__all__ = ["MetricName", "LabelMode", "SplitMode"]
