from __future__ import annotations

"""Delimited text table reader (CSV/TSV/TXT) with a label column."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

import pandas as pd

from .base import LabeledTable, coerce_numeric_matrix


def _read_text_head(path: Path, n_lines: int = 5, encoding: Optional[str] = None) -> list[str]:
    enc = encoding or "utf-8"
    lines: list[str] = []
    with path.open("r", encoding=enc, errors="replace") as f:
        for _ in range(n_lines):
            line = f.readline()
            if not line:
                break
            lines.append(line.strip("\r\n"))
    return lines


def _infer_delimiter(sample_line: str) -> str:
    if "\t" in sample_line:
        return "\t"
    if "," in sample_line:
        return ","
    if ";" in sample_line:
        return ";"
    return "whitespace"


def _split_line(line: str, delimiter: str) -> list[str]:
    if delimiter == "whitespace":
        return [t for t in line.strip().split() if t != ""]
    return [t.strip() for t in line.split(delimiter)]


def _row_is_numeric(tokens: Sequence[str]) -> bool:
    if len(tokens) == 0:
        return False
    for t in tokens:
        if t == "":
            return False
        try:
            float(t)
        except ValueError:
            return False
    return True


def _without_column(tokens: list[str], column: int) -> list[str]:
    idx = column if column >= 0 else len(tokens) + column
    return [t for i, t in enumerate(tokens) if i != idx]


def load_labeled_table(
    file_path: Union[str, Path],
    *,
    delimiter: Optional[str] = None,
    has_header: Optional[bool] = None,
    label_column: int = -1,
    encoding: Optional[str] = None,
) -> LabeledTable:
    """Load a numeric feature table whose ``label_column`` holds class labels.

    - If has_header is None, a header is inferred when the first row's feature
      cells are not all numeric (the label cell is ignored for this check).
    - If delimiter is None, it is inferred from the first line.
    - Label cells are returned as stripped strings; encoding them is the
      caller's job.
    """

    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Table file not found: {path}")

    head_lines = _read_text_head(path, n_lines=2, encoding=encoding)
    first = head_lines[0] if head_lines else ""
    if not first.strip():
        raise ValueError(f"{path.name}: file is empty.")

    delim = delimiter
    if delim is None:
        delim = _infer_delimiter(first)
    if delim == "\\t":
        delim = "\t"

    tokens = _split_line(first, delim)
    if len(tokens) < 2:
        raise ValueError(f"{path.name}: need at least one feature column and one label column.")

    inferred_header = not _row_is_numeric(_without_column(tokens, label_column))
    use_header = inferred_header if has_header is None else bool(has_header)

    sep = r"\s+" if delim == "whitespace" else delim
    df = pd.read_csv(
        path.as_posix(),
        sep=sep,
        header=0 if use_header else None,
        dtype=str,
        encoding=encoding or "utf-8",
        engine="python",
        skip_blank_lines=True,
    )

    n_cols = df.shape[1]
    if not -n_cols <= label_column < n_cols:
        raise ValueError(f"{path.name}: label_column={label_column} out of range for {n_cols} columns.")
    label_idx = label_column % n_cols

    label_series = df.iloc[:, label_idx].str.strip()
    feat_df = df.drop(columns=df.columns[label_idx])

    feat_num = feat_df.apply(lambda col: pd.to_numeric(col.str.strip(), errors="coerce"))
    if feat_num.isna().to_numpy().any():
        n_bad = int(feat_num.isna().to_numpy().sum())
        raise ValueError(
            f"{path.name}: found {n_bad} non-numeric/missing feature cells after parsing. "
            "Clean the file or export as purely numeric values."
        )
    if label_series.isna().any():
        raise ValueError(f"{path.name}: label column has missing values.")

    features = coerce_numeric_matrix(feat_num.to_numpy(), context=f"Table '{path.name}'")

    feature_names: Optional[list[str]] = None
    label_name: Optional[str] = None
    if use_header:
        feature_names = [str(c) for c in feat_df.columns.tolist()]
        label_name = str(df.columns[label_idx])

    return LabeledTable(
        features=features,
        labels=label_series.to_numpy(dtype=str),
        feature_names=feature_names,
        label_name=label_name,
    )


@dataclass
class TabularReader:
    delimiter: Optional[str] = None
    has_header: Optional[bool] = None
    label_column: int = -1
    encoding: Optional[str] = None

    def read(self, path: Union[str, Path], **kwargs) -> LabeledTable:
        return load_labeled_table(
            path,
            delimiter=kwargs.get("delimiter", self.delimiter),
            has_header=kwargs.get("has_header", self.has_header),
            label_column=kwargs.get("label_column", self.label_column),
            encoding=kwargs.get("encoding", self.encoding),
        )
