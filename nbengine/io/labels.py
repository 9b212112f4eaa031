from __future__ import annotations

"""Map raw label tokens to integer class codes."""

from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np

from nbengine.contracts.choices import LabelMode


class LabelEncoder:
    """First-seen-order string -> int mapping.

    Codes start at 0 and follow the order in which tokens first appear. The
    mapping belongs to the encoder instance; two loads never share state.
    """

    def __init__(self) -> None:
        self._codes: Dict[str, int] = {}

    @property
    def classes_(self) -> List[str]:
        return list(self._codes)

    def fit_transform(self, tokens: Iterable[str]) -> np.ndarray:
        out = []
        for tok in tokens:
            key = str(tok)
            if key not in self._codes:
                self._codes[key] = len(self._codes)
            out.append(self._codes[key])
        return np.asarray(out, dtype=np.int64)

    def transform(self, tokens: Iterable[str]) -> np.ndarray:
        out = []
        for tok in tokens:
            key = str(tok)
            if key not in self._codes:
                raise ValueError(f"Unknown label {key!r}; known: {self.classes_}")
            out.append(self._codes[key])
        return np.asarray(out, dtype=np.int64)

    def inverse_transform(self, codes: Iterable[int]) -> List[str]:
        names = {v: k for k, v in self._codes.items()}
        try:
            return [names[int(c)] for c in codes]
        except KeyError as e:
            raise ValueError(f"Unknown label code {e.args[0]}") from e


def _parse_int_token(tok: str) -> Optional[int]:
    try:
        return int(tok)
    except ValueError:
        pass
    try:
        f = float(tok)
    except ValueError:
        return None
    if f.is_integer():
        return int(f)
    return None


def encode_labels(
    tokens: Sequence[str],
    *,
    mode: LabelMode = "auto",
) -> tuple[np.ndarray, Optional[LabelEncoder]]:
    """Turn a label column into integer codes.

    - ``"int"``: every token must be an integer (``"1"`` or ``"1.0"``).
    - ``"string"``: tokens go through a fresh :class:`LabelEncoder`.
    - ``"auto"``: integers when every token parses as one, else strings.

    Returns (codes, encoder); encoder is None when labels were integers.
    """

    if mode not in ("auto", "int", "string"):
        raise ValueError(f"Unknown label mode {mode!r}")

    if mode in ("auto", "int"):
        parsed = [_parse_int_token(str(t).strip()) for t in tokens]
        if all(p is not None for p in parsed):
            return np.asarray(parsed, dtype=np.int64), None
        if mode == "int":
            bad = next(str(t) for t, p in zip(tokens, parsed) if p is None)
            raise ValueError(f"label_mode='int' but found non-integer label {bad!r}.")

    encoder = LabelEncoder()
    return encoder.fit_transform(str(t).strip() for t in tokens), encoder
