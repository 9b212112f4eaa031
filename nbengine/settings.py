from __future__ import annotations

"""Environment-driven defaults.

Read lazily so tests (and scripts) can set variables before the first call.

- NBENGINE_VAR_FLOOR   lower bound for per-class feature variances (default 1e-9)
- NBENGINE_DATA_ROOT   base directory for relative dataset paths (default ".")
- NBENGINE_LOG_LEVEL   logging level used by the local scripts (default "INFO")
"""

import os
from pathlib import Path

DEFAULT_VAR_FLOOR = 1e-9


def default_var_floor() -> float:
    raw = os.getenv("NBENGINE_VAR_FLOOR", "").strip()
    if not raw:
        return DEFAULT_VAR_FLOOR
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"NBENGINE_VAR_FLOOR must be a number; got {raw!r}.") from e
    if value <= 0:
        raise ValueError(f"NBENGINE_VAR_FLOOR must be > 0; got {value}.")
    return value


def data_root() -> Path:
    return Path(os.getenv("NBENGINE_DATA_ROOT", ".")).expanduser()


def resolve_data_path(path: str) -> Path:
    p = Path(path).expanduser()
    if p.is_absolute():
        return p
    return data_root() / p


def log_level() -> str:
    return os.getenv("NBENGINE_LOG_LEVEL", "INFO").upper()
