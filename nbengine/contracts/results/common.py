from __future__ import annotations

"""Result contracts.

These models represent *outputs* of the use-case layer. Field types stay
JSON-friendly (lists, dicts, scalars) and extra fields are forbidden so the
payload cannot drift silently.

Note: contracts should only depend on stdlib + pydantic.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class ResultModel(BaseModel):
    """Base class for result contracts (strict by default)."""

    model_config = ConfigDict(extra="forbid")


JSONDict = Dict[str, Any]
