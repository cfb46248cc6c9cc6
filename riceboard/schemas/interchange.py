# riceboard/schemas/interchange.py

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from riceboard.schemas.feature import Feature


class SourceKind(str, Enum):
    DELIMITED = "delimited"
    STRUCTURED = "structured"


class ImportMode(str, Enum):
    APPEND = "append"
    REPLACE = "replace"


class RowError(BaseModel):
    """Import diagnostic tied to a 1-based input row."""
    row: int
    message: str


class ImportResult(BaseModel):
    features: List[Feature] = Field(default_factory=list)
    errors: List[RowError] = Field(default_factory=list)
