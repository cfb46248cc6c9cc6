# riceboard/api/schemas/features.py

from __future__ import annotations

from typing import Dict, List, Literal

from pydantic import BaseModel, Field

from riceboard.schemas.feature import Feature, ScoredFeature

InterchangeFormat = Literal["csv", "json"]


class RankRequest(BaseModel):
    features: List[Feature] = Field(default_factory=list)


class RankResponse(BaseModel):
    rows: List[ScoredFeature] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class ImportRequest(BaseModel):
    format: InterchangeFormat
    content: str


class ExportRequest(BaseModel):
    format: InterchangeFormat
    features: List[Feature] = Field(default_factory=list)
    # rank before rendering; set False to keep the caller's order
    ranked: bool = True


class ScalesResponse(BaseModel):
    reach_unit_label: str
    impact: Dict[str, float]
    confidence: Dict[str, float]
    effort: Dict[str, float]
