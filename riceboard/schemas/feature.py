# riceboard/schemas/feature.py

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from riceboard.services.scoring.values import ScaleValue, scale_value_raw, to_scale_value

# Fields a caller may edit on an existing feature
EDITABLE_FIELDS = ("name", "description", "reach", "impact", "confidence", "effort")
SCALE_FIELDS = ("impact", "confidence", "effort")


class Feature(BaseModel):
    """One prioritizable item.

    impact/confidence/effort accept a raw number, a scale label, or the tagged
    variant; they always serialize back to the raw number or label. The score
    is never stored: see riceboard.services.scoring.calculator.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str = Field(..., min_length=1)
    name: str = ""
    description: Optional[str] = None

    reach: Optional[float] = None
    impact: Optional[ScaleValue] = None
    confidence: Optional[ScaleValue] = None
    effort: Optional[ScaleValue] = None

    created_at: datetime
    updated_at: datetime

    @field_validator("impact", "confidence", "effort", mode="before")
    @classmethod
    def coerce_scale_value(cls, v: Any) -> Any:
        sv = to_scale_value(v)
        return None if sv is None else sv.model_dump()

    @field_serializer("impact", "confidence", "effort")
    def serialize_scale_value(self, v: Any) -> Any:
        return scale_value_raw(v)


class ScoredFeature(BaseModel):
    """Display row: a feature with its derived score and rank."""
    rank: int
    feature: Feature
    score: Optional[float] = None
    score_display: str = ""


class PersistedState(BaseModel):
    """Snapshot payload for the local state store."""
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    version: int
    features: List[Feature] = Field(default_factory=list)
    last_saved_at: datetime

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
