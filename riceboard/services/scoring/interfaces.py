# riceboard/services/scoring/interfaces.py

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Protocol

from pydantic import BaseModel, Field


class ScoringFramework(str, Enum):
    """Supported scoring framework identifiers."""
    RICE = "RICE"


class ScoreInputs(BaseModel):
    """Resolved numeric inputs for scoring engines.

    Label resolution happens before this point (see calculator); a None field
    means the input is missing or could not be resolved.
    """
    reach: Optional[float] = None
    impact: Optional[float] = None
    confidence: Optional[float] = None
    effort: Optional[float] = None


class ScoreResult(BaseModel):
    """Result returned by a scoring engine.

    value_score: reach * impact * confidence
    effort_score: resolved effort
    overall_score: the primary prioritization metric; None when undefined
    components: resolved inputs used to derive scores
    warnings: non-fatal notes explaining an undefined score
    """
    value_score: Optional[float] = None
    effort_score: Optional[float] = None
    overall_score: Optional[float] = None

    components: Dict[str, Any] = Field(default_factory=dict)
    warnings: List[str] = Field(default_factory=list)


class ScoringEngine(Protocol):
    """Protocol that all scoring engines must satisfy."""

    framework: ScoringFramework

    def compute(self, inputs: ScoreInputs) -> ScoreResult:  # pragma: no cover - interface only
        ...


__all__ = [
    "ScoringFramework",
    "ScoreInputs",
    "ScoreResult",
    "ScoringEngine",
]
