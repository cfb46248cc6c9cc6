# riceboard/services/scoring/scales.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class ImpactLabel(str, Enum):
    MASSIVE = "Massive"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    MINIMAL = "Minimal"


class ConfidenceLabel(str, Enum):
    FULL = "100%"
    HIGH = "80%"
    MEDIUM = "50%"


class EffortSize(str, Enum):
    XS = "XS"
    S = "S"
    M = "M"
    L = "L"
    XL = "XL"


class Dimension(str, Enum):
    """Scorable dimensions that accept either a label or a raw number."""
    IMPACT = "impact"
    CONFIDENCE = "confidence"
    EFFORT = "effort"


def _frozen(table: Mapping[str, float]) -> Mapping[str, float]:
    return MappingProxyType(dict(table))


@dataclass(frozen=True)
class RiceScales:
    """Label -> numeric weight tables for RICE inputs.

    Tables are keyed by canonical label text. Lookups through ``lookup`` are
    case-insensitive; ``canonical_label`` returns the stored spelling.
    """
    reach_unit_label: str
    impact: Mapping[str, float] = field(default_factory=dict)
    confidence: Mapping[str, float] = field(default_factory=dict)
    effort: Mapping[str, float] = field(default_factory=dict)

    def table(self, dimension: Dimension) -> Mapping[str, float]:
        if dimension == Dimension.IMPACT:
            return self.impact
        if dimension == Dimension.CONFIDENCE:
            return self.confidence
        if dimension == Dimension.EFFORT:
            return self.effort
        raise ValueError(f"Unknown scale dimension: {dimension}")

    def canonical_label(self, dimension: Dimension, text: str) -> Optional[str]:
        wanted = (text or "").strip().lower()
        for label in self.table(dimension):
            if label.lower() == wanted:
                return label
        return None

    def lookup(self, dimension: Dimension, text: str) -> Optional[float]:
        label = self.canonical_label(dimension, text)
        if label is None:
            return None
        return self.table(dimension)[label]


DEFAULT_RICE_SCALES = RiceScales(
    reach_unit_label="customers per quarter",
    impact=_frozen({
        ImpactLabel.MASSIVE.value: 3,
        ImpactLabel.HIGH.value: 2,
        ImpactLabel.MEDIUM.value: 1,
        ImpactLabel.LOW.value: 0.5,
        ImpactLabel.MINIMAL.value: 0.25,
    }),
    confidence=_frozen({
        ConfidenceLabel.FULL.value: 1.0,
        ConfidenceLabel.HIGH.value: 0.8,
        ConfidenceLabel.MEDIUM.value: 0.5,
    }),
    effort=_frozen({
        EffortSize.XS.value: 0.5,
        EffortSize.S.value: 1,
        EffortSize.M.value: 2,
        EffortSize.L.value: 4,
        EffortSize.XL.value: 8,
    }),
)


__all__ = [
    "ImpactLabel",
    "ConfidenceLabel",
    "EffortSize",
    "Dimension",
    "RiceScales",
    "DEFAULT_RICE_SCALES",
]
