from .interfaces import (
    ScoringFramework,
    ScoreInputs,
    ScoreResult,
    ScoringEngine,
)
from .registry import (
    FrameworkInfo,
    SCORING_FRAMEWORKS,
    get_engine,
)
from .scales import (
    DEFAULT_RICE_SCALES,
    ConfidenceLabel,
    Dimension,
    EffortSize,
    ImpactLabel,
    RiceScales,
)

__all__ = [
    "ScoringFramework",
    "ScoreInputs",
    "ScoreResult",
    "ScoringEngine",
    "FrameworkInfo",
    "SCORING_FRAMEWORKS",
    "get_engine",
    "DEFAULT_RICE_SCALES",
    "ConfidenceLabel",
    "Dimension",
    "EffortSize",
    "ImpactLabel",
    "RiceScales",
]
