# riceboard/services/scoring/registry.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from riceboard.services.scoring.interfaces import ScoringFramework, ScoringEngine
from riceboard.services.scoring.engines import RiceScoringEngine


@dataclass(frozen=True)
class FrameworkInfo:
    name: ScoringFramework
    engine: ScoringEngine


SCORING_FRAMEWORKS: Dict[ScoringFramework, FrameworkInfo] = {
    ScoringFramework.RICE: FrameworkInfo(
        name=ScoringFramework.RICE,
        engine=RiceScoringEngine(),
    ),
}


def get_engine(framework: ScoringFramework) -> ScoringEngine:
    info = SCORING_FRAMEWORKS.get(framework)
    if not info:
        raise ValueError(f"Unknown scoring framework: {framework}")
    return info.engine


__all__ = [
    "FrameworkInfo",
    "SCORING_FRAMEWORKS",
    "get_engine",
]
