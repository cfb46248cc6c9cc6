# riceboard/services/scoring/calculator.py

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from riceboard.services.scoring.interfaces import ScoreInputs, ScoreResult, ScoringFramework
from riceboard.services.scoring.registry import get_engine
from riceboard.services.scoring.scales import DEFAULT_RICE_SCALES, Dimension, RiceScales
from riceboard.services.scoring.values import resolve_scale_value

if TYPE_CHECKING:
    from riceboard.schemas.feature import Feature

logger = logging.getLogger("riceboard.services.scoring")


def build_score_inputs(feature: "Feature", scales: RiceScales = DEFAULT_RICE_SCALES) -> ScoreInputs:
    """Map Feature fields -> resolved ScoreInputs (None for anything unresolved)."""
    return ScoreInputs(
        reach=feature.reach,
        impact=resolve_scale_value(feature.impact, Dimension.IMPACT, scales),
        confidence=resolve_scale_value(feature.confidence, Dimension.CONFIDENCE, scales),
        effort=resolve_scale_value(feature.effort, Dimension.EFFORT, scales),
    )


def score_feature(feature: "Feature", scales: RiceScales = DEFAULT_RICE_SCALES) -> ScoreResult:
    inputs = build_score_inputs(feature, scales)
    result = get_engine(ScoringFramework.RICE).compute(inputs)
    logger.debug(
        "scoring.computed",
        extra={
            "feature_id": feature.id,
            "overall_score": result.overall_score,
            "warning": "; ".join(result.warnings) or None,
        },
    )
    return result


def compute_score(feature: "Feature", scales: RiceScales = DEFAULT_RICE_SCALES) -> Optional[float]:
    """RICE score at full precision, or None when the feature cannot be scored."""
    return score_feature(feature, scales).overall_score


__all__ = ["build_score_inputs", "score_feature", "compute_score"]
