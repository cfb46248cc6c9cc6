# riceboard/services/ranking.py

"""Total order over features: RICE score desc, then lowest effort, then
highest impact, then name."""

from __future__ import annotations

from functools import cmp_to_key
from typing import List, Optional, Sequence

from riceboard.schemas.feature import Feature
from riceboard.services.scoring.calculator import compute_score
from riceboard.services.scoring.scales import DEFAULT_RICE_SCALES, Dimension, RiceScales
from riceboard.services.scoring.values import resolve_scale_value

_NEG_INF = float("-inf")
_POS_INF = float("inf")


def _or(value: Optional[float], fallback: float) -> float:
    return fallback if value is None else value


def compare(a: Feature, b: Feature, scales: RiceScales = DEFAULT_RICE_SCALES) -> int:
    """Comparator for sorting: negative if a sorts first, positive if b does, 0 if equal.

    Undefined score sorts as -inf, unresolved effort as +inf, unresolved impact
    as -inf. The final key is a case-sensitive comparison of names.
    """
    score_a = _or(compute_score(a, scales), _NEG_INF)
    score_b = _or(compute_score(b, scales), _NEG_INF)
    if score_a != score_b:
        # descending
        return 1 if score_a < score_b else -1

    effort_a = _or(resolve_scale_value(a.effort, Dimension.EFFORT, scales), _POS_INF)
    effort_b = _or(resolve_scale_value(b.effort, Dimension.EFFORT, scales), _POS_INF)
    if effort_a != effort_b:
        return -1 if effort_a < effort_b else 1

    impact_a = _or(resolve_scale_value(a.impact, Dimension.IMPACT, scales), _NEG_INF)
    impact_b = _or(resolve_scale_value(b.impact, Dimension.IMPACT, scales), _NEG_INF)
    if impact_a != impact_b:
        return 1 if impact_a < impact_b else -1

    name_a = a.name or ""
    name_b = b.name or ""
    return (name_a > name_b) - (name_a < name_b)


def rank_features(features: Sequence[Feature], scales: RiceScales = DEFAULT_RICE_SCALES) -> List[Feature]:
    """Return a new list in priority order; the input sequence is not modified."""
    return sorted(features, key=cmp_to_key(lambda x, y: compare(x, y, scales)))


__all__ = ["compare", "rank_features"]
