# riceboard/services/feature_service.py

"""Snapshot operations over the caller-owned working set.

Every function takes the current list and returns a new one; the input list
and the Feature instances in it are never modified.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from riceboard.schemas.feature import EDITABLE_FIELDS, Feature, ScoredFeature
from riceboard.schemas.interchange import ImportMode
from riceboard.services.ranking import rank_features
from riceboard.services.scoring.calculator import compute_score
from riceboard.services.scoring.scales import DEFAULT_RICE_SCALES, RiceScales
from riceboard.services.scoring.utils import format_score
from riceboard.utils.clock import Clock, IdFactory, new_id, utc_now

logger = logging.getLogger("riceboard.services.features")


def new_feature(*, id_factory: IdFactory = new_id, now: Clock = utc_now) -> Feature:
    """A blank row as the editor creates it: no name, nothing scorable yet."""
    stamp = now()
    return Feature(id=id_factory(), name="", description="", created_at=stamp, updated_at=stamp)


def add_feature(
    features: Sequence[Feature],
    feature: Optional[Feature] = None,
    *,
    id_factory: IdFactory = new_id,
    now: Clock = utc_now,
) -> List[Feature]:
    if feature is None:
        feature = new_feature(id_factory=id_factory, now=now)
    logger.debug("features.added", extra={"feature_id": feature.id, "total": len(features) + 1})
    return [*features, feature]


def update_feature(
    features: Sequence[Feature],
    feature_id: str,
    field: str,
    value: Any,
    *,
    now: Clock = utc_now,
) -> List[Feature]:
    """Set one field on the matching feature and refresh its updated_at.

    Raises ValueError for fields that are not editable (id, timestamps, score)
    or for values the Feature model rejects. An unknown id changes nothing.
    """
    if field not in EDITABLE_FIELDS:
        raise ValueError(f"Field is not editable: {field}")

    out: List[Feature] = []
    for f in features:
        if f.id != feature_id:
            out.append(f)
            continue
        data = f.model_dump()
        data[field] = value
        data["updated_at"] = now()
        out.append(Feature.model_validate(data))
        logger.debug("features.updated", extra={"feature_id": feature_id, "reason": field})
    return out


def delete_feature(features: Sequence[Feature], feature_id: str) -> List[Feature]:
    return [f for f in features if f.id != feature_id]


def apply_import(
    features: Sequence[Feature],
    imported: Sequence[Feature],
    mode: ImportMode = ImportMode.APPEND,
) -> List[Feature]:
    """Merge imported features: append to the working set or replace it."""
    mode = ImportMode(mode)
    merged = list(imported) if mode == ImportMode.REPLACE else [*features, *imported]
    logger.info(
        "features.import_applied",
        extra={"mode": mode.value, "count": len(imported), "total": len(merged)},
    )
    return merged


def clear_features() -> List[Feature]:
    return []


def scored_view(
    features: Sequence[Feature],
    scales: RiceScales = DEFAULT_RICE_SCALES,
    decimals: int = 2,
) -> List[ScoredFeature]:
    """Ranked rows with full-precision scores and their display text."""
    rows: List[ScoredFeature] = []
    for rank, f in enumerate(rank_features(features, scales), start=1):
        score = compute_score(f, scales)
        rows.append(
            ScoredFeature(rank=rank, feature=f, score=score, score_display=format_score(score, decimals))
        )
    return rows


__all__ = [
    "new_feature",
    "add_feature",
    "update_feature",
    "delete_feature",
    "apply_import",
    "clear_features",
    "scored_view",
]
