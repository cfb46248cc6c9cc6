# riceboard/services/validation.py

"""Field-level acceptance checks and user-facing warnings.

The predicates work on raw values (numbers, label strings) as well as on the
tagged scale values stored on a Feature. Labels are matched case-sensitively
here; scoring itself resolves labels case-insensitively.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from riceboard.schemas.feature import Feature
from riceboard.services.scoring.scales import DEFAULT_RICE_SCALES, Dimension, RiceScales
from riceboard.services.scoring.values import NumericValue, resolve_scale_value, scale_value_raw


def is_valid_reach(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


def _is_allowed(value: Any, dimension: Dimension, scales: RiceScales) -> bool:
    return resolve_scale_value(value, dimension, scales, case_sensitive=True) is not None


def is_allowed_impact(value: Any, scales: RiceScales = DEFAULT_RICE_SCALES) -> bool:
    return _is_allowed(value, Dimension.IMPACT, scales)


def is_allowed_confidence(value: Any, scales: RiceScales = DEFAULT_RICE_SCALES) -> bool:
    return _is_allowed(value, Dimension.CONFIDENCE, scales)


def is_allowed_effort(value: Any, scales: RiceScales = DEFAULT_RICE_SCALES) -> bool:
    # zero/negative numeric effort is flagged here even though scoring only
    # treats it as "no score yet"
    resolved = resolve_scale_value(value, Dimension.EFFORT, scales, case_sensitive=True)
    return resolved is not None and resolved > 0


@dataclass(frozen=True)
class FieldIssue:
    field: str
    code: str
    message: str


# code -> consolidated banner text shown once for the whole list
SUMMARY_MESSAGES: Dict[str, str] = {
    "invalid_reach": "Some features have invalid reach values (must be non-negative numbers)",
    "missing_reach": "Some features are missing reach values",
    "missing_impact": "Some features are missing impact values",
    "missing_confidence": "Some features are missing confidence values",
    "missing_effort": "Some features are missing effort values",
    "invalid_impact": "Some features have unrecognized impact values",
    "invalid_confidence": "Some features have unrecognized confidence values",
    "invalid_effort": "Some features have invalid effort values (must be a size label or greater than 0)",
    "missing_name": "Some features are missing a name",
}

_SCALE_CHECKS = (
    ("impact", is_allowed_impact),
    ("confidence", is_allowed_confidence),
    ("effort", is_allowed_effort),
)


def feature_issues(feature: Feature, scales: RiceScales = DEFAULT_RICE_SCALES) -> List[FieldIssue]:
    issues: List[FieldIssue] = []
    named = bool(feature.name.strip())

    if feature.reach is not None and not is_valid_reach(feature.reach):
        issues.append(FieldIssue("reach", "invalid_reach", "Reach must be a non-negative number"))
    elif feature.reach is None and named:
        issues.append(FieldIssue("reach", "missing_reach", "Reach is missing"))

    for field, allowed in _SCALE_CHECKS:
        value = getattr(feature, field)
        if value is None:
            if named:
                issues.append(FieldIssue(field, f"missing_{field}", f"{field.capitalize()} is missing"))
            continue
        if allowed(value, scales):
            continue
        if field == "effort" and isinstance(value, NumericValue):
            message = "Effort must be greater than 0"
        else:
            message = f"Unrecognized {field}: {scale_value_raw(value)}"
        issues.append(FieldIssue(field, f"invalid_{field}", message))

    has_other_content = any(
        getattr(feature, f) not in (None, "")
        for f in ("description", "reach", "impact", "confidence", "effort")
    )
    if not named and has_other_content:
        issues.append(FieldIssue("name", "missing_name", "Name is missing"))
    return issues


def feature_warnings(feature: Feature, scales: RiceScales = DEFAULT_RICE_SCALES) -> List[str]:
    return [issue.message for issue in feature_issues(feature, scales)]


def summarize_warnings(features: Sequence[Feature], scales: RiceScales = DEFAULT_RICE_SCALES) -> List[str]:
    """De-duplicated banner messages for the whole working set, in first-seen order."""
    seen: List[str] = []
    for feature in features:
        for issue in feature_issues(feature, scales):
            summary = SUMMARY_MESSAGES[issue.code]
            if summary not in seen:
                seen.append(summary)
    return seen


__all__ = [
    "is_valid_reach",
    "is_allowed_impact",
    "is_allowed_confidence",
    "is_allowed_effort",
    "FieldIssue",
    "SUMMARY_MESSAGES",
    "feature_issues",
    "feature_warnings",
    "summarize_warnings",
]
