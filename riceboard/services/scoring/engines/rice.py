# riceboard/services/scoring/engines/rice.py

from __future__ import annotations

from typing import List

from riceboard.services.scoring.interfaces import ScoringFramework, ScoreInputs, ScoreResult
from riceboard.services.scoring.utils import is_finite, safe_div

REQUIRED_INPUTS = ("reach", "impact", "confidence", "effort")


class RiceScoringEngine:
    """RICE scoring engine.

    RICE formula: (Reach * Impact * Confidence) / Effort
    - Reach: numeric (>=0)
    - Impact, Confidence: any resolved number
    - Effort: numeric (>0)

    Any missing input, negative reach, non-positive effort or non-finite result
    leaves overall_score as None; the reason is reported in warnings.
    """

    framework = ScoringFramework.RICE

    def compute(self, inputs: ScoreInputs) -> ScoreResult:
        components = {name: getattr(inputs, name) for name in REQUIRED_INPUTS}
        warnings: List[str] = []

        missing = [name for name in REQUIRED_INPUTS if components[name] is None]
        if missing:
            warnings.append(f"RICE: missing or unresolved inputs: {', '.join(missing)}")
            return ScoreResult(components=components, warnings=warnings)

        reach = float(inputs.reach)  # type: ignore[arg-type]
        impact = float(inputs.impact)  # type: ignore[arg-type]
        confidence = float(inputs.confidence)  # type: ignore[arg-type]
        effort = float(inputs.effort)  # type: ignore[arg-type]

        if reach < 0:
            warnings.append("RICE: reach must be >= 0")
        if effort <= 0:
            warnings.append("RICE: effort must be > 0")
        if warnings:
            return ScoreResult(effort_score=effort, components=components, warnings=warnings)

        value = reach * impact * confidence
        overall, warn = safe_div(value, effort)
        if warn:
            warnings.append(f"RICE: {warn}")

        components["value_raw"] = value
        return ScoreResult(
            value_score=value if is_finite(value) else None,
            effort_score=effort,
            overall_score=overall,
            components=components,
            warnings=warnings,
        )


__all__ = ["RiceScoringEngine", "REQUIRED_INPUTS"]
