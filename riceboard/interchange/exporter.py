# riceboard/interchange/exporter.py

from __future__ import annotations

import json
import math
from typing import Any, Dict, List, Optional, Sequence, Union

from riceboard.interchange.models import FEATURE_HEADER_ORDER
from riceboard.schemas.feature import Feature
from riceboard.services.scoring.scales import DEFAULT_RICE_SCALES, Dimension, RiceScales
from riceboard.services.scoring.values import LabelValue, NumericValue

_QUOTE_TRIGGERS = (",", '"', "\n", "\r")


def _format_number(value: float) -> str:
    """Numeric text as a person would type it: 100 rather than 100.0."""
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _json_number(value: float) -> Union[int, float]:
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return int(value)
    return value


def _scale_text(value: Optional[Union[NumericValue, LabelValue]]) -> str:
    if value is None:
        return ""
    if isinstance(value, NumericValue):
        return _format_number(value.value)
    return value.label


def _confidence_text(value: Optional[Union[NumericValue, LabelValue]], scales: RiceScales) -> str:
    """A number whose text reads as confidence shorthand (80 -> "80%") keeps a decimal point."""
    text = _scale_text(value)
    if isinstance(value, NumericValue) and scales.canonical_label(Dimension.CONFIDENCE, f"{text}%") is not None:
        return repr(float(value.value))
    return text


def _scale_json(value: Optional[Union[NumericValue, LabelValue]]) -> Any:
    if isinstance(value, NumericValue):
        return _json_number(value.value)
    return value.label if value is not None else None


def escape_cell(text: str) -> str:
    """Quote a cell when it holds a delimiter, a quote, a line break or edge whitespace."""
    if any(t in text for t in _QUOTE_TRIGGERS) or text != text.strip():
        return '"' + text.replace('"', '""') + '"'
    return text


def to_delimited_text(features: Sequence[Feature], scales: RiceScales = DEFAULT_RICE_SCALES) -> str:
    """Render features as CSV in the order given (callers pass the ranked list)."""
    lines = [",".join(FEATURE_HEADER_ORDER)]
    for f in features:
        cells = [
            f.name or "",
            "" if f.reach is None else _format_number(f.reach),
            _scale_text(f.impact),
            _confidence_text(f.confidence, scales),
            _scale_text(f.effort),
            f.description or "",
        ]
        lines.append(",".join(escape_cell(c) for c in cells))
    return "\n".join(lines) + "\n"


def to_records(features: Sequence[Feature]) -> List[Dict[str, Any]]:
    """Interchange records: only defined fields; never id, timestamps or score."""
    records: List[Dict[str, Any]] = []
    for f in features:
        record: Dict[str, Any] = {"name": f.name}
        if f.description is not None:
            record["description"] = f.description
        if f.reach is not None and math.isfinite(f.reach):
            record["reach"] = _json_number(f.reach)
        for field in ("impact", "confidence", "effort"):
            value = getattr(f, field)
            if value is None or (isinstance(value, NumericValue) and not math.isfinite(value.value)):
                continue
            record[field] = _scale_json(value)
        records.append(record)
    return records


def to_structured(features: Sequence[Feature]) -> str:
    return json.dumps(to_records(features), indent=2, ensure_ascii=False)


__all__ = ["escape_cell", "to_delimited_text", "to_records", "to_structured"]
