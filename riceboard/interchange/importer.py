# riceboard/interchange/importer.py

"""Map CSV rows or JSON objects to Feature records.

Errors never escape as exceptions: every problem becomes a RowError with a
1-based row number. For CSV the header is row 1; for JSON row N is the Nth
array element.
"""

from __future__ import annotations

import json
import logging
import math
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import ValidationError

from riceboard.interchange.csv_parser import parse_rows
from riceboard.interchange.models import FEATURE_HEADER_MAP, REQUIRED_HEADERS
from riceboard.schemas.feature import Feature, SCALE_FIELDS
from riceboard.schemas.interchange import ImportResult, RowError, SourceKind
from riceboard.services.scoring.scales import DEFAULT_RICE_SCALES, Dimension, RiceScales
from riceboard.services.scoring.values import LabelValue, NumericValue, resolve_scale_value
from riceboard.utils.clock import Clock, IdFactory, new_id, utc_now
from riceboard.utils.header_utils import resolve_indices

logger = logging.getLogger("riceboard.interchange.importer")

_ScaleCell = Optional[Union[NumericValue, LabelValue]]


def _to_float(value: Any) -> Optional[float]:
    """Convert a cell value to a finite float if possible, otherwise return None.

    Handles None, empty strings, numeric types, and ignores invalid text.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            f = float(value)
        except OverflowError:
            return None
    else:
        s = str(value).strip()
        # "1_000" is valid Python but not interchange numeric text
        if s == "" or "_" in s:
            return None
        try:
            f = float(s)
        except ValueError:
            return None
    return f if math.isfinite(f) else None


def _to_text(value: Any) -> str:
    return "" if value is None else str(value)


def _confidence_shorthand(text: str, scales: RiceScales) -> Optional[str]:
    """'80', '80%' and '80 %' all map to the '80%' label."""
    base = text[:-1].rstrip() if text.endswith("%") else text
    return scales.canonical_label(Dimension.CONFIDENCE, f"{base}%")


def _normalize_scale_text(text: str, dimension: Dimension, scales: RiceScales) -> _ScaleCell:
    """Resolve a non-empty cell to a number or a canonical label; None if unrecognized."""
    if dimension == Dimension.CONFIDENCE:
        label = _confidence_shorthand(text, scales)
        if label is not None:
            return LabelValue(label=label)
    num = _to_float(text)
    if num is not None:
        return NumericValue(value=num)
    label = scales.canonical_label(dimension, text)
    if label is not None:
        return LabelValue(label=label)
    return None


class _RowContext:
    """Collects field values and soft errors for one input row."""

    def __init__(self, row_num: int, scales: RiceScales) -> None:
        self.row_num = row_num
        self.scales = scales
        self.errors: List[RowError] = []

    def warn(self, message: str) -> None:
        self.errors.append(RowError(row=self.row_num, message=message))

    def reach(self, raw: Any) -> Optional[float]:
        # non-numeric reach is left unresolved without an error
        reach = _to_float(raw)
        if reach is not None and reach < 0:
            self.warn(f"Out-of-range reach: {_to_text(raw).strip()}")
            return None
        return reach

    def _check_effort(self, value: _ScaleCell, raw: Any) -> _ScaleCell:
        if isinstance(value, NumericValue) and value.value <= 0:
            self.warn(f"Out-of-range effort: {_to_text(raw).strip()}")
            return None
        return value

    def scale_cell(self, field: str, raw: Any) -> _ScaleCell:
        """CSV rule: resolve to a number or canonical label at import time."""
        text = _to_text(raw).strip()
        if text == "":
            return None
        dimension = Dimension(field)
        value = _normalize_scale_text(text, dimension, self.scales)
        if value is None:
            self.warn(f"Unrecognized {field}: {_to_text(raw)}")
            return None
        if dimension == Dimension.EFFORT:
            return self._check_effort(value, raw)
        return value

    def scale_value(self, field: str, raw: Any) -> _ScaleCell:
        """JSON rule: keep labels as given when they resolve; resolution is lazy."""
        if raw is None:
            return None
        dimension = Dimension(field)
        value: _ScaleCell
        if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
            value = None
        elif isinstance(raw, (int, float)):
            num = _to_float(raw)
            value = None if num is None else NumericValue(value=num)
        else:
            if raw.strip() == "":
                return None
            if resolve_scale_value(raw, dimension, self.scales) is not None:
                value = LabelValue(label=raw)
            else:
                value = _normalize_scale_text(raw.strip(), dimension, self.scales)
        if value is None:
            self.warn(f"Unrecognized {field}: {raw}")
            return None
        if dimension == Dimension.EFFORT:
            return self._check_effort(value, raw)
        return value


class FeatureImporter:
    """Normalizes parsed CSV rows or decoded JSON into Feature records."""

    def __init__(
        self,
        scales: RiceScales = DEFAULT_RICE_SCALES,
        id_factory: IdFactory = new_id,
        now: Clock = utc_now,
        max_rows: Optional[int] = None,
    ) -> None:
        self.scales = scales
        self.id_factory = id_factory
        self.now = now
        self.max_rows = max_rows

    def normalize(self, parsed_input: Any, source_kind: SourceKind) -> ImportResult:
        source_kind = SourceKind(source_kind)
        if source_kind == SourceKind.DELIMITED:
            result = self._from_delimited(parsed_input)
        else:
            result = self._from_structured(parsed_input)

        for err in result.errors:
            logger.debug(
                "import.row_error",
                extra={"source_kind": source_kind.value, "row": err.row, "reason": err.message},
            )
        logger.info(
            "import.done",
            extra={
                "source_kind": source_kind.value,
                "count": len(result.features),
                "errors": len(result.errors),
            },
        )
        return result

    # --- delimited -------------------------------------------------------

    def _from_delimited(self, parsed_input: Any) -> ImportResult:
        if isinstance(parsed_input, str):
            rows = parse_rows(parsed_input)
        elif isinstance(parsed_input, Sequence) and all(
            isinstance(r, Sequence) and not isinstance(r, str) for r in parsed_input
        ):
            rows = [[_to_text(c) for c in r] for r in parsed_input]
        else:
            return _structural("Delimited input must be text or a list of rows")

        if not rows:
            return ImportResult()

        header_idx = resolve_indices(rows[0], FEATURE_HEADER_MAP)
        missing = [h for h in REQUIRED_HEADERS if h not in header_idx]
        if missing:
            return _structural(f"Missing headers: {', '.join(missing)}")

        stamp = self.now()
        features: List[Feature] = []
        errors: List[RowError] = []
        for r, row in enumerate(rows[1:], start=2):
            if self._over_limit(r - 1, r, errors):
                break

            def get(h: str) -> str:
                idx = header_idx.get(h)
                if idx is None or idx >= len(row):
                    return ""
                return row[idx]

            name = get("name").strip()
            if not name:
                errors.append(RowError(row=r, message="Missing required field: name"))
                continue

            ctx = _RowContext(r, self.scales)
            fields: Dict[str, Any] = {
                "name": name,
                "reach": ctx.reach(get("reach")),
            }
            for field in SCALE_FIELDS:
                fields[field] = ctx.scale_cell(field, get(field))
            if "description" in header_idx:
                fields["description"] = get("description") or None

            feature = self._build(ctx, fields, stamp)
            errors.extend(ctx.errors)
            if feature is not None:
                features.append(feature)
        return ImportResult(features=features, errors=errors)

    # --- structured ------------------------------------------------------

    def _from_structured(self, parsed_input: Any) -> ImportResult:
        data = parsed_input
        if isinstance(parsed_input, (str, bytes, bytearray)):
            if not parsed_input.strip():
                return ImportResult()
            try:
                data = json.loads(parsed_input)
            except (ValueError, RecursionError) as e:
                return _structural(f"Invalid JSON: {e}")

        if not isinstance(data, list):
            return _structural("JSON must be an array of objects")

        stamp = self.now()
        features: List[Feature] = []
        errors: List[RowError] = []
        for r, obj in enumerate(data, start=1):
            if self._over_limit(r, r, errors):
                break
            if not isinstance(obj, dict):
                errors.append(RowError(row=r, message="Expected an object"))
                continue

            name = _to_text(obj.get("name")).strip()
            if not name:
                errors.append(RowError(row=r, message="Missing required field: name"))
                continue

            ctx = _RowContext(r, self.scales)
            fields: Dict[str, Any] = {
                "name": name,
                "reach": ctx.reach(obj.get("reach")),
                "description": _to_text(obj.get("description")) or None,
            }
            for field in SCALE_FIELDS:
                fields[field] = ctx.scale_value(field, obj.get(field))

            feature = self._build(ctx, fields, stamp)
            errors.extend(ctx.errors)
            if feature is not None:
                features.append(feature)
        return ImportResult(features=features, errors=errors)

    # --- helpers ---------------------------------------------------------

    def _over_limit(self, ordinal: int, row_num: int, errors: List[RowError]) -> bool:
        if self.max_rows is None or ordinal <= self.max_rows:
            return False
        errors.append(
            RowError(
                row=row_num,
                message=f"Row limit exceeded: only the first {self.max_rows} rows were imported",
            )
        )
        return True

    def _build(self, ctx: _RowContext, fields: Dict[str, Any], stamp: datetime) -> Optional[Feature]:
        try:
            return Feature(id=self.id_factory(), created_at=stamp, updated_at=stamp, **fields)
        except ValidationError as e:
            ctx.warn(f"Invalid row: {e.errors()[0]['msg']}")
            return None


def _structural(message: str) -> ImportResult:
    return ImportResult(features=[], errors=[RowError(row=1, message=message)])


def normalize(
    parsed_input: Any,
    source_kind: SourceKind,
    *,
    scales: RiceScales = DEFAULT_RICE_SCALES,
    id_factory: IdFactory = new_id,
    now: Clock = utc_now,
    max_rows: Optional[int] = None,
) -> ImportResult:
    """Normalize CSV rows (or CSV text) or JSON (decoded or text) into features + row errors."""
    importer = FeatureImporter(scales=scales, id_factory=id_factory, now=now, max_rows=max_rows)
    return importer.normalize(parsed_input, source_kind)


def import_csv(text: str, **kwargs: Any) -> ImportResult:
    return normalize(text, SourceKind.DELIMITED, **kwargs)


def import_json(text: str, **kwargs: Any) -> ImportResult:
    return normalize(text, SourceKind.STRUCTURED, **kwargs)


__all__ = ["FeatureImporter", "normalize", "import_csv", "import_json"]
