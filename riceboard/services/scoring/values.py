# riceboard/services/scoring/values.py

"""Label-or-number values for the impact, confidence and effort inputs.

Manual entry stores scale labels ("High", "80%", "M") while imported data may
carry raw numbers. Both are kept as a tagged variant so that every consumer
resolves them through ``resolve_scale_value`` instead of inspecting types.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from riceboard.services.scoring.scales import DEFAULT_RICE_SCALES, Dimension, RiceScales


class NumericValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["numeric"] = "numeric"
    value: float

    def raw(self) -> float:
        return self.value


class LabelValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["label"] = "label"
    label: str

    def raw(self) -> str:
        return self.label


ScaleValue = Annotated[Union[NumericValue, LabelValue], Field(discriminator="kind")]

_SCALE_VALUE_ADAPTER: TypeAdapter = TypeAdapter(ScaleValue)


def to_scale_value(raw: Any) -> Optional[Union[NumericValue, LabelValue]]:
    """Coerce a raw field value into the tagged variant.

    None and blank strings mean "not set". Numbers become NumericValue, any
    other string becomes LabelValue (unrecognized labels are kept as-is and
    simply fail to resolve later). Raises ValueError for unsupported types.
    """
    if raw is None:
        return None
    if isinstance(raw, (NumericValue, LabelValue)):
        return raw
    if isinstance(raw, bool):
        raise ValueError("boolean is not a valid scale value")
    if isinstance(raw, (int, float)):
        return NumericValue(value=float(raw))
    if isinstance(raw, str):
        if raw.strip() == "":
            return None
        return LabelValue(label=raw)
    if isinstance(raw, dict) and "kind" in raw:
        try:
            return _SCALE_VALUE_ADAPTER.validate_python(raw)
        except ValidationError as e:
            raise ValueError(f"invalid scale value: {raw!r}") from e
    raise ValueError(f"unsupported scale value type: {type(raw).__name__}")


def scale_value_raw(value: Optional[Union[NumericValue, LabelValue]]) -> Optional[Union[float, str]]:
    return None if value is None else value.raw()


def resolve_scale_value(
    value: Any,
    dimension: Dimension,
    scales: RiceScales = DEFAULT_RICE_SCALES,
    case_sensitive: bool = False,
) -> Optional[float]:
    """Resolve a label-or-number to its numeric weight, or None.

    Numeric values pass through unchanged when finite. Labels are looked up in
    the dimension's scale table, case-insensitively unless ``case_sensitive``.
    Never raises.
    """
    try:
        sv = to_scale_value(value)
    except ValueError:
        return None
    if sv is None:
        return None
    if isinstance(sv, NumericValue):
        return sv.value if math.isfinite(sv.value) else None
    if case_sensitive:
        weight = scales.table(dimension).get(sv.label)
        return None if weight is None else float(weight)
    weight = scales.lookup(dimension, sv.label)
    return None if weight is None else float(weight)


__all__ = [
    "NumericValue",
    "LabelValue",
    "ScaleValue",
    "to_scale_value",
    "scale_value_raw",
    "resolve_scale_value",
]
