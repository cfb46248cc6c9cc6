# riceboard/interchange/models.py

"""Column layout for the CSV interchange format."""

from __future__ import annotations

from typing import Dict, List

# Export column order; also the full set of recognized import columns
FEATURE_HEADER_ORDER: List[str] = ["name", "reach", "impact", "confidence", "effort", "description"]

# Columns that must be present (as columns, not necessarily populated)
REQUIRED_HEADERS: List[str] = ["name", "reach", "impact", "confidence", "effort"]

# Canonical field -> accepted header spellings (matched via normalize_header,
# so "Name", " NAME " and "name" are equivalent)
FEATURE_HEADER_MAP: Dict[str, List[str]] = {h: [h] for h in FEATURE_HEADER_ORDER}

CSV_MEDIA_TYPE = "text/csv"
JSON_MEDIA_TYPE = "application/json"
