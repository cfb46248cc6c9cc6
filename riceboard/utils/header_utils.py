from __future__ import annotations

from typing import Dict, List


def normalize_header(name: str) -> str:
    """Normalize a header cell to lowercase field name format.

    "Name" → "name", " Effort " → "effort", "Reach-Count" → "reach_count".
    Collapses duplicate underscores.
    """
    n = (name or "").strip().lower()
    n = n.replace(" ", "_").replace("-", "_")
    while "__" in n:
        n = n.replace("__", "_")
    return n.strip("_")


def resolve_indices(headers: List[str], header_map: Dict[str, List[str]]) -> Dict[str, int]:
    """Resolve column indices for a header row, using alias maps.

    Args:
        headers: Raw header row (strings)
        header_map: Canonical field -> list of accepted aliases

    Returns:
        Mapping of canonical field -> column index (0-based). When a field
        appears more than once the last column wins.
    """
    norm_headers = [normalize_header(h) for h in headers]

    # Build normalized alias lookup
    alias_lookup: Dict[str, str] = {}
    for field, aliases in header_map.items():
        for a in aliases:
            alias_lookup[normalize_header(a)] = field

    col_map: Dict[str, int] = {}
    for i, nh in enumerate(norm_headers):
        if nh in alias_lookup:
            col_map[alias_lookup[nh]] = i
    return col_map


__all__ = ["normalize_header", "resolve_indices"]
