# riceboard/api/routes/features.py

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from riceboard.api.schemas.features import (
    ExportRequest,
    ImportRequest,
    RankRequest,
    RankResponse,
    ScalesResponse,
)
from riceboard.config import settings
from riceboard.interchange.exporter import to_delimited_text, to_structured
from riceboard.interchange.importer import import_csv, import_json
from riceboard.interchange.models import CSV_MEDIA_TYPE, JSON_MEDIA_TYPE
from riceboard.schemas.interchange import ImportResult
from riceboard.services.feature_service import scored_view
from riceboard.services.ranking import rank_features
from riceboard.services.scoring.scales import DEFAULT_RICE_SCALES
from riceboard.services.validation import summarize_warnings


router = APIRouter(prefix="/features", tags=["features"])


@router.get("/scales", response_model=ScalesResponse)
def get_scales() -> ScalesResponse:
    """
    Label tables for the impact/confidence/effort pickers.
    """
    s = DEFAULT_RICE_SCALES
    return ScalesResponse(
        reach_unit_label=s.reach_unit_label,
        impact=dict(s.impact),
        confidence=dict(s.confidence),
        effort=dict(s.effort),
    )


@router.post("/rank", response_model=RankResponse)
def rank(req: RankRequest) -> RankResponse:
    """
    Score and order a working set; also returns the consolidated warnings.
    """
    rows = scored_view(req.features, decimals=settings.SCORE_DISPLAY_DECIMALS)
    return RankResponse(rows=rows, warnings=summarize_warnings(req.features))


@router.post("/import", response_model=ImportResult)
def import_features(req: ImportRequest) -> ImportResult:
    """
    Normalize a CSV or JSON document. Problems come back as row errors, never as HTTP errors.
    """
    if req.format == "csv":
        return import_csv(req.content, max_rows=settings.IMPORT_MAX_ROWS)
    return import_json(req.content, max_rows=settings.IMPORT_MAX_ROWS)


@router.post("/export", response_class=PlainTextResponse)
def export_features(req: ExportRequest) -> PlainTextResponse:
    features = rank_features(req.features) if req.ranked else req.features
    if req.format == "csv":
        return PlainTextResponse(to_delimited_text(features), media_type=CSV_MEDIA_TYPE)
    return PlainTextResponse(to_structured(features), media_type=JSON_MEDIA_TYPE)
