# riceboard/main.py

from __future__ import annotations

import logging

from fastapi import FastAPI

from riceboard.config import setup_json_logging, settings
from riceboard.api.routes.features import router as features_router


def create_app() -> FastAPI:
    setup_json_logging(log_level=getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO))

    app = FastAPI(
        title="RICE Prioritization - Action API",
        version="0.1.0",
    )

    app.include_router(features_router)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


app = create_app()
