"""FastAPI entrypoint for the Kindle short-read manuscript service."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

from kindle_builder_observability import log_context, setup_fastapi_metrics, setup_logging
from kindle_builder_schemas import (
    BriefValidationError,
    Manuscript,
    ManuscriptError,
    ManuscriptInputs,
)

from .config import load_service_settings
from .flows import assemble_manuscript
from .intake import normalise_brief
from .models import SAMPLE_BRIEF, GenerateRequest

settings = load_service_settings()
SERVICE_NAME = settings.service_name
setup_logging(SERVICE_NAME, settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Kindle Short-Read Builder", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.allowed_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
if settings.metrics_enabled:
    setup_fastapi_metrics(app, service_name=SERVICE_NAME, endpoint=settings.metrics_endpoint)


@app.get("/health", tags=["health"])
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/brief/sample", response_model=ManuscriptInputs, tags=["manuscripts"])
def sample_brief() -> ManuscriptInputs:
    """Brief used to pre-fill the intake form."""

    return SAMPLE_BRIEF


@app.post(
    "/api/generate",
    response_model=Manuscript,
    response_model_exclude_none=True,
    tags=["manuscripts"],
)
def generate(payload: GenerateRequest) -> Manuscript:
    """Validate the brief and return a freshly assembled manuscript."""

    with log_context(route="/api/generate", method="POST"):
        try:
            inputs = normalise_brief(payload)
        except BriefValidationError as exc:
            logger.warning("Rejected manuscript brief", extra={"reason": str(exc)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

        try:
            manuscript = assemble_manuscript(inputs, service_name=SERVICE_NAME)
        except ManuscriptError as exc:
            logger.exception("Manuscript generation failed")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Manuscript generation failed",
            ) from exc

        logger.info(
            "Generated manuscript",
            extra={
                "target_pages": inputs.target_pages,
                "chapter_count": len(manuscript.chapters),
                "page_count": len(manuscript.pages),
            },
        )
        return manuscript
