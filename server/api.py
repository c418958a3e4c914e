"""FastAPI REST server for Keyhub."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import keyhub
from keyhub.exceptions import (
    AuthenticationError,
    ConflictError,
    KeyhubError,
    NotFoundError,
    SummarizerError,
    ValidationError,
)
from server.auth.routes import router as keys_router
from server.models import HealthResponse
from server.summarizer_routes import router as summarizer_router
from server.validate_routes import router as validate_router

log = logging.getLogger(__name__)

app = FastAPI(
    title="Keyhub",
    description="Issue, manage and validate API keys.",
    version=keyhub.__version__,
)

# CORS for the dashboard
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        o.strip()
        for o in os.environ.get("KEYHUB_CORS_ORIGINS", "http://localhost:3000").split(",")
        if o.strip()
    ],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(keys_router)
app.include_router(validate_router)
app.include_router(summarizer_router)


# ------------------------------------------------------------------
# Error mapping
# ------------------------------------------------------------------

_STATUS_CODES: dict[type[KeyhubError], int] = {
    ValidationError: 400,
    AuthenticationError: 401,
    NotFoundError: 404,
    ConflictError: 409,
    SummarizerError: 502,
}


@app.exception_handler(KeyhubError)
async def keyhub_error_handler(request: Request, exc: KeyhubError) -> JSONResponse:
    for klass in type(exc).__mro__:
        status = _STATUS_CODES.get(klass)
        if status is None:
            continue
        content: dict[str, str] = {"detail": str(exc)}
        if isinstance(exc, ValidationError) and exc.field:
            content["field"] = exc.field
        return JSONResponse(status_code=status, content=content)

    # InfrastructureError and anything unmapped: opaque to the caller
    log.error("Unhandled %s on %s %s", type(exc).__name__, request.method,
              request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# ------------------------------------------------------------------
# Health
# ------------------------------------------------------------------


@app.get("/api/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok", version=keyhub.__version__)


# ------------------------------------------------------------------
# Entrypoint
# ------------------------------------------------------------------


def run():
    import uvicorn

    logging.basicConfig(level=os.environ.get("KEYHUB_LOG_LEVEL", "INFO"))
    uvicorn.run("server.api:app", host="0.0.0.0", port=8100, reload=True)


if __name__ == "__main__":
    run()
