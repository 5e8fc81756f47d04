# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
ROSCA Service
=============
Keeps the member roster and the period counter of a rotating-savings group,
and answers who receives the pooled payout for any period:

    recipient(p) = member #(((p - 1) mod N) + 1)

Exposes registration, period advancement, the projected payout schedule,
a dashboard view, an audit log and Prometheus metrics.

Port: 8005
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rosca.controllers import member_controller, rotation_controller, system_controller
from rosca.core.config import settings
from rosca.core.dependencies import get_roster_service, get_rotation_service
from rosca.core.logging import get_logger
from rosca.middleware import MetricsMiddleware, RequestIDMiddleware
from rosca.schemas.rosca import ErrorResponse

logger = get_logger(__name__)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    """Seed demonstration members when enabled, then log startup/shutdown."""
    if settings.SEED_DEFAULT_MEMBERS:
        get_roster_service().seed_defaults()
    rotation = get_rotation_service()
    logger.info(
        "%s v%s starting: period=%d, members=%d",
        settings.SERVICE_NAME,
        settings.SERVICE_VERSION,
        rotation.get_current_period(),
        get_roster_service().count(),
    )
    yield
    logger.info("%s shutting down", settings.SERVICE_NAME)


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="ROSCA Service",
    description="Rotating-savings roster, period counter and payout schedule.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    responses={
        422: {"model": ErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


# ── Validation errors ────────────────────────────────────────────────────
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    req_id = getattr(request.state, "request_id", None)
    detail = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
        for err in exc.errors()
    )
    logger.info("Validation error: %s", detail, extra={"request_id": req_id})
    return JSONResponse(
        status_code=422,
        content={"error": "validation_error", "detail": detail, "request_id": req_id},
    )


# ── Global exception handler ─────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
    )


app.include_router(system_controller.router)
app.include_router(member_controller.router)
app.include_router(rotation_controller.router)


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
