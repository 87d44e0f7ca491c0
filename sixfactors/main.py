"""
Application entry point for the six factors webhook backend.
"""

from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from sixfactors.config import get_settings
from sixfactors.core.errors import QuestionnaireError
from sixfactors.db.mongodb import check_connection_health, close_connection
from sixfactors.question_service.catalog import build_catalog
from sixfactors.question_service.router import router as question_router
from sixfactors.utils.logger import get_logger

logger = get_logger(__name__)


# =========================================================
# Lifespan
# =========================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting application")

    app.state.catalog = build_catalog()

    yield

    close_connection()
    logger.info("Application stopped")


# =========================================================
# App Init
# =========================================================
app = FastAPI(
    lifespan=lifespan,
    title="Six Factors",
    version="1.0.0",
)


# =========================================================
# Errors -> Chatfuel message envelope
# =========================================================
@app.exception_handler(QuestionnaireError)
async def questionnaire_error_handler(
    request: Request,
    exc: QuestionnaireError,
):
    return JSONResponse(
        status_code=exc.status_code,
        content={"messages": [{"text": exc.message}]},
    )


# =========================================================
# Request Logging
# =========================================================
@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(
        "Incoming request",
        extra={
            "method": request.method,
            "path": request.url.path,
        },
    )
    return await call_next(request)


# =========================================================
# Routers
# =========================================================
app.include_router(question_router)


# =========================================================
# Health
# =========================================================
@app.get("/health")
def health_check():
    catalog = getattr(app.state, "catalog", None)
    return {
        "status": "ok",
        "questions": len(catalog) if catalog is not None else 0,
        "store": check_connection_health(),
    }


# Initialize Sentry
settings = get_settings()
if settings.ENV == "prod" and settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        integrations=[
            FastApiIntegration(),
            StarletteIntegration(),
        ],
        traces_sample_rate=0.1,
        environment=settings.ENV,
    )
    logger.info("Sentry initialized for error tracking")
