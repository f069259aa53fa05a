from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from govdash.api import (
    assessments, audit, bcp, categories, incidents, kris, risks, treatments,
    users,
)
from govdash.client import BackendClient, BackendError
from govdash.config import settings
from govdash.schemas.common import ErrorResponse, HealthResponse
from govdash.services.category_cache import CategoryCache, load_fallback_ids
from govdash.services.category_service import CATEGORIES_PATH

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer(),
    ]
)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting application", version=settings.app_version, backend=settings.api_base_url)
    backend = getattr(app.state, "backend", None) or BackendClient.from_settings()
    app.state.backend = backend

    async def fetch_categories() -> list[dict]:
        return await backend.get(CATEGORIES_PATH) or []

    app.state.category_cache = CategoryCache(
        fetch_categories,
        fallback_ids=load_fallback_ids(),
        ttl=settings.category_cache_ttl,
    )

    yield

    await backend.aclose()
    app.state.backend = None
    logger.info("Shutting down application")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BackendError)
async def backend_error_handler(request: Request, exc: BackendError):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(detail=exc.message, error_code=exc.error_code).model_dump(),
    )


# Register API routers; categories must precede risks so /{risk_id} does not shadow it
app.include_router(categories.router, prefix="/api/risks/categories", tags=["categories"])
app.include_router(risks.router, prefix="/api/risks", tags=["risks"])
app.include_router(assessments.router, prefix="/api/assessments", tags=["assessments"])
app.include_router(treatments.router, prefix="/api/treatments", tags=["treatments"])
app.include_router(bcp.router, prefix="/api/bcp", tags=["bcp"])
app.include_router(kris.router, prefix="/api/kris", tags=["kris"])
app.include_router(incidents.router, prefix="/api/incidents", tags=["incidents"])
app.include_router(users.router, prefix="/api/users", tags=["users"])
app.include_router(audit.router, prefix="/api/audit", tags=["audit"])


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    return {"status": "healthy", "version": settings.app_version}
