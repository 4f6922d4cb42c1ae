"""FastAPI app entry: config, logging, embedding provider lifecycle, health, and error handling."""

import asyncio
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from oddword.config.embedding.static import resolve_embedding_config
from oddword.config.logging import configure_logging, get_logger
from oddword.config.settings import get_settings
from oddword.controllers.routes.analyze import router as analyze_router
from oddword.services.analysis.errors import AnalysisError
from oddword.services.embedder.provider import StrategyEmbeddingProvider

logger = get_logger(__name__)


async def _warm_up(provider: StrategyEmbeddingProvider) -> None:
    try:
        await provider.initialize()
    except AnalysisError as e:
        logger.warning("Embedding warm-up failed, first request will retry", extra={"error": e.message})


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config, logging, and the embedding provider. Shutdown: close the provider."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    config = resolve_embedding_config(settings.embedding_profile)
    provider = StrategyEmbeddingProvider(config, lazy_init=settings.embedding_lazy_init)
    app.state.embedding_provider = provider
    warmup_task: asyncio.Task | None = None
    if settings.embedding_warmup:
        warmup_task = asyncio.create_task(_warm_up(provider))
    yield
    logger.info("Application shutting down")
    if warmup_task is not None and not warmup_task.done():
        warmup_task.cancel()
    await provider.close()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Odd Word Service",
    description="Find the word that does not belong using embedding similarity",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(analyze_router)


def _embedding_status(provider: Any) -> dict[str, Any]:
    if provider is None:
        return {"ok": False, "error": "not configured"}
    return {
        "ok": bool(provider.is_ready),
        "initializing": bool(getattr(provider, "is_initializing", False)),
        "error": getattr(provider, "last_error", None),
    }


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up. Does not check dependencies."""
    return {"status": "ok"}


@app.get("/ready")
async def ready(request: Request) -> JSONResponse:
    """Readiness: the embedding model is loaded. Never triggers a load itself."""
    embedding = _embedding_status(getattr(request.app.state, "embedding_provider", None))
    ok = embedding["ok"]
    body = {"status": "ok" if ok else "degraded", "embedding": embedding}
    return JSONResponse(content=body, status_code=200 if ok else 503)


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: no stack traces or internal details reach the client."""
    logger.exception("Unhandled error", extra={"error_type": type(exc).__name__})
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
