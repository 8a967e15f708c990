"""
MockPrep - Adaptive mock interview backend

Run with `python main.py` or `uvicorn main:app`.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mockprep import __version__
from mockprep.api.dependencies import cleanup
from mockprep.api.router import api_router
from mockprep.config.settings import get_settings

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the effective configuration, release clients on shutdown."""
    logger.info(f"{settings.app_name} {__version__} starting")
    logger.info(f"Record storage: {settings.storage_backend} ({settings.data_dir})")
    if settings.llm_configured:
        logger.info(f"LLM interviewer enabled with model {settings.llm_model}")
    else:
        logger.warning("No LLM API key configured, using heuristic interviewer only")

    yield

    logger.info(f"{settings.app_name} shutting down")
    await cleanup()


app = FastAPI(
    title=settings.app_name,
    description="Adaptive mock interview backend",
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

app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Service information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "api": "/api",
    }


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "version": settings.app_version,
        "llm_configured": settings.llm_configured,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.debug)
