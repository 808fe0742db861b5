"""
SemSearch Web Application
Transport layer over the semsearch engine: upload, search and document management.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from semsearch import EmbedderFactory, SearchEngine, configure_logging, load_settings
from web.routers import documents_router, ingest_router, search_router

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("web-app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: build the engine once and share it across requests."""
    # Startup
    settings = load_settings()
    configure_logging(settings.LOG_LEVEL)

    logger.info(f"Initializing embedder: {settings.EMBEDDER_TYPE}")
    embedder = EmbedderFactory.from_settings(settings)
    app.state.engine = SearchEngine(embedder, settings=settings)

    logger.info("Application started successfully")

    yield

    # Shutdown
    logger.info("Application shutting down...")
    app.state.engine.clear()


# Initialize FastAPI
app = FastAPI(
    title="SemSearch API",
    description="Semantic document search with extractive answers",
    version="0.1.0",
    lifespan=lifespan
)

# Register routers
app.include_router(ingest_router)
app.include_router(search_router)
app.include_router(documents_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
