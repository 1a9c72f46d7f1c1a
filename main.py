# main.py
"""Mushaf page layout service: corpora are opened for the lifetime of the app"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from config import settings
from services.logger_config import setup_logging
from api.endpoints import router
from services.factory import open_corpora

# Setup logging
setup_logging()
logger = logging.getLogger(settings.LOGGER_NAME)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the word corpora at startup, dispose their engines at shutdown"""
    logger.info(f"Starting {settings.APP_TITLE} {settings.APP_VERSION}...")

    corpora = open_corpora(settings)
    if not (corpora.precise.is_available() or corpora.flat.is_available()):
        logger.warning(
            f"No word corpus found under {settings.MUSHAF_DATA_DIR}; every page will be reported as empty"
        )
    app.state.corpora = corpora

    yield

    logger.info("Shutting down application...")
    app.state.corpora.close()
    logger.info("Application shutdown complete")

app = FastAPI(
    title=settings.APP_TITLE,
    version=settings.APP_VERSION,
    lifespan=lifespan
)

app.include_router(router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level="info"
    )
