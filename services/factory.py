# services/factory.py
import logging
from dataclasses import dataclass, field
from typing import List

from fastapi import Depends, Request
from sqlalchemy.engine import Engine

from config import Settings, settings
from core.interfaces import IFlatWordCorpus, ILayoutMetadataProvider, IPreciseWordCorpus
from database.session import create_readonly_engine
from infrastructure.flat_corpus import JsonFlatWordCorpus
from infrastructure.sqlite_corpus import SQLLayoutMetadataProvider, SQLPreciseWordCorpus
from services.page_layout_service import PageLayoutService

logger = logging.getLogger(settings.LOGGER_NAME)


@dataclass
class MushafCorpora:
    """
    Corpus handles opened once at startup and closed at shutdown.
    Passed to the layout service explicitly; nothing is module-global.
    """
    precise: IPreciseWordCorpus
    flat: IFlatWordCorpus
    layout_metadata: ILayoutMetadataProvider
    engines: List[Engine] = field(default_factory=list)

    def close(self) -> None:
        for engine in self.engines:
            engine.dispose()
        self.engines.clear()
        logger.info("Corpus databases closed")


def open_corpora(config: Settings) -> MushafCorpora:
    """Open every configured corpus; missing files become empty providers."""
    layout_engine = create_readonly_engine(config.PRECISE_LAYOUT_DB_PATH)
    words_engine = create_readonly_engine(config.PRECISE_WORDS_DB_PATH)

    metadata_path = config.layout_metadata_db_path
    if metadata_path == config.PRECISE_LAYOUT_DB_PATH:
        metadata_engine = layout_engine
    else:
        metadata_engine = create_readonly_engine(metadata_path)

    engines = []
    for engine in (layout_engine, words_engine, metadata_engine):
        if engine is not None and engine not in engines:
            engines.append(engine)

    corpora = MushafCorpora(
        precise=SQLPreciseWordCorpus(layout_engine, words_engine, strip_markup=config.STRIP_TAJWEED_MARKUP),
        flat=JsonFlatWordCorpus.from_file(config.FLAT_WORDS_JSON_PATH, strip_markup=config.STRIP_TAJWEED_MARKUP),
        layout_metadata=SQLLayoutMetadataProvider(metadata_engine),
        engines=engines,
    )
    logger.info(
        f"Corpora opened (precise: {corpora.precise.is_available()}, "
        f"flat: {corpora.flat.is_available()}, layout metadata: {corpora.layout_metadata.is_available()})"
    )
    return corpora


# Provider functions for FastAPI DI
def get_corpora(request: Request) -> MushafCorpora:
    """Corpora opened by the application lifespan."""
    return request.app.state.corpora

def get_page_layout_service(corpora: MushafCorpora = Depends(get_corpora)) -> PageLayoutService:
    """
    Create the layout service over the opened corpora.
    Easy to override for testing via app.dependency_overrides.
    """
    return PageLayoutService(
        precise_corpus=corpora.precise,
        flat_corpus=corpora.flat,
        layout_metadata=corpora.layout_metadata
    )
