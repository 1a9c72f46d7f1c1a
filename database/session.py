# database/session.py

import logging
import os
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import Column, Integer, String, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base

from config import settings

logger = logging.getLogger(settings.LOGGER_NAME)

Base = declarative_base()

# ============= Models =============
# Read-only mappings of the bundled QPC SQLite files.

class LayoutLineEntity(Base):
    """One row per line of every page (qpc-*-15-lines.db)."""
    __tablename__ = "pages"
    page_number = Column(Integer, primary_key=True)
    line_number = Column(Integer, primary_key=True)
    line_type = Column(String, nullable=False)
    is_centered = Column(Integer)
    first_word_id = Column(Integer, nullable=True)
    last_word_id = Column(Integer, nullable=True)
    surah_number = Column(Integer, nullable=True)

class GlyphWordEntity(Base):
    """One row per word, numbered across the whole Mushaf (qpc-v1-glyph-codes-wbw.db)."""
    __tablename__ = "words"
    id = Column(Integer, primary_key=True)
    location = Column(String)
    surah = Column(Integer, nullable=False)
    ayah = Column(Integer, nullable=False)
    word = Column(Integer, nullable=False)
    text = Column(String)


# ============= Engines =============

def create_readonly_engine(db_path: str) -> Optional[Engine]:
    """
    Open a read-only SQLite engine, or None when the file is not bundled.

    A missing corpus is represented as "no engine"; providers answer with empty data.
    """
    if not db_path or not os.path.exists(db_path):
        logger.warning(f"Corpus database not found at: {db_path}")
        return None

    abs_path = os.path.abspath(db_path)
    engine = create_engine(
        f"sqlite:///file:{abs_path}?mode=ro&uri=true",
        echo=False,
        connect_args={"check_same_thread": False}
    )
    logger.info(f"Opened corpus database {abs_path}")
    return engine


# ============= Session Factory =============

@contextmanager
def get_session(engine: Engine) -> Iterator[Session]:
    """
    Short-lived read session bound to a corpus engine.
    Ensures explicit closure after each query batch.
    """
    session = Session(bind=engine)
    try:
        yield session
    finally:
        session.close()
