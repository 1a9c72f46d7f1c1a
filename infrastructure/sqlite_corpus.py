# infrastructure/sqlite_corpus.py
"""SQLite-backed precise word corpus and layout metadata provider"""
import logging
from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from config import settings
from core.domain import DEFAULT_LINE_TYPE, LineMeta, PreciseWord, LineType
from core.interfaces import ILayoutMetadataProvider, IPreciseWordCorpus
from database.session import GlyphWordEntity, LayoutLineEntity, get_session
from utils.common import strip_tajweed_markup

logger = logging.getLogger(settings.LOGGER_NAME)


def _optional_int(value) -> Optional[int]:
    """Layout files store missing numbers as NULL or ''."""
    if value is None or value == "":
        return None
    return int(value)


class SQLPreciseWordCorpus(IPreciseWordCorpus):
    """
    Words with authoritative line numbers.

    The layout DB gives, per ayah line, the first and last global word id;
    the glyph DB gives the text for each id.
    """

    def __init__(self, layout_engine: Optional[Engine], words_engine: Optional[Engine],
                 strip_markup: bool = True):
        self.layout_engine = layout_engine
        self.words_engine = words_engine
        self.strip_markup = strip_markup

    def is_available(self) -> bool:
        return self.layout_engine is not None and self.words_engine is not None

    def _ayah_lines(self, page: int) -> List[LayoutLineEntity]:
        with get_session(self.layout_engine) as session:
            result = session.execute(
                select(LayoutLineEntity)
                .where(LayoutLineEntity.page_number == page)
                .where(LayoutLineEntity.line_type == LineType.AYAH.value)
                .where(LayoutLineEntity.first_word_id.is_not(None))
                .where(LayoutLineEntity.last_word_id.is_not(None))
                .order_by(LayoutLineEntity.line_number)
            )
            return list(result.scalars().all())

    def _words_by_id(self, min_id: int, max_id: int) -> Dict[int, GlyphWordEntity]:
        with get_session(self.words_engine) as session:
            result = session.execute(
                select(GlyphWordEntity)
                .where(GlyphWordEntity.id >= min_id)
                .where(GlyphWordEntity.id <= max_id)
                .order_by(GlyphWordEntity.id)
            )
            return {row.id: row for row in result.scalars().all()}

    def get_page_words(self, page: int) -> List[PreciseWord]:
        if not self.is_available():
            return []

        ayah_lines = [
            line for line in self._ayah_lines(page)
            if _optional_int(line.first_word_id) is not None and _optional_int(line.last_word_id) is not None
        ]
        if not ayah_lines:
            return []

        min_id = min(int(line.first_word_id) for line in ayah_lines)
        max_id = max(int(line.last_word_id) for line in ayah_lines)
        words_by_id = self._words_by_id(min_id, max_id)

        words: List[PreciseWord] = []
        for line in ayah_lines:
            for word_id in range(int(line.first_word_id), int(line.last_word_id) + 1):
                row = words_by_id.get(word_id)
                if row is None:
                    continue
                text = row.text or ""
                words.append(PreciseWord(
                    word_index=len(words),
                    surah=int(row.surah),
                    ayah=int(row.ayah),
                    word=int(row.word),
                    text=strip_tajweed_markup(text) if self.strip_markup else text,
                    line_number=int(line.line_number),
                    word_id=row.id,
                ))

        logger.debug(f"Precise corpus: {len(words)} words in {len(ayah_lines)} lines for page {page}")
        return words

    def count_words(self) -> int:
        if self.words_engine is None:
            return 0
        with get_session(self.words_engine) as session:
            return int(session.execute(select(func.count(GlyphWordEntity.id))).scalar_one())


class SQLLayoutMetadataProvider(ILayoutMetadataProvider):
    """Line classification rows of the 15-line layout table"""

    def __init__(self, engine: Optional[Engine]):
        self.engine = engine

    def is_available(self) -> bool:
        return self.engine is not None

    def get_page_lines(self, page: int) -> List[LineMeta]:
        if self.engine is None:
            return []

        with get_session(self.engine) as session:
            result = session.execute(
                select(LayoutLineEntity)
                .where(LayoutLineEntity.page_number == page)
                .order_by(LayoutLineEntity.line_number)
            )
            rows = result.scalars().all()

            return [
                LineMeta(
                    line_number=int(row.line_number),
                    line_type=row.line_type or DEFAULT_LINE_TYPE,
                    surah_number=_optional_int(row.surah_number),
                    is_centered=bool(row.is_centered),
                )
                for row in rows
            ]
