# services/page_layout_service.py
"""
Page layout assembly.

One linear pass per request:
1. TRY_PRECISE     - words with authoritative line numbers
2. TRY_APPROXIMATE - flat word list, lines estimated by even distribution
3. ASSEMBLE        - join line metadata, total word count and anchor surah

The two word sources are never mixed on a page. Provider errors are turned
into a LayoutFailure; a page without words is an EmptyPage, not an error.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from config import settings
from core.domain import (
    EmptyPage,
    ErrorCode,
    FlatWord,
    InvalidPageNumberError,
    LayoutError,
    LayoutFailure,
    LayoutSource,
    PageLayout,
    PageOutcome,
    PositionedWord,
    PreciseWord,
)
from core.interfaces import IFlatWordCorpus, ILayoutMetadataProvider, IPreciseWordCorpus
from core.line_assignment import ApproximateLineAssignment, PreciseLineAssignment
from core.line_organizer import derive_anchor_surah, flatten_lines, organize_lines
from core.surahs import get_juz_by_page
from utils.common import is_valid_page_number

logger = logging.getLogger(settings.LOGGER_NAME)

NO_PAGE_DATA_REASON = "No words found for this page"

# ============= Source Selection =============

@dataclass(frozen=True)
class PreciseSelection:
    words: Tuple[PreciseWord, ...]

@dataclass(frozen=True)
class ApproximateSelection:
    words: Tuple[FlatWord, ...]

@dataclass(frozen=True)
class EmptySelection:
    reason: str

SourceSelection = Union[PreciseSelection, ApproximateSelection, EmptySelection]


def validate_page_number(page: int) -> None:
    if not is_valid_page_number(page):
        raise InvalidPageNumberError()


class PageLayoutService:
    """Builds the positioned layout of a single Mushaf page from corpus snapshots"""

    def __init__(
        self,
        precise_corpus: IPreciseWordCorpus,
        flat_corpus: IFlatWordCorpus,
        layout_metadata: ILayoutMetadataProvider
    ):
        self.precise_corpus = precise_corpus
        self.flat_corpus = flat_corpus
        self.layout_metadata = layout_metadata
        self.precise_assignment = PreciseLineAssignment()
        self.approximate_assignment = ApproximateLineAssignment()

    def build_page(self, page: int) -> PageOutcome:
        """
        Build the page layout.

        Raises:
            InvalidPageNumberError: page outside 1-604, before any corpus query

        Returns:
            PageLayout, EmptyPage when neither corpus has words for the page,
            or LayoutFailure when a provider raised
        """
        validate_page_number(page)

        try:
            selection = self._select_source(page)

            if isinstance(selection, EmptySelection):
                total_words = self._total_words(fallback=0)
                logger.warning(f"Page {page}: {selection.reason} (corpus total: {total_words})")
                return EmptyPage(
                    page=page,
                    reason=selection.reason,
                    total_words=total_words,
                    juz=self._juz(page),
                )

            if isinstance(selection, PreciseSelection):
                positioned = self.precise_assignment.assign(selection.words)
                source = LayoutSource.PRECISE
            elif isinstance(selection, ApproximateSelection):
                positioned = self.approximate_assignment.assign(selection.words)
                source = LayoutSource.APPROXIMATE
            else:
                raise TypeError(f"Unhandled source selection: {type(selection).__name__}")

            return self._assemble(page, positioned, source)

        except LayoutError as e:
            logger.error(f"Page {page} layout failed: {e}", exc_info=True)
            return LayoutFailure(page=page, error_code=e.error_code, message=e.message)
        except Exception as e:
            logger.error(f"Page {page} layout failed: {e}", exc_info=True)
            return LayoutFailure(page=page, error_code=ErrorCode.LAYOUT_FAILED, message=str(e))

    def _select_source(self, page: int) -> SourceSelection:
        precise_words = self.precise_corpus.get_page_words(page)
        if precise_words:
            logger.debug(f"Page {page}: {len(precise_words)} words from precise corpus")
            return PreciseSelection(words=tuple(precise_words))

        flat_words = self.flat_corpus.get_page_words(page)
        if flat_words:
            logger.debug(f"Page {page}: no precise data, {len(flat_words)} words from flat corpus")
            return ApproximateSelection(words=tuple(flat_words))

        return EmptySelection(reason=NO_PAGE_DATA_REASON)

    def _assemble(self, page: int, positioned: List[PositionedWord], source: LayoutSource) -> PageLayout:
        layout_meta = self.layout_metadata.get_page_lines(page)
        lines = organize_lines(positioned, layout_meta)

        layout = PageLayout(
            page=page,
            lines=tuple(lines),
            words=tuple(flatten_lines(lines)),
            total_words=self._total_words(fallback=len(positioned)),
            source=source,
            layout_meta=tuple(layout_meta),
            surah_for_page=derive_anchor_surah(lines),
            juz=self._juz(page),
        )
        logger.info(
            f"Page {page}: {len(layout.words)} words in {len(layout.lines)} lines "
            f"(source: {source.value}, metadata lines: {len(layout_meta)})"
        )
        return layout

    def _total_words(self, fallback: int) -> int:
        """
        Flat corpus total first: it is the reference for progress percentages.

        An unreadable flat corpus only loses its count; the precise count
        or the page's own word count is used instead.
        """
        try:
            flat_total = self.flat_corpus.count_words()
        except LayoutError as e:
            logger.warning(f"Flat corpus count unavailable, using fallback total: {e}")
            flat_total = 0
        if flat_total > 0:
            return flat_total
        precise_total = self.precise_corpus.count_words()
        if precise_total > 0:
            return precise_total
        return fallback

    @staticmethod
    def _juz(page: int) -> Optional[int]:
        juz = get_juz_by_page(page)
        return juz.id if juz else None
