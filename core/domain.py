"""Shared enumerations, errors and domain models for the page layout engine."""
from enum import Enum

from dataclasses import dataclass
from typing import Optional, Tuple, Union

# ============= Enums =============

class ErrorCode(str, Enum):
    """Error codes for user-facing error messages."""
    INVALID_PAGE = "INVALID_PAGE"
    NO_PAGE_DATA = "NO_PAGE_DATA"
    CORPUS_ERROR = "CORPUS_ERROR"
    LAYOUT_FAILED = "LAYOUT_FAILED"


class LayoutSource(str, Enum):
    """Which word corpus supplied the words of a page."""
    PRECISE = "precise"
    APPROXIMATE = "approximate"


class LineType(str, Enum):
    """Mushaf line classification."""
    AYAH = "ayah"
    SURAH_NAME = "surah_name"
    BASMALA = "basmala"


DEFAULT_LINE_TYPE = LineType.AYAH.value

# ============= Errors =============

class LayoutError(Exception):
    """Raised when a page cannot be laid out, with a specific error code"""

    def __init__(self, message: str, error_code: ErrorCode):
        self.message = message
        self.error_code = error_code
        super().__init__(message)

    def __str__(self):
        return f"[{self.error_code.value}] {self.message}"


class InvalidPageNumberError(LayoutError):
    """Page number outside 1-604; rejected before any corpus query."""

    def __init__(self, message: str = "Invalid page number. Must be between 1 and 604."):
        super().__init__(message, ErrorCode.INVALID_PAGE)


class CorpusDataError(LayoutError):
    """A corpus returned a record that cannot be placed on the page."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CORPUS_ERROR)

# ============= Corpus Records =============

@dataclass(frozen=True)
class PreciseWord:
    """Word from the precise corpus; line number is authoritative."""
    word_index: int
    surah: int
    ayah: int
    text: str
    line_number: int
    word: int = 0
    word_id: Optional[int] = None


@dataclass(frozen=True)
class FlatWord:
    """Word from the flat corpus; no line information."""
    surah: int
    ayah: int
    word: int
    text: str
    location: str = ""
    word_id: Optional[int] = None

    @property
    def key(self) -> Tuple[int, int, int]:
        return (self.surah, self.ayah, self.word)


@dataclass(frozen=True)
class LineMeta:
    """Layout metadata for one line of a page."""
    line_number: int
    line_type: str = DEFAULT_LINE_TYPE
    surah_number: Optional[int] = None
    is_centered: bool = False

# ============= Layout Models =============

@dataclass(frozen=True)
class Position:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class PositionedWord:
    word_index: int
    surah: int
    ayah: int
    text: str
    line_number: int
    position: Position
    word: int = 0


@dataclass(frozen=True)
class Line:
    """Words of one line in right-to-left reading order (first word is rightmost)."""
    line_number: int
    words: Tuple[PositionedWord, ...]
    line_type: str = DEFAULT_LINE_TYPE
    surah_number: Optional[int] = None
    is_centered: bool = False


@dataclass(frozen=True)
class PageLayout:
    """Fully assembled page."""
    page: int
    lines: Tuple[Line, ...]
    words: Tuple[PositionedWord, ...]
    total_words: int
    source: LayoutSource
    layout_meta: Tuple[LineMeta, ...] = ()
    surah_for_page: Optional[int] = None
    juz: Optional[int] = None


@dataclass(frozen=True)
class EmptyPage:
    """Valid page with no words in either corpus. A legitimate answer, not a fault."""
    page: int
    reason: str
    total_words: int
    source: LayoutSource = LayoutSource.APPROXIMATE
    juz: Optional[int] = None
    error_code: ErrorCode = ErrorCode.NO_PAGE_DATA


@dataclass(frozen=True)
class LayoutFailure:
    """A provider or strategy raised while building the page."""
    page: int
    error_code: ErrorCode
    message: str


PageOutcome = Union[PageLayout, EmptyPage, LayoutFailure]
