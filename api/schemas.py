from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

from core.domain import (
    EmptyPage, ErrorCode, Line, LineMeta, LayoutSource, PageLayout, PositionedWord
)
from core.surahs import JuzInfo, SurahInfo


class CamelModel(BaseModel):
    """Response models serialized with the camelCase keys the Mushaf viewer reads."""
    model_config = ConfigDict(populate_by_name=True)


class WordPositionBox(BaseModel):
    x: float
    y: float
    width: float
    height: float

class WordItem(CamelModel):
    word_index: int = Field(alias="wordIndex")
    surah: int
    ayah: int
    position: WordPositionBox
    text: str
    line_number: int = Field(alias="lineNumber")

class LineItem(CamelModel):
    line_number: int = Field(alias="lineNumber")
    line_type: str = Field(alias="lineType")
    surah_number: Optional[int] = Field(default=None, alias="surahNumber")
    is_centered: bool = Field(default=False, alias="isCentered")
    words: List[WordItem]

class LayoutBody(BaseModel):
    lines: List[LineItem]

class LayoutMetaItem(BaseModel):
    line_number: int
    line_type: str
    surah_number: Optional[int] = None
    is_centered: bool = False

class PageMeta(CamelModel):
    total_words: int = Field(alias="totalWords")
    source: LayoutSource
    juz: Optional[int] = None

class PageLayoutResponse(CamelModel):
    page: int
    words: List[WordItem]
    layout: LayoutBody
    layout_meta: List[LayoutMetaItem] = Field(alias="layoutMeta")
    surah_for_page: Optional[int] = Field(default=None, alias="surahForPage")
    error: Optional[str] = None
    error_code: Optional[ErrorCode] = Field(default=None, alias="errorCode")
    meta: PageMeta

    @classmethod
    def from_layout(cls, layout: PageLayout) -> "PageLayoutResponse":
        return cls(
            page=layout.page,
            words=[_word_item(w) for w in layout.words],
            layout=LayoutBody(lines=[_line_item(line) for line in layout.lines]),
            layout_meta=[_meta_item(m) for m in layout.layout_meta],
            surah_for_page=layout.surah_for_page,
            meta=PageMeta(total_words=layout.total_words, source=layout.source, juz=layout.juz),
        )

    @classmethod
    def from_empty(cls, empty: EmptyPage) -> "PageLayoutResponse":
        return cls(
            page=empty.page,
            words=[],
            layout=LayoutBody(lines=[]),
            layout_meta=[],
            error=empty.reason,
            error_code=empty.error_code,
            meta=PageMeta(total_words=empty.total_words, source=empty.source, juz=empty.juz),
        )


def _word_item(word: PositionedWord) -> WordItem:
    p = word.position
    return WordItem(
        word_index=word.word_index,
        surah=word.surah,
        ayah=word.ayah,
        position=WordPositionBox(x=p.x, y=p.y, width=p.width, height=p.height),
        text=word.text,
        line_number=word.line_number,
    )

def _line_item(line: Line) -> LineItem:
    return LineItem(
        line_number=line.line_number,
        line_type=line.line_type,
        surah_number=line.surah_number,
        is_centered=line.is_centered,
        words=[_word_item(w) for w in line.words],
    )

def _meta_item(meta: LineMeta) -> LayoutMetaItem:
    return LayoutMetaItem(
        line_number=meta.line_number,
        line_type=meta.line_type,
        surah_number=meta.surah_number,
        is_centered=meta.is_centered,
    )


class SurahItem(CamelModel):
    id: int
    arabic_name: str = Field(alias="arabicName")
    english_name: str = Field(alias="englishName")
    verse_count: int = Field(alias="verseCount")
    start_page: int = Field(alias="startPage")
    revelation_place: str = Field(alias="revelationPlace")

    @classmethod
    def from_info(cls, surah: SurahInfo) -> "SurahItem":
        return cls(
            id=surah.id,
            arabic_name=surah.arabic_name,
            english_name=surah.english_name,
            verse_count=surah.verse_count,
            start_page=surah.start_page,
            revelation_place=surah.revelation_place,
        )

class SurahListResponse(BaseModel):
    surahs: List[SurahItem]

class JuzItem(CamelModel):
    id: int
    start_page: int = Field(alias="startPage")
    end_page: int = Field(alias="endPage")
    start_surah: int = Field(alias="startSurah")
    start_ayah: int = Field(alias="startAyah")

    @classmethod
    def from_info(cls, juz: JuzInfo) -> "JuzItem":
        return cls(
            id=juz.id,
            start_page=juz.start_page,
            end_page=juz.end_page,
            start_surah=juz.start_surah,
            start_ayah=juz.start_ayah,
        )

class JuzListResponse(BaseModel):
    juz: List[JuzItem]

class CorpusStatus(BaseModel):
    available: bool
    total_words: int = 0
    error: Optional[str] = None

class StatusResponse(BaseModel):
    precise_corpus: CorpusStatus
    flat_corpus: CorpusStatus
    layout_metadata_available: bool
    ready_for_queries: bool = False

class PageInfoResponse(BaseModel):
    page: int
    surah: Optional[SurahItem] = None
    juz: Optional[JuzItem] = None

class AyahLocationResponse(CamelModel):
    surah: int
    ayah: int
    page: int
    juz: Optional[int] = None
