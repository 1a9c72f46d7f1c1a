"""
API endpoints for the Mushaf page layout service.

Authentication and mistake persistence live in the main application; these
endpoints only serve page geometry and reference data.
"""
import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from config import settings
from api.schemas import (
    AyahLocationResponse,
    CorpusStatus,
    JuzItem,
    JuzListResponse,
    PageLayoutResponse,
    PageInfoResponse,
    StatusResponse,
    SurahItem,
    SurahListResponse,
)
from core.domain import EmptyPage, LayoutFailure, PageLayout
from core.surahs import (
    JUZ,
    SURAHS,
    get_juz_by_page,
    get_page_for_surah_ayah,
    get_surah_by_id,
    get_surah_by_page,
)
from services.factory import MushafCorpora, get_corpora, get_page_layout_service
from services.page_layout_service import PageLayoutService
from utils.common import parse_page_number

logger = logging.getLogger(settings.LOGGER_NAME)

router = APIRouter()

INVALID_PAGE_MESSAGE = "Invalid page number. Must be between 1 and 604."


def _require_page(page_number: str) -> int:
    """Non-numeric and out-of-range pages are the same client error."""
    page = parse_page_number(page_number)
    if page is None:
        logger.warning(f"Rejected page number: {page_number!r}")
        raise HTTPException(status_code=400, detail=INVALID_PAGE_MESSAGE)
    return page


# ---------- Page layout ----------
@router.get("/mushaf/page/{page_number}", response_model=PageLayoutResponse)
async def get_page_layout(
    page_number: str,
    layout_service: PageLayoutService = Depends(get_page_layout_service),
) -> PageLayoutResponse:
    page = _require_page(page_number)

    # Corpus reads are blocking; keep them off the event loop
    outcome = await asyncio.to_thread(layout_service.build_page, page)

    if isinstance(outcome, PageLayout):
        return PageLayoutResponse.from_layout(outcome)
    if isinstance(outcome, EmptyPage):
        return PageLayoutResponse.from_empty(outcome)
    if isinstance(outcome, LayoutFailure):
        raise HTTPException(
            status_code=500,
            detail={
                "error": "Internal server error",
                "message": outcome.message,
                "code": outcome.error_code.value,
            },
        )
    raise HTTPException(status_code=500, detail={"error": "Internal server error", "message": "Unknown outcome"})


# ---------- Reference data ----------
@router.get("/mushaf/surahs", response_model=SurahListResponse)
async def list_surahs() -> SurahListResponse:
    return SurahListResponse(surahs=[SurahItem.from_info(s) for s in SURAHS])


@router.get("/mushaf/juz", response_model=JuzListResponse)
async def list_juz() -> JuzListResponse:
    return JuzListResponse(juz=[JuzItem.from_info(j) for j in JUZ])


@router.get("/mushaf/surahs/{surah_id}", response_model=SurahItem)
async def get_surah(surah_id: int) -> SurahItem:
    surah = get_surah_by_id(surah_id)
    if surah is None:
        raise HTTPException(status_code=404, detail="Surah not found")
    return SurahItem.from_info(surah)


@router.get("/mushaf/page/{page_number}/info", response_model=PageInfoResponse)
async def get_page_info(page_number: str) -> PageInfoResponse:
    """Surah and juz a page belongs to, for navigation without loading the layout."""
    page = _require_page(page_number)
    surah = get_surah_by_page(page)
    juz = get_juz_by_page(page)
    return PageInfoResponse(
        page=page,
        surah=SurahItem.from_info(surah) if surah else None,
        juz=JuzItem.from_info(juz) if juz else None,
    )


@router.get("/mushaf/locate", response_model=AyahLocationResponse)
async def locate_ayah(
    surah: int = Query(..., ge=1, le=114),
    ayah: int = Query(1, ge=1),
) -> AyahLocationResponse:
    """
    Page to open for surah:ayah.

    Resolved to the juz boundary at or before the ayah, never earlier than the
    surah's own start page.
    """
    info = get_surah_by_id(surah)
    if info is None or ayah > info.verse_count:
        raise HTTPException(status_code=400, detail=f"Invalid ayah {surah}:{ayah}")

    page = max(info.start_page, get_page_for_surah_ayah(surah, ayah))
    juz = get_juz_by_page(page)
    return AyahLocationResponse(surah=surah, ayah=ayah, page=page, juz=juz.id if juz else None)


# ---------- Status ----------
def _corpus_status(corpus) -> CorpusStatus:
    try:
        return CorpusStatus(available=corpus.is_available(), total_words=corpus.count_words())
    except Exception as e:
        logger.error(f"Corpus status check failed: {e}")
        return CorpusStatus(available=False, error=str(e))


@router.get("/status", response_model=StatusResponse)
async def get_status(corpora: MushafCorpora = Depends(get_corpora)) -> StatusResponse:
    precise = await asyncio.to_thread(_corpus_status, corpora.precise)
    flat = await asyncio.to_thread(_corpus_status, corpora.flat)
    return StatusResponse(
        precise_corpus=precise,
        flat_corpus=flat,
        layout_metadata_available=corpora.layout_metadata.is_available(),
        ready_for_queries=precise.available or flat.available,
    )
