# infrastructure/flat_corpus.py
"""Flat word corpus loaded from a QPC word-by-word JSON file"""
import json
import logging
import os
from typing import Any, Dict, Iterable, List, Optional, Tuple

from config import settings
from core.domain import CorpusDataError, FlatWord
from core.interfaces import IFlatWordCorpus
from core.surahs import surah_page_spans
from utils.common import is_location, parse_location, strip_tajweed_markup

logger = logging.getLogger(settings.LOGGER_NAME)

PageRange = Tuple[int, int]  # [start, end) into the sorted word list


def _entry_location(entry: Dict[str, Any], position: int) -> str:
    location = entry.get("location")
    if is_location(location):
        return location
    return f"{entry.get('surah', 0)}:{entry.get('ayah', 0)}:{entry.get('word', position)}"


def _to_flat_word(entry: Dict[str, Any], location: str, strip_markup: bool) -> FlatWord:
    surah, ayah, word = parse_location(location)
    text = entry["text"]
    raw_id = entry.get("id")
    return FlatWord(
        surah=int(entry.get("surah") or surah),
        ayah=int(entry.get("ayah") or ayah),
        word=int(entry.get("word") or word),
        text=strip_tajweed_markup(text) if strip_markup else text,
        location=location,
        word_id=int(raw_id) if raw_id not in (None, "") else None,
    )


def normalize_entries(raw: Any, strip_markup: bool = True) -> List[FlatWord]:
    """
    Normalize the JSON payload into words sorted by (surah, ayah, word).

    Accepts an object keyed by "surah:ayah:word" or a list of entries.
    Malformed entries (not an object, no string text, non-numeric position)
    are skipped; duplicate locations keep the first.
    """
    if isinstance(raw, dict):
        entries: Iterable[Tuple[Dict[str, Any], str]] = (
            (entry, location) for location, entry in raw.items()
        )
    elif isinstance(raw, list):
        entries = (
            (entry, _entry_location(entry, i)) for i, entry in enumerate(raw) if isinstance(entry, dict)
        )
    else:
        raise ValueError(f"Unsupported word corpus payload: {type(raw).__name__}")

    words: List[FlatWord] = []
    seen = set()
    duplicates = 0
    malformed = 0
    for entry, location in entries:
        if not isinstance(entry, dict) or not isinstance(entry.get("text"), str):
            malformed += 1
            continue
        try:
            word = _to_flat_word(entry, location, strip_markup)
        except (ValueError, TypeError):
            malformed += 1
            continue
        if word.key in seen:
            duplicates += 1
            continue
        seen.add(word.key)
        words.append(word)

    if duplicates:
        logger.warning(f"Skipped {duplicates} duplicate word locations in flat corpus")
    if malformed:
        logger.warning(f"Skipped {malformed} malformed entries in flat corpus")

    words.sort(key=lambda w: w.key)
    return words


def build_page_index(words: List[FlatWord]) -> Dict[int, PageRange]:
    """
    Map every page to a slice of the sorted word list.

    Pages are grouped into spans that start at surah start pages; the words
    of the surahs starting in a span are spread evenly over its pages.
    """
    # Words are sorted, so each surah occupies one contiguous run
    surah_runs: Dict[int, PageRange] = {}
    for i, word in enumerate(words):
        start, _ = surah_runs.get(word.surah, (i, i))
        surah_runs[word.surah] = (start, i + 1)

    index: Dict[int, PageRange] = {}
    for first_page, last_page, surah_ids in surah_page_spans():
        runs = [surah_runs[s] for s in surah_ids if s in surah_runs]
        if not runs:
            continue
        span_start = min(start for start, _ in runs)
        span_end = max(end for _, end in runs)
        span_words = span_end - span_start
        page_count = last_page - first_page + 1

        for offset in range(page_count):
            start = span_start + offset * span_words // page_count
            end = span_start + (offset + 1) * span_words // page_count
            if end > start:
                index[first_page + offset] = (start, end)
    return index


class JsonFlatWordCorpus(IFlatWordCorpus):
    """
    In-memory flat corpus.

    Parsed once when the corpora are opened; read-only afterwards. A file
    that fails to parse is kept as a load error and reported on every query.
    """

    def __init__(self, words: List[FlatWord], load_error: Optional[str] = None):
        self._words = words
        self._page_index = build_page_index(words)
        self.load_error = load_error

    @classmethod
    def from_file(cls, file_path: str, strip_markup: bool = True) -> "JsonFlatWordCorpus":
        """Load the corpus; a missing file yields an empty corpus."""
        if not file_path or not os.path.exists(file_path):
            logger.warning(f"Flat word corpus not found at: {file_path}")
            return cls([])

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            corpus = cls.from_payload(raw, strip_markup=strip_markup)
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Flat word corpus load failed for {file_path}: {e}", exc_info=True)
            return cls([], load_error=f"Flat word corpus unreadable: {e}")

        logger.info(f"Loaded {corpus.count_words()} words from flat corpus {file_path}")
        return corpus

    @classmethod
    def from_payload(cls, raw: Any, strip_markup: bool = True) -> "JsonFlatWordCorpus":
        """Build the corpus from an already parsed JSON payload."""
        return cls(normalize_entries(raw, strip_markup=strip_markup))

    def _check_loaded(self) -> None:
        if self.load_error:
            raise CorpusDataError(self.load_error)

    def is_available(self) -> bool:
        return bool(self._words)

    def get_page_words(self, page: int) -> List[FlatWord]:
        self._check_loaded()
        page_range = self._page_index.get(page)
        if page_range is None:
            return []
        start, end = page_range
        return list(self._words[start:end])

    def count_words(self) -> int:
        self._check_loaded()
        return len(self._words)
