"""In-memory corpus providers and word builders shared by the tests"""
from typing import Dict, List, Optional, Sequence, Tuple

from core.domain import FlatWord, LineMeta, PreciseWord
from core.interfaces import IFlatWordCorpus, ILayoutMetadataProvider, IPreciseWordCorpus

# Words per ayah of Al-Fatihah
FATIHAH_AYAH_WORDS = (4, 4, 2, 3, 4, 3, 9)


def flat_words_for(surah: int, ayah_word_counts: Sequence[int]) -> List[FlatWord]:
    words = []
    for ayah, count in enumerate(ayah_word_counts, start=1):
        for word in range(1, count + 1):
            words.append(FlatWord(
                surah=surah, ayah=ayah, word=word,
                text=f"w{surah}-{ayah}-{word}", location=f"{surah}:{ayah}:{word}"
            ))
    return words


def precise_words_for_lines(lines: Dict[int, List[Tuple[int, int, int]]]) -> List[PreciseWord]:
    """Build precise words from {line_number: [(surah, ayah, word), ...]}."""
    words = []
    for line_number in sorted(lines):
        for surah, ayah, word in lines[line_number]:
            words.append(PreciseWord(
                word_index=len(words), surah=surah, ayah=ayah, word=word,
                text=f"p{surah}-{ayah}-{word}", line_number=line_number
            ))
    return words


class FakePreciseCorpus(IPreciseWordCorpus):
    def __init__(self, pages: Optional[Dict[int, List[PreciseWord]]] = None, total: int = 0):
        self.pages = pages or {}
        self.total = total
        self.calls: List[int] = []

    def get_page_words(self, page: int) -> List[PreciseWord]:
        self.calls.append(page)
        return list(self.pages.get(page, []))

    def count_words(self) -> int:
        return self.total

    def is_available(self) -> bool:
        return bool(self.pages)


class FakeFlatCorpus(IFlatWordCorpus):
    def __init__(self, pages: Optional[Dict[int, List[FlatWord]]] = None, total: Optional[int] = None):
        self.pages = pages or {}
        self.total = total
        self.calls: List[int] = []

    def get_page_words(self, page: int) -> List[FlatWord]:
        self.calls.append(page)
        return list(self.pages.get(page, []))

    def count_words(self) -> int:
        if self.total is not None:
            return self.total
        return sum(len(words) for words in self.pages.values())

    def is_available(self) -> bool:
        return bool(self.pages)


class FakeLayoutMetadata(ILayoutMetadataProvider):
    def __init__(self, pages: Optional[Dict[int, List[LineMeta]]] = None):
        self.pages = pages or {}
        self.calls: List[int] = []

    def get_page_lines(self, page: int) -> List[LineMeta]:
        self.calls.append(page)
        return list(self.pages.get(page, []))

    def is_available(self) -> bool:
        return bool(self.pages)


class BrokenPreciseCorpus(FakePreciseCorpus):
    """Simulates a corrupted database file."""

    def get_page_words(self, page: int) -> List[PreciseWord]:
        self.calls.append(page)
        raise RuntimeError("database disk image is malformed")
