"""Core interfaces for the Mushaf page layout engine"""
from abc import ABC, abstractmethod
from typing import List

from core.domain import FlatWord, LineMeta, PreciseWord

# ============= Word Corpus Interfaces =============
class IPreciseWordCorpus(ABC):
    """
    Word source carrying an authoritative line number for every word.

    An unavailable corpus answers with empty lists and a zero count.
    """

    @abstractmethod
    def get_page_words(self, page: int) -> List[PreciseWord]:
        """Words of the page in page order"""
        pass

    @abstractmethod
    def count_words(self) -> int:
        """Total number of words in the corpus"""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        pass


class IFlatWordCorpus(ABC):
    """
    Ordered word list without line numbers.

    Its global word count is the reference total used for progress percentages.
    """

    @abstractmethod
    def get_page_words(self, page: int) -> List[FlatWord]:
        """Words of the page ordered by (surah, ayah, word)"""
        pass

    @abstractmethod
    def count_words(self) -> int:
        """Total number of words in the corpus"""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        pass

# ============= Layout Metadata Interface =============
class ILayoutMetadataProvider(ABC):
    """Per-line classification (ayah / surah_name / basmala) keyed by page and line number"""

    @abstractmethod
    def get_page_lines(self, page: int) -> List[LineMeta]:
        """Line metadata of the page ordered by line number; empty when unknown"""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        pass
