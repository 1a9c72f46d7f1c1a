"""Line assignment strategies: map a page's words onto lines 1-15 and position them"""
import math
from abc import ABC, abstractmethod
from typing import Dict, List, Sequence, Tuple

from core.domain import CorpusDataError, FlatWord, PositionedWord, PreciseWord
from core.positioning import (
    APPROXIMATE_AVG_WORD_WIDTH,
    LINES_PER_PAGE,
    PRECISE_AVG_WORD_WIDTH,
    compute_positions,
)

WordKey = Tuple[int, int, int]


class LineAssignmentStrategy(ABC):
    """Abstract base class for the per-source line assignment"""

    avg_word_width: float

    @abstractmethod
    def assign(self, words: Sequence) -> List[PositionedWord]:
        """Assign lines and positions; result is ordered by line, then RTL index"""
        pass


class PreciseLineAssignment(LineAssignmentStrategy):
    """Line numbers come straight from the corpus"""

    avg_word_width = PRECISE_AVG_WORD_WIDTH

    def assign(self, words: Sequence[PreciseWord]) -> List[PositionedWord]:
        by_line: Dict[int, List[PreciseWord]] = {}
        for word in words:
            if not 1 <= word.line_number <= LINES_PER_PAGE:
                raise CorpusDataError(
                    f"Word {word.surah}:{word.ayah}:{word.word} has line number {word.line_number}"
                )
            by_line.setdefault(word.line_number, []).append(word)

        positioned: List[PositionedWord] = []
        for line_number in sorted(by_line):
            line_words = sorted(by_line[line_number], key=lambda w: (w.surah, w.ayah, w.word_index))
            positions = compute_positions(line_number, line_words, self.avg_word_width)
            for word, position in zip(line_words, positions):
                positioned.append(PositionedWord(
                    word_index=word.word_index,
                    surah=word.surah,
                    ayah=word.ayah,
                    word=word.word,
                    text=word.text,
                    line_number=line_number,
                    position=position,
                ))
        return positioned


class ApproximateLineAssignment(LineAssignmentStrategy):
    """
    Even distribution of the page's words over 15 lines.

    Best-effort placeholder: real Mushaf line breaks depend on glyph widths.
    """

    avg_word_width = APPROXIMATE_AVG_WORD_WIDTH

    @staticmethod
    def words_per_line(total_words: int) -> int:
        return max(math.ceil(total_words / LINES_PER_PAGE), 1)

    @classmethod
    def line_for_index(cls, index: int, words_per_line: int) -> int:
        return min(index // words_per_line + 1, LINES_PER_PAGE)

    def assign(self, words: Sequence[FlatWord]) -> List[PositionedWord]:
        per_line = self.words_per_line(len(words))

        # One pass builds the line membership and the in-line index lookup
        lines: Dict[int, List[Tuple[int, FlatWord]]] = {}
        index_in_line: Dict[WordKey, int] = {}
        for index, word in enumerate(words):
            if word.key in index_in_line:
                raise CorpusDataError(f"Duplicate word {word.surah}:{word.ayah}:{word.word} on page")
            line_number = self.line_for_index(index, per_line)
            members = lines.setdefault(line_number, [])
            index_in_line[word.key] = len(members)
            members.append((index, word))

        positioned: List[PositionedWord] = []
        for line_number in sorted(lines):
            members = lines[line_number]
            positions = compute_positions(line_number, members, self.avg_word_width)
            for sequence_index, word in members:
                positioned.append(PositionedWord(
                    word_index=sequence_index,
                    surah=word.surah,
                    ayah=word.ayah,
                    word=word.word,
                    text=word.text,
                    line_number=line_number,
                    position=positions[index_in_line[word.key]],
                ))
        return positioned
