"""
Word geometry for a 15-line Mushaf page.

Words in a line are justified right-to-left across the available width:
1. Every word gets the same calibrated width (no glyph metrics)
2. The remaining width is spread evenly between words
3. Index 0 is the rightmost word; x decreases with the index
"""
from typing import List, Sequence

from core.domain import Position

# Standard Mushaf canvas (15-line format)
PAGE_WIDTH = 1000
PAGE_HEIGHT = 1414
LINES_PER_PAGE = 15
MARGIN_TOP = 80
MARGIN_BOTTOM = 80
MARGIN_SIDE = 60
LINE_HEIGHT = (PAGE_HEIGHT - MARGIN_TOP - MARGIN_BOTTOM) / LINES_PER_PAGE

# Calibrated average word widths per source
PRECISE_AVG_WORD_WIDTH = 55
APPROXIMATE_AVG_WORD_WIDTH = 60

WORD_TOP_OFFSET = 0.15   # × line height
WORD_HEIGHT_RATIO = 0.7  # × line height


def line_top(line_number: int) -> float:
    """Y coordinate where a word box starts on the given line."""
    return MARGIN_TOP + (line_number - 1) * LINE_HEIGHT + WORD_TOP_OFFSET * LINE_HEIGHT


def word_spacing(word_count: int, avg_word_width: float) -> float:
    """Gap between adjacent words; 0 for lines with fewer than two words."""
    if word_count <= 1:
        return 0
    available_width = PAGE_WIDTH - 2 * MARGIN_SIDE
    return (available_width - word_count * avg_word_width) / (word_count - 1)


def compute_positions(
    line_number: int,
    words: Sequence[object],
    avg_word_width: float
) -> List[Position]:
    """
    Compute one bounding box per word of a line.

    Args:
        line_number: Line on the page (1-15)
        words: Words of the line in reading order (index 0 = rightmost)
        avg_word_width: Calibrated word width for the word source

    Returns:
        Positions aligned with ``words``; empty for an empty line
    """
    if not 1 <= line_number <= LINES_PER_PAGE:
        raise ValueError(f"Line number {line_number} outside 1-{LINES_PER_PAGE}")

    count = len(words)
    if count == 0:
        return []

    spacing = word_spacing(count, avg_word_width)
    y = line_top(line_number)
    height = WORD_HEIGHT_RATIO * LINE_HEIGHT
    right_edge = PAGE_WIDTH - MARGIN_SIDE

    return [
        Position(
            x=right_edge - i * (avg_word_width + spacing) - avg_word_width,
            y=y,
            width=avg_word_width,
            height=height,
        )
        for i in range(count)
    ]
