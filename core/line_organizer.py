"""Group positioned words into Line records and label them with layout metadata"""
from typing import Dict, Iterable, List, Optional, Sequence

from core.domain import DEFAULT_LINE_TYPE, Line, LineMeta, PositionedWord


def organize_lines(
    words: Iterable[PositionedWord],
    layout_meta: Optional[Sequence[LineMeta]] = None
) -> List[Line]:
    """
    Group words by line number, keeping first-seen line order and word order.

    Metadata is joined on the exact line number; lines without metadata are
    plain ayah lines. Word positions are left untouched.
    """
    grouped: Dict[int, List[PositionedWord]] = {}
    for word in words:
        grouped.setdefault(word.line_number, []).append(word)

    meta_by_line = {meta.line_number: meta for meta in (layout_meta or ())}

    lines: List[Line] = []
    for line_number, line_words in grouped.items():
        meta = meta_by_line.get(line_number)
        lines.append(Line(
            line_number=line_number,
            words=tuple(line_words),
            line_type=meta.line_type if meta else DEFAULT_LINE_TYPE,
            surah_number=meta.surah_number if meta else None,
            is_centered=meta.is_centered if meta else False,
        ))
    return lines


def flatten_lines(lines: Iterable[Line]) -> List[PositionedWord]:
    """Words of all lines in reading order."""
    return [word for line in lines for word in line.words]


def derive_anchor_surah(lines: Sequence[Line]) -> Optional[int]:
    """Surah of the first word, in reading order, of the first line."""
    if not lines or not lines[0].words:
        return None
    return lines[0].words[0].surah
