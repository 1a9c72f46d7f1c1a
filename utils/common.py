"""Common utilities: path management, page validation and corpus text helpers"""
import os
import re
from typing import Optional, Tuple

# ⚠️ DO NOT import settings here - causes circular import with config.py

TOTAL_PAGES = 604

_TAJWEED_RULE_RE = re.compile(r"<rule[^>]*>([^<]*)</rule>")
_LOCATION_RE = re.compile(r"^\d+:\d+:\d+$")
_PAGE_RE = re.compile(r"\d{1,4}")


# ============= Path Management =============

def get_project_root() -> str:
    """Returns the absolute path to the project's root directory."""
    return os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))


def get_log_file_path() -> str:
    """Creates the log directory if it doesn't exist and returns the full log file path."""
    project_root = get_project_root()
    log_dir = os.path.join(project_root, 'log')

    if not os.path.exists(log_dir):
        os.makedirs(log_dir, exist_ok=True)

    return os.path.join(log_dir, 'mushaf_layout.log')


# ============= Page Validation =============

def is_valid_page_number(page: int) -> bool:
    """True for Mushaf pages 1-604."""
    return isinstance(page, int) and not isinstance(page, bool) and 1 <= page <= TOTAL_PAGES


# ============= Corpus Text Helpers =============

def strip_tajweed_markup(text: str) -> str:
    """Strip tajweed markup (<rule ...>...</rule>) for plain display; keep inner text."""
    if not text:
        return text
    return _TAJWEED_RULE_RE.sub(r"\1", text).strip()


def is_location(value) -> bool:
    """Check for a "surah:ayah:word" location key."""
    return isinstance(value, str) and bool(_LOCATION_RE.match(value))


def parse_location(location: str) -> Tuple[int, int, int]:
    """Split "surah:ayah:word" into integers; missing or bad parts become 0."""
    parts = location.split(":")
    numbers = []
    for i in range(3):
        try:
            numbers.append(int(parts[i]))
        except (IndexError, ValueError):
            numbers.append(0)
    return numbers[0], numbers[1], numbers[2]


def parse_page_number(value: str) -> Optional[int]:
    """Parse a page path segment; None unless it is an integer in 1-604."""
    if not isinstance(value, str) or not _PAGE_RE.fullmatch(value):
        return None
    page = int(value)
    return page if is_valid_page_number(page) else None
