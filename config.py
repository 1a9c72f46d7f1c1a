"""Mushaf layout service configuration"""
import os
from pydantic import model_validator
from pydantic_settings import BaseSettings
from utils.common import get_log_file_path, get_project_root

_DEFAULT_DATA_DIR = os.path.join(get_project_root(), "data", "mushaf")

# Bundled file names, resolved against MUSHAF_DATA_DIR when no explicit path is set
PRECISE_LAYOUT_DB_NAME = "qpc-v1-15-lines.db"
PRECISE_WORDS_DB_NAME = "qpc-v1-glyph-codes-wbw.db"
FLAT_WORDS_JSON_NAME = "qpc-v4.json"


class Settings(BaseSettings):
    """Application configuration"""

    # Logger configuration
    LOG_FILE_PATH: str = get_log_file_path()
    LOGGER_NAME: str = "mushaf_layout"
    LOG_LEVEL: str = "DEBUG"
    CONSOLE_LOG_LEVEL: str = "INFO"

    # App metadata
    APP_TITLE: str = "Mushaf Page Layout Service"
    APP_VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Corpus locations
    MUSHAF_DATA_DIR: str = _DEFAULT_DATA_DIR

    # Precise corpus: 15-line layout (table: pages) + word glyphs (table: words)
    PRECISE_LAYOUT_DB_PATH: str = ""
    PRECISE_WORDS_DB_PATH: str = ""

    # Line classification source; empty means "same file as the precise layout"
    LAYOUT_METADATA_DB_PATH: str = ""

    # Flat corpus: ordered word list keyed by "surah:ayah:word"
    FLAT_WORDS_JSON_PATH: str = ""

    # Text normalization
    STRIP_TAJWEED_MARKUP: bool = True

    @model_validator(mode="after")
    def resolve_corpus_paths(self) -> "Settings":
        """Fill unset corpus paths from the data directory."""
        if not self.PRECISE_LAYOUT_DB_PATH:
            self.PRECISE_LAYOUT_DB_PATH = os.path.join(self.MUSHAF_DATA_DIR, PRECISE_LAYOUT_DB_NAME)
        if not self.PRECISE_WORDS_DB_PATH:
            self.PRECISE_WORDS_DB_PATH = os.path.join(self.MUSHAF_DATA_DIR, PRECISE_WORDS_DB_NAME)
        if not self.FLAT_WORDS_JSON_PATH:
            self.FLAT_WORDS_JSON_PATH = os.path.join(self.MUSHAF_DATA_DIR, FLAT_WORDS_JSON_NAME)
        return self

    @property
    def layout_metadata_db_path(self) -> str:
        return self.LAYOUT_METADATA_DB_PATH or self.PRECISE_LAYOUT_DB_PATH

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
