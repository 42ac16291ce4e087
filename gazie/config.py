"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. Values are read when `get_settings()` is
called so a `.env` file or the process environment can override them.
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()

DEFAULT_DATA_DIR = os.path.join(os.path.expanduser("~"), ".gazie-tui")
DB_FILENAME = "gazie.db"
LOG_FILENAME = "gazie-tui.log"


def _data_dir() -> str:
    return os.path.expanduser(os.getenv("GAZIE_DATA_DIR", DEFAULT_DATA_DIR))


@dataclass
class Settings:
    # Storage (one SQLite file under the user's home by default)
    data_dir: str = field(default_factory=_data_dir)
    database_url: str = ""

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("GAZIE_LOG_LEVEL", "INFO"))
    log_file: str = ""

    # Sample rows for empty tables on first launch
    seed_samples: bool = field(
        default_factory=lambda: os.getenv("GAZIE_SEED_SAMPLES", "1") == "1"
    )

    def __post_init__(self) -> None:
        if not self.database_url:
            self.database_url = os.getenv(
                "GAZIE_DATABASE_URL", f"sqlite:///{self.db_path}"
            )
        if not self.log_file:
            self.log_file = os.getenv(
                "GAZIE_LOG_FILE", os.path.join(self.data_dir, LOG_FILENAME)
            )

    @property
    def db_path(self) -> str:
        return os.path.join(self.data_dir, DB_FILENAME)


def get_settings() -> Settings:
    """Return a new Settings instance (cheap dataclass construction)."""
    return Settings()
