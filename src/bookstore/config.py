"""Runtime settings, read from the environment.

Every setting has a default so the CLI works out of the box; the
``--data-dir`` CLI option takes precedence over ``BOOKSTORE_DATA_DIR``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_DATA_DIR = Path("data")


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    log_level: str = "WARNING"
    log_format: str = "console"  # or "json"

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            data_dir=Path(os.getenv("BOOKSTORE_DATA_DIR", str(DEFAULT_DATA_DIR))),
            log_level=os.getenv("BOOKSTORE_LOG_LEVEL", "WARNING").upper(),
            log_format=os.getenv("BOOKSTORE_LOG_FORMAT", "console").lower(),
        )

    def with_data_dir(self, data_dir: Path | None) -> Settings:
        if data_dir is None:
            return self
        return replace(self, data_dir=data_dir)
