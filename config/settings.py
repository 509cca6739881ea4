from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


@dataclass(frozen=True)
class Settings:
    # Source data
    companies_csv_path: str
    relationships_csv_path: str
    csv_encoding: str

    # Snapshot export
    db_path: str

    log_level: str

    # Core/runtime
    run_env: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        companies_csv_path=os.getenv("COMPANIES_CSV", "data/companies.csv"),
        relationships_csv_path=os.getenv("RELATIONSHIPS_CSV", "data/relationships.csv"),
        csv_encoding=os.getenv("CSV_ENCODING", "utf-8"),
        db_path=os.getenv("DB_PATH", "companies.db"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
    )
