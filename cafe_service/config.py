from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_BUNDLED_CATALOG = Path(__file__).resolve().parent / "catalog" / "data" / "cafes.csv"

# Names are joined with this on the wire; clients split on it.
RESPONSE_SEPARATOR = ","


@dataclass(frozen=True)
class ServiceConfig:
    catalog_path: Path = Path(os.getenv("CAFE_CATALOG_PATH", str(_BUNDLED_CATALOG)))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8080"))


DEFAULT_SERVICE_CONFIG = ServiceConfig()
