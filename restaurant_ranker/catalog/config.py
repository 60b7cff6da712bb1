from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DEFAULT_CATALOG = Path(__file__).resolve().parent / "data" / "restaurants.json"


def _env_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where the catalog lives and the fixed location distances are measured from.
    """

    catalog_path: Path = field(
        default_factory=lambda: Path(os.getenv("RESTAURANT_CATALOG_PATH", str(_DEFAULT_CATALOG)))
    )
    user_latitude: float = field(default_factory=lambda: _env_float("USER_LATITUDE", "40.7580"))
    user_longitude: float = field(default_factory=lambda: _env_float("USER_LONGITUDE", "-73.9855"))


DEFAULT_CATALOG_CONFIG = CatalogConfig()
