"""
Runtime configuration, read once from the environment (and .env if present).
"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent

MAX_TOP_N = 50


def parse_top_n(raw, default: int = 5) -> int:
    """Read MATCH_TOP_N: unparsable values fall back to default, the rest are clamped to 1..MAX_TOP_N."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return max(1, min(value, MAX_TOP_N))


CAREERS_CATALOG_PATH = Path(os.getenv("CAREERS_CATALOG_PATH", BASE_DIR / "data" / "careers.json"))
DEFAULT_TOP_N = parse_top_n(os.getenv("MATCH_TOP_N", "5"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]
