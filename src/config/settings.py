# src/config/settings.py

"""Central configuration for the QuickSell marketplace client."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the QuickSell marketplace client."""

    APP_NAME: str = "QuickSell"

    # --- Backend connection ---
    API_URL: str = os.getenv(
        "QUICKSELL_API_URL", "http://localhost:54321"
    ).rstrip("/")
    API_KEY: str = os.getenv("QUICKSELL_API_KEY", "")
    REQUEST_TIMEOUT: int = 15           # Seconds before a request times out

    # --- HTTP session ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Content-Type": "application/json",
    }

    # --- Tables ---
    PRODUCTS_TABLE: str = "products"
    PROFILES_TABLE: str = "profiles"

    # --- Feed ---
    ANONYMOUS_SELLER: str = "Anonymous Seller"

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"
