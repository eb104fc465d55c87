"""Centralised settings for wikipull.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Wiki site layout
    # ------------------------------------------------------------------
    site_template: str = field(
        default_factory=lambda: os.environ.get(
            "WIKI_SITE_TEMPLATE", "https://{name}.fandom.com"
        )
    )
    api_path: str = field(
        default_factory=lambda: os.environ.get("WIKI_API_PATH", "/api.php")
    )
    search_path: str = field(
        default_factory=lambda: os.environ.get(
            "WIKI_SEARCH_PATH", "/wiki/Special:Search?query="
        )
    )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "USER_AGENT",
            "Mozilla/5.0 (compatible; wikipull/0.1; +https://github.com/wikipull)",
        )
    )

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    search_result_limit: int = field(
        default_factory=lambda: int(os.environ.get("SEARCH_RESULT_LIMIT", "1"))
    )

    # ------------------------------------------------------------------
    # Export (CLI)
    # ------------------------------------------------------------------
    export_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("EXPORT_DIR", "./output"))
    )
    export_max_items: int = field(
        default_factory=lambda: int(os.environ.get("EXPORT_MAX_ITEMS", "10"))
    )

    def ensure_export_dir(self) -> None:
        """Create the export directory if it does not exist."""
        self.export_dir.mkdir(parents=True, exist_ok=True)


# Module-level singleton, import this everywhere:
#   from wikipull.config import settings
settings = Settings()
