"""Centralised settings for the orgfix post-processor.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() not in ("0", "false", "no", "off", "")


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Published export
    # ------------------------------------------------------------------
    site_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("ORGFIX_SITE_DIR", "public"))
    )
    encoding: str = field(
        default_factory=lambda: os.environ.get("ORGFIX_ENCODING", "utf-8")
    )

    # ------------------------------------------------------------------
    # HTML handling
    # ------------------------------------------------------------------
    html_parser: str = field(
        default_factory=lambda: os.environ.get("ORGFIX_HTML_PARSER", "html.parser")
    )
    link_days: bool = field(
        default_factory=lambda: _env_flag("ORGFIX_LINK_DAYS", "1")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("ORGFIX_LOG_LEVEL", "INFO").upper()
    )
    log_file: Optional[Path] = field(
        default_factory=lambda: (
            Path(os.environ["ORGFIX_LOG_FILE"]) if os.environ.get("ORGFIX_LOG_FILE") else None
        )
    )


# Module-level singleton; import this everywhere:
#   from orgfix.config import settings
settings = Settings()
