"""
Runtime settings for SocialSave, read from the environment (.env supported).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from utils.constants import DEFAULT_HISTORY_LIMIT, DEMO_DELAY_SECONDS


@dataclass
class Settings:
    """Configuration passed explicitly into the app and the resolver."""

    rapidapi_key: Optional[str] = None
    frontend_url: str = "http://localhost:3000"
    history_limit: int = DEFAULT_HISTORY_LIMIT
    demo_delay: float = DEMO_DELAY_SECONDS
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        load_dotenv()
        return cls(
            rapidapi_key=os.getenv("RAPIDAPI_KEY") or None,
            frontend_url=os.getenv("FRONTEND_URL", "http://localhost:3000"),
            history_limit=int(os.getenv("HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT)),
            demo_delay=float(os.getenv("DEMO_DELAY_SECONDS", DEMO_DELAY_SECONDS)),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
