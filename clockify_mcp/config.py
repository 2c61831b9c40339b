"""Shared configuration for the MCP server."""
import logging
import os
import sys

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

BASE_URL = "https://api.clockify.me/api/v1"
REPORTS_URL = "https://reports.api.clockify.me/v1"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Process-wide settings, built once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    api_key: str | None = None
    base_url: str = BASE_URL
    reports_url: str = REPORTS_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        # Load environment variables from .env file
        load_dotenv()
        settings = cls(
            api_key=os.getenv("CLOCKIFY_API_KEY") or None,
            base_url=os.getenv("CLOCKIFY_BASE_URL") or BASE_URL,
            reports_url=os.getenv("CLOCKIFY_REPORTS_URL") or REPORTS_URL,
            log_level=os.getenv("CLOCKIFY_LOG_LEVEL") or "INFO",
        )
        if not settings.api_key:
            logger.warning("CLOCKIFY_API_KEY not set; every Clockify call will fail until it is configured")
        return settings


def setup_logging(level: str = "INFO") -> None:
    """Send log records to stderr; stdout carries the MCP protocol."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
