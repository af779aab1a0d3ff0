"""
Configuration file for SEO Analyzer
"""
import os
import logging
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


def _env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name, "").strip()
    return value or default


def _env_number(name: str, default, cast=float):
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Invalid value for {name}: {raw!r}, using {default}")
        return default


@dataclass(frozen=True)
class SEOConfig:
    """Configuration settings for the SEO analyzer"""

    # Provider credentials
    page_speed_api_key: Optional[str] = None
    opengraph_api_key: Optional[str] = None
    serp_api_key: Optional[str] = None

    # Server settings
    host: str = "0.0.0.0"
    port: int = 5000

    # Timeouts (seconds)
    request_timeout: float = 15.0
    provider_timeout: float = 10.0

    user_agent: str = DEFAULT_USER_AGENT

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_format: str = "%(asctime)s - %(levelname)s - %(message)s"

    @classmethod
    def from_env(cls) -> "SEOConfig":
        """Build a configuration from process environment variables"""
        return cls(
            page_speed_api_key=_env_str("PAGE_SPEED_API_KEY"),
            opengraph_api_key=_env_str("OPENGRAPH_API_KEY"),
            serp_api_key=_env_str("SERP_API_KEY"),
            host=_env_str("HOST", "0.0.0.0"),
            port=_env_number("PORT", 5000, int),
            request_timeout=_env_number("SEO_REQUEST_TIMEOUT", 15.0),
            provider_timeout=_env_number("SEO_PROVIDER_TIMEOUT", 10.0),
            log_level=_env_str("LOG_LEVEL", "INFO").upper(),
            log_dir=_env_str("LOG_DIR", "logs"),
        )

    def missing_credentials(self) -> List[str]:
        """Names of the provider API keys that are not configured"""
        keys = {
            "PAGE_SPEED_API_KEY": self.page_speed_api_key,
            "OPENGRAPH_API_KEY": self.opengraph_api_key,
            "SERP_API_KEY": self.serp_api_key,
        }
        return [name for name, value in keys.items() if not value]

    def warn_missing_credentials(self) -> bool:
        """Log a warning for unset provider keys. Returns True if all are set."""
        missing = self.missing_credentials()
        if missing:
            logger.warning(
                f"One or more API keys are missing: {', '.join(missing)}. "
                "Affected providers will report N/A."
            )
            return False
        return True


# Default configuration instance
config = SEOConfig.from_env()
