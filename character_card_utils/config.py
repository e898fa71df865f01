import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() not in {
        "0",
        "false",
        "no",
    }


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("環境變數 %s=%r 不是整數，改用預設值 %s", name, raw, default)
        return default


@dataclass
class Settings:
    log_failures: bool = field(default_factory=lambda: _env_flag("CARD_LOG_FAILURES", "true"))
    max_reported_issues: int = field(
        default_factory=lambda: _env_int("CARD_MAX_REPORTED_ISSUES", 20)
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
