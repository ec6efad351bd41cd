import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_TITLE = "E-Commerce Analytics Dashboard"


@dataclass(frozen=True)
class Settings:
    seed: Optional[int] = None
    log_level: str = "WARNING"
    title: str = DEFAULT_TITLE


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"DASHBOARD_SEED must be an integer, got {raw!r}") from None


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    # getLevelName maps known names to their int value
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(
            f"DASHBOARD_LOG_LEVEL must be a logging level name such as DEBUG or INFO, got {raw!r}"
        )
    return level


def load_settings() -> Settings:
    return Settings(
        seed=_parse_seed(os.getenv("DASHBOARD_SEED")),
        log_level=_parse_log_level(os.getenv("DASHBOARD_LOG_LEVEL", "WARNING")),
        title=os.getenv("DASHBOARD_TITLE", DEFAULT_TITLE),
    )
