from dataclasses import dataclass
import logging
import os
from dotenv import load_dotenv


load_dotenv()


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _log_level(value: str) -> str:
    level = value.strip().upper()
    # getLevelName maps unknown names to "Level <name>" rather than a number.
    return level if isinstance(logging.getLevelName(level), int) else "INFO"


@dataclass(frozen=True)
class Settings:
    web_mode: bool = _flag(os.getenv("GPACALC_WEB", "0"))
    port: int = int(os.getenv("PORT", "8550"))
    log_level: str = _log_level(os.getenv("GPACALC_LOG_LEVEL", "INFO"))
    title: str = os.getenv("GPACALC_TITLE", "GPA Calculator")


settings = Settings()
