"""
Wizard Duel — Runtime settings
Read from the environment; a local .env file is loaded first if present.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import InvalidConfigError

# Load environment variables from .env file
load_dotenv()


@dataclass
class Settings:
    seed: Optional[int] = None
    difficulty: int = 1
    log_level: str = "INFO"
    openai_api_key: Optional[str] = None
    narrator_model: str = "gpt-4o"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            seed=_int_env("DUEL_SEED"),
            difficulty=_int_env("DUEL_DIFFICULTY", 1),
            log_level=os.environ.get("DUEL_LOG_LEVEL", "INFO").upper(),
            openai_api_key=os.environ.get("OPENAI_API_KEY") or None,
            narrator_model=os.environ.get("DUEL_NARRATOR_MODEL", "gpt-4o"),
        )


def _int_env(name: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise InvalidConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise InvalidConfigError(f"{name} must not be negative, got {value}")
    return value
