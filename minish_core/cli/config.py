from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PROMPT = "$ "
DEFAULT_LOG_LEVEL = logging.WARNING

def _parse_level(text: Optional[str]) -> int:
    if not text:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(text.strip().upper())
    # getLevelName returns "Level X" for names it does not know
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL

@dataclass
class Settings:
    prompt: str = DEFAULT_PROMPT
    log_level: int = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        prompt = env.get("MINISH_PROMPT")
        return cls(
            prompt=DEFAULT_PROMPT if prompt is None else prompt,
            log_level=_parse_level(env.get("MINISH_LOG_LEVEL")),
            log_file=env.get("MINISH_LOG_FILE") or None,
        )
