from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional


_DEFAULT_PROMPT = "risp > "
_DEFAULT_LOG_LEVEL = "WARNING"


def value_from_env(var: str, default: Optional[str]) -> Optional[str]:
    raw = os.environ.get(var)
    if not raw:
        return default
    return raw


def get_prompt() -> str:
    return value_from_env('RISP_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    name = value_from_env('RISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.getLevelName(_DEFAULT_LOG_LEVEL)


def get_prelude_path() -> Optional[Path]:
    raw = value_from_env('RISP_PRELUDE', None)
    return Path(raw.strip()) if raw else None
