from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


DEFAULT_PROMPT = "> "
DEFAULT_LOG_LEVEL = "WARNING"


def paths_from_env(var: str, defaults: Iterable[Path] = ()) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prompt() -> str:
    return os.environ.get("TINYLISP_PROMPT", DEFAULT_PROMPT)


def get_prelude_paths() -> List[Path]:
    return paths_from_env("TINYLISP_PRELUDE_PATH")


def get_log_level() -> int:
    name = os.environ.get("TINYLISP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING
