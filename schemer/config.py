from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


_DEFAULT_PROMPT = 'schemer> '
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path] = ()) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_search_roots() -> List[Path]:
    # Directories consulted (after the working directory) for relative loads.
    return paths_from_env('SCHEMER_PATH')


def get_log_level() -> str:
    return os.environ.get('SCHEMER_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def get_prompt() -> str:
    return os.environ.get('SCHEMER_PROMPT', _DEFAULT_PROMPT)
