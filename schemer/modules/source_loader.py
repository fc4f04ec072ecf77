from __future__ import annotations
import logging
from pathlib import Path

from schemer.config import get_search_roots
from schemer.errors import SchemerError

logger = logging.getLogger(__name__)


# Map a filename to a file on disk: as given (absolute or relative to the
# working directory) first, then underneath each SCHEMER_PATH root.

def resolve_source(filename: str) -> Path:
    path = Path(filename)
    if path.is_absolute() or path.is_file():
        return path
    for root in get_search_roots():
        candidate = root / path
        if candidate.is_file():
            return candidate
    # Not found anywhere: hand back the original so reading raises FileNotFoundError
    return path


def load_source(filename: str) -> str:
    path = resolve_source(filename)
    logger.debug("reading source %s (resolved to %s)", filename, path)
    try:
        return path.read_text(encoding='utf-8')
    except UnicodeDecodeError as exc:
        raise SchemerError(f"Cannot decode {filename} as UTF-8: {exc.reason}") from exc
