from __future__ import annotations
import os
from pathlib import Path


# Resolve installation dir (lispy package directory)
_LISPY_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _LISPY_DIR / 'prelude'
_DEFAULT_ERROR_LIMIT = 512


def get_prelude_root() -> Path:
    raw = os.environ.get('LISPY_PRELUDE_PATH')
    p = Path(raw.strip()) if raw and raw.strip() else _DEFAULT_PRELUDE_DIR
    # treat as single directory; if a file path is set, return its parent
    return p if p.is_dir() else p.parent


def error_message_limit() -> int:
    raw = os.environ.get('LISPY_ERROR_LIMIT')
    if not raw:
        return _DEFAULT_ERROR_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        return _DEFAULT_ERROR_LIMIT
    return limit if limit > 0 else _DEFAULT_ERROR_LIMIT
