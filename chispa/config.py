from __future__ import annotations
import logging
import os
from pathlib import Path

# Resolve installation dir (chispa package directory)
_CHISPA_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _CHISPA_DIR / 'prelude'
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_MAX_DEPTH = 500


def get_prelude_root() -> Path:
    raw = os.environ.get('CHISPA_PRELUDE_PATH')
    p = Path(raw.strip()) if raw and raw.strip() else _DEFAULT_PRELUDE_DIR
    # treat as single directory; if a file path is set, return its parent
    return p if p.is_dir() else p.parent


def log_level_configured() -> bool:
    return bool(os.environ.get('CHISPA_LOG_LEVEL', '').strip())


def get_log_level() -> int:
    name = os.environ.get('CHISPA_LOG_LEVEL') or _DEFAULT_LOG_LEVEL
    name = name.strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_max_depth() -> int:
    raw = os.environ.get('CHISPA_MAX_DEPTH')
    if not raw:
        return _DEFAULT_MAX_DEPTH
    try:
        depth = int(raw)
    except ValueError:
        return _DEFAULT_MAX_DEPTH
    return depth if depth > 0 else _DEFAULT_MAX_DEPTH
