from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (plotscript package directory)
_PLOTSCRIPT_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_STARTUP_FILES = [_PLOTSCRIPT_DIR / 'startup.pls']
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_startup_files() -> List[Path]:
    return paths_from_env('PLOTSCRIPT_STARTUP_PATH', _DEFAULT_STARTUP_FILES)


def get_log_level() -> int:
    name = os.environ.get('PLOTSCRIPT_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # unknown names come back as the string "Level <name>"
    return level if isinstance(level, int) else logging.WARNING
