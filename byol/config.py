from __future__ import annotations
import os
from pathlib import Path
from typing import Optional


# Defaults
_DEFAULT_PROMPT = 'byol> '
_DEFAULT_LOG_LEVEL = 'WARNING'

# Numbers are signed 64-bit integers as far as the reader is concerned.
NUMBER_MIN = -(2 ** 63)
NUMBER_MAX = 2 ** 63 - 1


def get_prompt() -> str:
    return os.environ.get('BYOL_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    return os.environ.get('BYOL_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def get_prelude_path() -> Optional[Path]:
    raw = os.environ.get('BYOL_PRELUDE_PATH')
    if not raw or not raw.strip():
        return None
    return Path(raw.strip())
