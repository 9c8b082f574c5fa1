from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_include_roots() -> List[Path]:
    """Extra directories searched by `include` after the including file's own."""
    return paths_from_env('TATU_PATH', [])


def get_log_level() -> str:
    return os.environ.get('TATU_LOG_LEVEL', '').strip().upper() or _DEFAULT_LOG_LEVEL


def use_color() -> bool:
    # https://no-color.org: any non-empty value disables colour
    return not os.environ.get('NO_COLOR')
