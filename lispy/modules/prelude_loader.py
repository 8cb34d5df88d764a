from __future__ import annotations
from pathlib import Path
from typing import Optional, Protocol

from lispy.config import get_prelude_root


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


PRELUDE_FILE = 'std.lspy'


def resolve_prelude() -> Optional[Path]:
    candidate = get_prelude_root() / PRELUDE_FILE
    return candidate if candidate.is_file() else None


def load_prelude(itp: _HasEvalPrelude) -> None:
    p = resolve_prelude()
    if p is None:
        raise FileNotFoundError(f"Cannot find {PRELUDE_FILE} in LISPY_PRELUDE_PATH")
    itp.eval_prelude(p.read_text(encoding='utf-8'))
