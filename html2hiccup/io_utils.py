"""Utility helpers for text and JSON IO and logging."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def stable_json_dumps(obj: object) -> str:
    """Serialize JSON in a stable, human-readable way with a trailing newline."""
    return json.dumps(obj, ensure_ascii=False, indent=2) + "\n"


def read_text(path: PathLike | None) -> str:
    """Read UTF-8 text from ``path``, or from stdin when ``path`` is None."""
    if path is None:
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def write_text(path: PathLike | None, content: str) -> None:
    """Write to ``path`` creating parent directories, or to stdout when None."""
    if path is None:
        sys.stdout.write(content)
        return
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
