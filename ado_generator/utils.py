"""
Utility Functions
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Optional


def ensure_dir(path) -> str:
    """Ensure directory exists"""
    Path(path).mkdir(parents=True, exist_ok=True)
    return str(Path(path))


def read_json(path) -> Any:
    """Read JSON file"""
    with open(path, "r", encoding="utf8") as f:
        return json.load(f)


def read_text(path, default: Optional[str] = None) -> str:
    """Read a text file, returning `default` when it is missing (if given)"""
    if default is not None and not Path(path).exists():
        return default
    with open(path, "r", encoding="utf8") as f:
        return f.read()


def write_text(path, content: str) -> None:
    """Write a text file verbatim"""
    with open(path, "w", encoding="utf8", newline="") as f:
        f.write(content)


def write_json_atomic(path, obj: Any) -> None:
    """
    Write JSON to a temporary sibling and rename it over `path`.

    Readers see either the previous document or the new one, never a
    truncated file.
    """
    target = Path(path)
    if str(target.parent):
        ensure_dir(target.parent)
    fd, tmp_path = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf8") as f:
            json.dump(obj, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, target)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
