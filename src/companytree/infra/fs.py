from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Small helpers for persisting program output and log files.
"""

import os


def ensure_parent_dir(path: str) -> None:
    """Create the parent directory hierarchy of path if missing."""
    parent = os.path.dirname(os.path.abspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)


def write_text(path: str, content: str) -> str:
    """
    Write content to path as UTF-8, creating parent directories.

    Returns:
        str: Absolute path of the written file.
    """
    target = os.path.abspath(os.path.expanduser(path))
    ensure_parent_dir(target)
    with open(target, "w", encoding="utf-8") as f:
        f.write(content)
    return target
