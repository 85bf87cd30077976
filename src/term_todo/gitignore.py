"""Keep the todo file out of git."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import structlog

from .utils import append_line

logger = structlog.get_logger(__name__)

GITIGNORE = ".gitignore"


def is_listed(filename: str, content: str) -> bool:
    for line in content.splitlines():
        entry = line.strip()
        if entry == filename or entry == "/" + filename:
            return True
    return False


def ensure_ignored(filename: str, root: Optional[Path] = None) -> bool:
    """Append ``filename`` to ``root/.gitignore`` unless it is already there.

    Nothing happens when there is no ``.gitignore``. Failures are logged and
    swallowed; returns ``True`` only when a line was written.
    """
    path = (root or Path.cwd()) / GITIGNORE
    if not path.exists():
        return False

    try:
        if is_listed(filename, path.read_text(encoding="utf-8")):
            return False
        append_line(path, filename)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("gitignore_update_failed", path=str(path), error=str(exc))
        return False

    logger.info("gitignore_entry_added", path=str(path), entry=filename)
    return True
