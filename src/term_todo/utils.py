"""File helpers."""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def write_text(path: PathLike, data: str, atomic: bool = False) -> None:
    """Overwrite ``path`` with ``data`` as UTF-8.

    With ``atomic`` the data goes to a temporary file in the same directory
    which then replaces ``path``.
    """
    if not atomic:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(data)
        return

    dir_path = os.path.dirname(path) or "."
    tf = tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", delete=False, dir=dir_path, suffix=".tmp"
    )
    try:
        with tf:
            tf.write(data)
        os.replace(tf.name, path)
    except BaseException:
        os.unlink(tf.name)
        raise


def append_line(path: PathLike, line: str) -> None:
    """Append ``line`` to ``path``, starting a new line if the file lacks one."""
    with open(path, "rb") as fh:
        fh.seek(0, os.SEEK_END)
        needs_newline = False
        if fh.tell() > 0:
            fh.seek(-1, os.SEEK_END)
            needs_newline = fh.read(1) != b"\n"
    with open(path, "a", encoding="utf-8") as fh:
        if needs_newline:
            fh.write("\n")
        fh.write(line + "\n")
