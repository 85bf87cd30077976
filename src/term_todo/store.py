"""Todo items and the JSON file that holds them."""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

import structlog

from .config import Settings, get_settings
from .errors import StoreLoadError, StoreWriteError
from .gitignore import ensure_ignored
from .utils import PathLike, write_text

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Item:
    text: str
    done: bool = False

    def to_dict(self) -> dict:
        return {"todo": self.text, "done": self.done}

    @classmethod
    def from_dict(cls, data: object) -> "Item":
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        text = data.get("todo")
        done = data.get("done")
        if not isinstance(text, str):
            raise ValueError("'todo' must be a string")
        if not isinstance(done, bool):
            raise ValueError("'done' must be a boolean")
        return cls(text=text, done=done)


def load(path: PathLike) -> List[Item]:
    """Read the todo file at ``path``.

    A missing file is an empty list. Anything else that cannot be read or
    parsed raises :class:`StoreLoadError`.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    except (OSError, UnicodeDecodeError) as exc:
        raise StoreLoadError(path, f"cannot read file: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise StoreLoadError(path, f"malformed JSON: {exc}") from exc
    if not isinstance(data, list):
        raise StoreLoadError(path, "expected a JSON array of todos")

    items = []
    for pos, entry in enumerate(data, 1):
        try:
            items.append(Item.from_dict(entry))
        except ValueError as exc:
            raise StoreLoadError(path, f"todo #{pos}: {exc}") from exc
    logger.debug("todos_loaded", path=str(path), count=len(items))
    return items


def dumps(items: Iterable[Item]) -> str:
    return json.dumps([item.to_dict() for item in items], indent=2, ensure_ascii=False)


def save(items: Iterable[Item], path: PathLike, atomic: bool = False) -> None:
    """Overwrite ``path`` with the pretty-printed list."""
    path = Path(path)
    items = list(items)
    try:
        write_text(path, dumps(items), atomic=atomic)
    except OSError as exc:
        raise StoreWriteError(path, f"cannot write file: {exc}") from exc
    logger.debug("todos_saved", path=str(path), count=len(items))


class TodoStore:
    """Ordered todo items, saved to disk after every change.

    Items are addressed by position. Mutations on an index outside the list
    do nothing and return ``False``.
    """

    def __init__(
        self,
        path: PathLike,
        items: Optional[Iterable[Item]] = None,
        *,
        atomic_writes: bool = False,
        update_gitignore: bool = True,
        gitignore_root: Optional[Path] = None,
    ) -> None:
        self.path = Path(path)
        self.atomic_writes = atomic_writes
        self.update_gitignore = update_gitignore
        self.gitignore_root = gitignore_root
        self._items: List[Item] = list(items or [])
        self._gitignore_checked = False

    @classmethod
    def open(cls, path: PathLike, settings: Optional[Settings] = None) -> "TodoStore":
        settings = settings or get_settings()
        return cls(
            path,
            load(path),
            atomic_writes=settings.atomic_writes,
            update_gitignore=settings.update_gitignore,
        )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> Item:
        return self._items[index]

    @property
    def items(self) -> List[Item]:
        return list(self._items)

    def add(self, text: str) -> None:
        self._items.append(Item(text))
        logger.debug("todo_added", index=len(self._items) - 1)
        self._save()

    def update(self, index: int, text: str) -> bool:
        """Replace the text of item ``index``; empty ``text`` deletes it."""
        if not self._valid(index):
            return False
        if not text:
            return self.delete(index)
        self._items[index] = replace(self._items[index], text=text)
        logger.debug("todo_updated", index=index)
        self._save()
        return True

    def toggle_done(self, index: int) -> bool:
        if not self._valid(index):
            return False
        item = self._items[index]
        self._items[index] = replace(item, done=not item.done)
        logger.debug("todo_toggled", index=index, done=not item.done)
        self._save()
        return True

    def duplicate(self, index: int) -> bool:
        if not self._valid(index):
            return False
        self._items.append(self._items[index])
        logger.debug("todo_duplicated", index=index)
        self._save()
        return True

    def delete(self, index: int) -> bool:
        if not self._valid(index):
            return False
        del self._items[index]
        logger.debug("todo_deleted", index=index)
        self._save()
        return True

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def _save(self) -> None:
        save(self._items, self.path, atomic=self.atomic_writes)
        if self.update_gitignore and not self._gitignore_checked:
            self._gitignore_checked = True
            entry = self._gitignore_entry()
            if entry is not None:
                ensure_ignored(entry, self.gitignore_root)

    def _gitignore_entry(self) -> Optional[str]:
        if not self.path.is_absolute():
            return self.path.as_posix()
        root = self.gitignore_root or Path.cwd()
        try:
            return self.path.relative_to(root).as_posix()
        except ValueError:
            # outside the working tree
            return None
