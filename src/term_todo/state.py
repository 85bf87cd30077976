"""Screen state machine.

Handlers take the current :class:`ScreenState`, a key event and the store,
and return the next state. Store mutations happen inside the handlers.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .keys import Command, Key, KeyEvent, command_for
from .store import TodoStore

QUIT_CURSOR = -1


class Mode(Enum):
    LIST = "list"
    ADD = "add"
    EDIT = "edit"


@dataclass(frozen=True)
class ScreenState:
    mode: Mode = Mode.LIST
    cursor: int = 0
    edit_index: Optional[int] = None
    buffer: str = ""

    @property
    def quitting(self) -> bool:
        return self.cursor == QUIT_CURSOR


def clamp_cursor(cursor: int, length: int) -> int:
    return min(max(cursor, 0), max(0, length - 1))


def handle_key(state: ScreenState, event: KeyEvent, store: TodoStore) -> ScreenState:
    if state.mode is Mode.LIST:
        return handle_list_key(state, event, store)
    return handle_text_key(state, event, store)


def handle_list_key(state: ScreenState, event: KeyEvent, store: TodoStore) -> ScreenState:
    command = command_for(event)
    if command is None:
        return state
    if command is Command.QUIT:
        return replace(state, cursor=QUIT_CURSOR)
    if command is Command.ADD:
        return replace(state, mode=Mode.ADD, edit_index=None, buffer="")
    if command is Command.UP:
        return replace(state, cursor=clamp_cursor(state.cursor - 1, len(store)))

    # everything below needs a selected item
    if not len(store):
        return state

    cursor = state.cursor
    if command is Command.DOWN:
        cursor = clamp_cursor(cursor + 1, len(store))
    elif command is Command.EDIT:
        return replace(
            state, mode=Mode.EDIT, edit_index=cursor, buffer=store[cursor].text
        )
    elif command is Command.TOGGLE_DONE:
        store.toggle_done(cursor)
    elif command is Command.DELETE:
        store.delete(cursor)
        cursor = clamp_cursor(cursor, len(store))
    elif command is Command.DUPLICATE:
        store.duplicate(cursor)
    return replace(state, cursor=cursor)


def handle_text_key(state: ScreenState, event: KeyEvent, store: TodoStore) -> ScreenState:
    if event.key is Key.BACKSPACE:
        return replace(state, buffer=state.buffer[:-1])
    if event.key is Key.CHAR and event.char:
        return replace(state, buffer=state.buffer + event.char)
    if event.key is Key.ENTER:
        return commit_text(state, store)
    return state


def commit_text(state: ScreenState, store: TodoStore) -> ScreenState:
    """Apply the input buffer to the store and go back to the list.

    An empty buffer discards an add and deletes the item being edited.
    """
    cursor = state.cursor
    if state.mode is Mode.ADD:
        if state.buffer:
            store.add(state.buffer)
    elif state.mode is Mode.EDIT and state.edit_index is not None:
        store.update(state.edit_index, state.buffer)
        cursor = clamp_cursor(cursor, len(store))
    return ScreenState(mode=Mode.LIST, cursor=cursor)
