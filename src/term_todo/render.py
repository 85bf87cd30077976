"""Screen rendering."""

from __future__ import annotations

import curses
from typing import List, Sequence

from wcwidth import wcwidth

from .state import Mode, ScreenState
from .store import Item

RULE = "-" * 67
BANNER = (RULE, "TODO LIST".center(67, "-"), RULE)
HELP = "a: Add, e: Edit, d: Delete, c: Copy, x: Done/Undone, j: DOWN, k: UP, q: Quit"
EMPTY_NOTICE = "--- **NOTHING TODO** ---"
PROMPT = "Enter Todo: "


def format_item(index: int, item: Item, selected: bool) -> str:
    marker = "* " if selected else "  "
    done = "[x] " if item.done else "[ ] "
    return f"{marker}#{index + 1} {done}{item.text}"


def header_lines() -> List[str]:
    return [*BANNER, HELP, ""]


def render_lines(state: ScreenState, items: Sequence[Item]) -> List[str]:
    lines = header_lines()
    if state.mode is Mode.LIST:
        if not items:
            lines.append(EMPTY_NOTICE)
        lines.extend(
            format_item(i, item, i == state.cursor) for i, item in enumerate(items)
        )
    else:
        lines.append(PROMPT + state.buffer)
    return lines


def visible_lines(state: ScreenState, items: Sequence[Item], height: int) -> List[str]:
    """Like :func:`render_lines`, scrolled so the selected item fits in ``height``."""
    lines = render_lines(state, items)
    header = len(header_lines())
    rows = height - header
    if state.mode is not Mode.LIST or rows <= 0 or len(lines) <= height:
        return lines[:max(height, 0)]
    offset = max(0, state.cursor - rows + 1)
    return lines[:header] + lines[header + offset:header + offset + rows]


def display_width(text: str) -> int:
    """Terminal cells taken by ``text``."""
    return sum(max(wcwidth(ch), 0) for ch in text)


def clip_to_width(text: str, width: int) -> str:
    """Longest prefix of ``text`` that fits in ``width`` cells."""
    used = 0
    for i, ch in enumerate(text):
        used += max(wcwidth(ch), 0)
        if used > width:
            return text[:i]
    return text


def tail_to_width(text: str, width: int) -> str:
    """Longest suffix of ``text`` that fits in ``width`` cells."""
    used = 0
    for i in range(len(text) - 1, -1, -1):
        used += max(wcwidth(text[i]), 0)
        if used > width:
            return text[i + 1:]
    return text


def set_cursor_visible(visible: bool) -> None:
    try:
        curses.curs_set(1 if visible else 0)
    except curses.error:
        # not supported by the terminal
        pass


def draw(screen, state: ScreenState, items: Sequence[Item]) -> None:
    """Redraw the whole screen for ``state``."""
    screen.erase()
    height, width = screen.getmaxyx()
    lines = visible_lines(state, items, height)
    cells = max(width - 1, 1)
    editing = state.mode is not Mode.LIST and bool(lines)
    if editing:
        # keep the end of the prompt, where typing happens, on screen
        lines[-1] = tail_to_width(lines[-1], cells)
    for y, line in enumerate(lines):
        _put(screen, y, clip_to_width(line, cells), width)

    if editing:
        set_cursor_visible(True)
        screen.move(len(lines) - 1, min(display_width(lines[-1]), max(width - 1, 0)))
    else:
        set_cursor_visible(False)
    screen.refresh()


def _put(screen, y: int, text: str, width: int) -> None:
    try:
        screen.addnstr(y, 0, text, max(width - 1, 1))
    except curses.error:
        # window too small
        pass
