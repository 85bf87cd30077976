import pytest
import structlog

from term_todo.config import get_settings


class FakeScreen:
    """Stand-in for a curses window that replays a list of keys."""

    def __init__(self, keys=(), height=24, width=80):
        self.keys = list(keys)
        self.height = height
        self.width = width
        self.rows = {}
        self.cursor = None
        self.frames = []

    def keypad(self, flag):
        pass

    def getmaxyx(self):
        return self.height, self.width

    def erase(self):
        self.rows = {}

    def addnstr(self, y, x, text, n):
        self.rows[y] = text[:n]

    def move(self, y, x):
        self.cursor = (y, x)

    def refresh(self):
        self.frames.append([self.rows[y] for y in sorted(self.rows)])

    def get_wch(self):
        if not self.keys:
            raise AssertionError("screen ran out of keys")
        return self.keys.pop(0)


@pytest.fixture
def make_screen():
    return FakeScreen


@pytest.fixture(autouse=True)
def _reset_globals():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
