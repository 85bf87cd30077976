from structlog.testing import capture_logs

from term_todo.gitignore import ensure_ignored, is_listed


def test_appends_entry(tmp_path):
    gitignore = tmp_path / ".gitignore"
    gitignore.write_text("*.pyc\n")
    assert ensure_ignored(".todo.json", tmp_path) is True
    assert gitignore.read_text() == "*.pyc\n.todo.json\n"


def test_idempotent(tmp_path):
    gitignore = tmp_path / ".gitignore"
    gitignore.write_text("build/")
    ensure_ignored(".todo.json", tmp_path)
    assert ensure_ignored(".todo.json", tmp_path) is False
    assert gitignore.read_text().splitlines() == ["build/", ".todo.json"]


def test_no_gitignore_is_noop(tmp_path):
    assert ensure_ignored(".todo.json", tmp_path) is False
    assert not (tmp_path / ".gitignore").exists()


def test_is_listed_matches_whole_lines():
    assert is_listed("todo.json", "a\n/todo.json\n")
    assert is_listed("todo.json", "  todo.json  \n")
    assert not is_listed("todo.json", "old-todo.json.bak\n")


def test_write_failure_is_logged(tmp_path):
    (tmp_path / ".gitignore").mkdir()
    with capture_logs() as logs:
        assert ensure_ignored(".todo.json", tmp_path) is False
    assert logs[0]["event"] == "gitignore_update_failed"
    assert logs[0]["log_level"] == "warning"
