import json
from datetime import datetime, timezone

import pytest

from dottodo.models import Config, Todo
from dottodo.storage import (
    find_todo_file,
    get_config_path,
    load_config,
    load_todos,
    save_config,
    save_todos,
)

MARKER = "marker-file-for-tests.todo"


@pytest.fixture
def home(tmp_path, monkeypatch):
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    return home_dir


def _todos():
    stamp = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    return [
        Todo(id=1, title="first", created_at=stamp, updated_at=stamp),
        Todo(id=2, title="second", description="details <b> & more", completed=True,
             archived=True, created_at=stamp, updated_at=stamp),
    ]


def test_config_path_under_home(home):
    assert get_config_path() == home / ".todo" / "config.json"


def test_load_config_default_when_missing(home):
    assert load_config().todo_file_name == ".todo"


def test_save_and_load_config(home):
    save_config(Config(todo_file_name="tasks.json"))
    assert get_config_path().is_file()
    assert load_config() == Config(todo_file_name="tasks.json")


def test_load_config_invalid_json(home):
    path = get_config_path()
    path.parent.mkdir(parents=True)
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config()


def test_find_todo_file_in_parent(home, tmp_path):
    save_config(Config(todo_file_name=MARKER))
    project = tmp_path / "project"
    nested = project / "a" / "b"
    nested.mkdir(parents=True)
    (project / MARKER).write_text("[]", encoding="utf-8")
    assert find_todo_file(nested) == project / MARKER


def test_find_todo_file_uses_cwd(home, tmp_path, monkeypatch):
    save_config(Config(todo_file_name=MARKER))
    project = tmp_path / "work"
    project.mkdir()
    (project / MARKER).write_text("[]", encoding="utf-8")
    monkeypatch.chdir(project)
    assert find_todo_file().resolve() == (project / MARKER).resolve()


def test_find_todo_file_not_found(home, tmp_path):
    save_config(Config(todo_file_name=MARKER))
    empty = tmp_path / "empty"
    empty.mkdir()
    assert find_todo_file(empty) is None


def test_load_todos_missing_file(tmp_path):
    assert load_todos(tmp_path / "absent") == []


def test_save_empty_list(tmp_path):
    path = tmp_path / ".todo"
    save_todos(path, [])
    assert path.read_text(encoding="utf-8") == "[]"
    assert load_todos(path) == []


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / ".todo"
    todos = _todos()
    save_todos(path, todos)
    assert load_todos(path) == todos


def test_saved_file_omits_empty_description(tmp_path):
    path = tmp_path / ".todo"
    save_todos(path, _todos())
    raw = json.loads(path.read_text(encoding="utf-8"))
    assert "description" not in raw[0]
    assert raw[1]["description"] == "details <b> & more"
    assert "<" not in path.read_text(encoding="utf-8")


def test_load_null_is_empty(tmp_path):
    path = tmp_path / ".todo"
    path.write_text("null", encoding="utf-8")
    assert load_todos(path) == []


@pytest.mark.parametrize("content", ["{", '{"id": 1}', '[{"id": "x"}]'])
def test_load_invalid_content(tmp_path, content):
    path = tmp_path / ".todo"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_todos(path)