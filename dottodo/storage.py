"""Reading and writing the configuration file and task files."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Iterable

from .models import Config, Todo, default_config

CONFIG_DIR = ".todo"
CONFIG_FILE = "config.json"

_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _dumps(data: Any) -> str:
    text = json.dumps(data, indent=2, ensure_ascii=False)
    for char, escape in _ESCAPES.items():
        text = text.replace(char, escape)
    return text


def get_config_path() -> Path:
    """Return the path of the user's configuration file."""
    return Path.home() / CONFIG_DIR / CONFIG_FILE


def load_config() -> Config:
    """Load the configuration, or the default one if no file exists."""
    path = get_config_path()
    if not path.exists():
        return default_config()
    data = json.loads(path.read_text(encoding="utf-8"))
    return Config.from_dict(data)


def save_config(config: Config) -> None:
    """Write the configuration, creating its directory if needed."""
    path = get_config_path()
    path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
    path.write_text(_dumps(config.to_dict()), encoding="utf-8")


def find_todo_file(start: str | os.PathLike[str] | None = None) -> Path | None:
    """Search from start (default: cwd) upwards for the task file."""
    config = load_config()
    directory = Path(start).absolute() if start is not None else Path.cwd()
    while True:
        candidate = directory / config.todo_file_name
        if candidate.exists():
            return candidate
        parent = directory.parent
        if parent == directory:
            return None
        directory = parent


def load_todos(todo_path: str | os.PathLike[str]) -> list[Todo]:
    """Read tasks from a file; a missing file holds no tasks."""
    try:
        text = Path(todo_path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    data = json.loads(text)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError("task file must hold a JSON array")
    return [Todo.from_dict(item) for item in data]


def save_todos(todo_path: str | os.PathLike[str], todos: Iterable[Todo]) -> None:
    """Write tasks to a file as indented JSON."""
    Path(todo_path).write_text(
        _dumps([todo.to_dict() for todo in todos]), encoding="utf-8"
    )