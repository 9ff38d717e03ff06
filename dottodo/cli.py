"""Command-line interface for managing a task file."""

from __future__ import annotations

import argparse
import re
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Sequence

from .models import Todo, format_time
from .storage import find_todo_file, load_config, load_todos, save_todos

Selector = Callable[[str, Sequence[tuple[str, Any]]], list[Any]]

_ID_RE = re.compile(r"[+-]?\d+")
_COMPLETED_MARK = "✓"
_ARCHIVED_MARK = "🗄"


class CommandError(Exception):
    """A command failed; the message is shown to the user."""


def _now() -> datetime:
    return datetime.now().astimezone()


def _open_todos() -> tuple[Path, list[Todo]]:
    try:
        todo_path = find_todo_file()
    except (OSError, ValueError) as exc:
        raise CommandError(f"failed to find todo file: {exc}") from exc
    if todo_path is None:
        raise CommandError("todo file not found. please run 'todo init' first")
    try:
        todos = load_todos(todo_path)
    except (OSError, ValueError) as exc:
        raise CommandError(f"failed to load todos: {exc}") from exc
    return todo_path, todos


def _save(todo_path: Path, todos: list[Todo], action: str = "save todos") -> None:
    try:
        save_todos(todo_path, todos)
    except (OSError, ValueError) as exc:
        raise CommandError(f"failed to {action}: {exc}") from exc


def _parse_id(text: str) -> int:
    if not _ID_RE.fullmatch(text):
        raise CommandError(f"invalid task ID: {text}")
    return int(text)


def _report(message: str, todos: list[Todo]) -> None:
    print(message)
    print()
    print_todos(todos, False)


def format_todos(todos: Sequence[Todo], show_archived: bool) -> str:
    """Render tasks as text; archived ones only when show_archived is set."""
    if not todos:
        return "No tasks found."
    lines = []
    for todo in todos:
        if todo.archived and not show_archived:
            continue
        done = _COMPLETED_MARK if todo.completed else " "
        archived = _ARCHIVED_MARK if todo.archived else " "
        lines.append(f"{done}{archived} [{todo.id}] {todo.title}")
        if todo.description:
            lines.append(f"    {todo.description}")
        lines.append(f"    Created: {format_time(todo.created_at)}")
    return "\n".join(lines)


def print_todos(todos: Sequence[Todo], show_archived: bool) -> None:
    """Print tasks to standard output."""
    text = format_todos(todos, show_archived)
    if text:
        print(text)


def choose_indices(title: str, options: Sequence[tuple[str, Any]]) -> list[Any]:
    """Ask the user to pick any number of options; return their values."""
    print(title)
    for number, (label, _) in enumerate(options, start=1):
        print(f"  {number}) {label}")
    while True:
        try:
            answer = input("Numbers separated by spaces (empty for none): ")
        except (EOFError, KeyboardInterrupt) as exc:
            raise CommandError(f"failed to run form: {exc or 'input aborted'}") from exc
        tokens = answer.replace(",", " ").split()
        chosen: list[int] = []
        try:
            for token in tokens:
                number = int(token)
                if not 1 <= number <= len(options):
                    raise ValueError(token)
                if number not in chosen:
                    chosen.append(number)
        except ValueError:
            print(f"Please enter numbers between 1 and {len(options)}.")
            continue
        return [options[number - 1][1] for number in chosen]


def run_init() -> Path:
    """Create an empty task file in the current directory."""
    try:
        config = load_config()
    except (OSError, ValueError) as exc:
        raise CommandError(f"failed to load config: {exc}") from exc
    todo_path = Path(config.todo_file_name)
    if todo_path.exists():
        raise CommandError(f"todo file already exists at {todo_path}")
    _save(todo_path, [], "create todo file")
    print(f"Initialized todo file at {todo_path}")
    return todo_path


def run_add(title: str, description: str | None = None) -> Todo:
    """Append a new task to the nearest task file."""
    todo_path, todos = _open_todos()
    now = _now()
    todo = Todo(
        id=len(todos) + 1,
        title=title,
        description=description or "",
        created_at=now,
        updated_at=now,
    )
    todos.append(todo)
    _save(todo_path, todos)
    _report(f"Added task: {todo.title}", todos)
    return todo


def run_list(show_all: bool = False) -> None:
    """Print the tasks of the nearest task file."""
    _, todos = _open_todos()
    print_todos(todos, show_all)


def _toggle_by_id(todo_path: Path, todos: list[Todo], text: str,
                  attribute: str, on: str, off: str) -> None:
    task_id = _parse_id(text)
    for todo in todos:
        if todo.id == task_id:
            value = not getattr(todo, attribute)
            setattr(todo, attribute, value)
            todo.updated_at = _now()
            _save(todo_path, todos)
            _report(f"Task {task_id} {on if value else off}", todos)
            return
    raise CommandError(f"task with ID {task_id} not found")


def run_complete(task_id: str | None = None, select: Selector = choose_indices) -> None:
    """Toggle completion of one task, or of tasks chosen interactively."""
    todo_path, todos = _open_todos()
    if not todos:
        print("No tasks found.")
        return
    if task_id is not None:
        _toggle_by_id(todo_path, todos, task_id, "completed", "completed", "uncompleted")
        return

    active = [index for index, todo in enumerate(todos) if not todo.archived]
    if not active:
        print("No active tasks found.")
        return
    options = [
        (
            f"[{todos[index].id}] "
            f"{_COMPLETED_MARK if todos[index].completed else ' '} {todos[index].title}",
            index,
        )
        for index in active
    ]
    for index in select("Select tasks to toggle completion", options):
        todos[index].completed = not todos[index].completed
        todos[index].updated_at = _now()
    _save(todo_path, todos)
    _report("Tasks updated successfully!", todos)


def run_archive(target: str | None = None, select: Selector = choose_indices) -> None:
    """Archive all tasks, toggle one by ID, or toggle tasks chosen interactively."""
    todo_path, todos = _open_todos()
    if not todos:
        print("No tasks found.")
        return
    if target is not None and target.lower() == "all":
        for todo in todos:
            if not todo.archived:
                todo.archived = True
                todo.updated_at = _now()
        _save(todo_path, todos)
        _report("All tasks archived!", todos)
        return
    if target is not None:
        _toggle_by_id(todo_path, todos, target, "archived", "archived", "unarchived")
        return

    options = [
        (f"[{todo.id}] {_ARCHIVED_MARK if todo.archived else ' '} {todo.title}", index)
        for index, todo in enumerate(todos)
    ]
    for index in select("Select tasks to toggle archive status", options):
        todos[index].archived = not todos[index].archived
        todos[index].updated_at = _now()
    _save(todo_path, todos)
    _report("Tasks updated successfully!", todos)


def _first(values: list[str]) -> str | None:
    return values[0] if values else None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="todo",
        description="A simple todo list manager that stores tasks in a .todo file.",
    )
    sub = parser.add_subparsers(dest="command")

    init = sub.add_parser("init", help="Initialize a new todo file in the current directory")
    init.set_defaults(handler=lambda args: run_init())

    add = sub.add_parser("add", aliases=["a"], help="Add a new task")
    add.add_argument("title")
    add.add_argument("description", nargs="?")
    add.set_defaults(handler=lambda args: run_add(args.title, args.description))

    list_ = sub.add_parser("list", aliases=["l"], help="List all tasks")
    list_.add_argument("args", nargs="*")
    list_.add_argument("-a", "--archived", action="store_true",
                       help="Show archived tasks")
    list_.set_defaults(handler=lambda args: run_list(
        bool(args.args) and args.args[0].lower() == "all"))

    complete = sub.add_parser("complete", aliases=["c"], help="Complete a task")
    complete.add_argument("args", nargs="*")
    complete.set_defaults(handler=lambda args: run_complete(_first(args.args)))

    archive = sub.add_parser("archive", aliases=["ar"], help="Archive a task")
    archive.add_argument("args", nargs="*")
    archive.set_defaults(handler=lambda args: run_archive(_first(args.args)))

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0
    try:
        args.handler(args)
    except CommandError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())