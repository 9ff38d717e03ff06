# dottodo

A small command-line todo list. Tasks are kept in a JSON file, named `.todo`
by default, in a project directory. Any command run in that directory or in
one of its subdirectories searches upwards for the file and works on it.

## Installation

```
pip install .
```

This installs the `todo` command. Running `todo` with no subcommand prints
the help text.

## Usage

Start a list in the current directory. This fails if the file already exists:

```
todo init
```

Add a task. The description is optional. A new task gets the number of
existing tasks plus one as its ID:

```
todo add "Write report" "Quarterly numbers for the team"
todo a "Buy milk"
```

Show the tasks. Archived tasks are hidden unless you pass `all`:

```
todo list
todo l all
```

Mark a task done, or undo that, by its ID:

```
todo complete 1
```

Run it without an ID to choose from the tasks that are not archived. The
tasks are shown numbered; type the numbers of the ones to toggle, separated
by spaces or commas, or press Enter to choose none:

```
todo c
```

Archive works the same way. With an ID it toggles that task, with `all` it
archives every task, and without an argument it lets you choose from all
tasks:

```
todo archive 2
todo archive all
todo ar
```

After `add`, `complete` and `archive` change the list, the tasks that are not
archived are printed. Completed tasks are marked with `✓` and archived ones
with `🗄`; each task shows its ID, title, description if any, and creation
time.

If something goes wrong, for example no todo file is found or an ID does not
exist, the message is printed to standard error and the command exits with
status 1.

## Configuration

The name of the todo file can be set in `~/.todo/config.json`:

```json
{
  "todo_file_name": ".todo"
}
```

If that file does not exist, `.todo` is used.

## Library use

- `dottodo.models` defines the `Todo` and `Config` dataclasses, each with
  `to_dict` and `from_dict`, plus `default_config`, `format_time` and
  `parse_time` for RFC 3339 timestamps.
- `dottodo.storage` provides `load_todos`, `save_todos`, `load_config`,
  `save_config`, `get_config_path` and `find_todo_file`.
- `dottodo.cli` holds the commands as functions (`run_init`, `run_add`,
  `run_list`, `run_complete`, `run_archive`), `format_todos` and
  `print_todos`, `build_parser` and `main`. Failures raise `CommandError`.

## What it does not do

There are no commands to edit or delete a task or to change its ID. There
is no command to write the configuration file; create it by hand or call
`dottodo.storage.save_config`.