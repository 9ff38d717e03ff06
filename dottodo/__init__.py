"""A todo list manager that keeps tasks in a .todo JSON file, with a command line."""

__version__ = "0.1.0"