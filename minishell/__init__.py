"""A small shell core: command lookup, redirections and execution, with string, buffer, line and list helpers."""

__version__ = "0.1.0"