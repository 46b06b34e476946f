"""Run two commands joined by a pipe between files, with small string and buffer helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "linereader",
    "linkedlist",
    "memory",
    "output",
    "path",
    "pipeline",
    "strutil",
    "textops",
]