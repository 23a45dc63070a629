"""Parsing, checking and view state for .fdf height maps, with text and buffer helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "linereader",
    "linkedlist",
    "memory",
    "model",
    "output",
    "parsing",
    "printf",
    "strings",
]