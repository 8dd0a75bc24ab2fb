"""Utility library: ASCII characters, byte buffers, output, strings, a linked list, printf formatting and line reading."""

__version__ = "1.0.0"

__all__ = ["chars", "memory", "output", "strings", "linked_list", "printf", "line_reader"]