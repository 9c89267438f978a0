#!/usr/bin/env python3
# termcomplete/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .ansi import ANSI, strip_ansi, enable_windows_vt, clear_screen, colorize
from .console import PRINT_MUTEX, print_line, get_terminal_columns, format_columns
from .logging import init_logger, ColorizingStreamHandler, PlainFormatter

__all__ = [
    "ANSI",
    "strip_ansi",
    "enable_windows_vt",
    "clear_screen",
    "colorize",
    "PRINT_MUTEX",
    "print_line",
    "get_terminal_columns",
    "format_columns",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
]
