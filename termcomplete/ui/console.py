#!/usr/bin/env python3
# termcomplete/ui/console.py
from __future__ import annotations

import shutil
import sys
import threading

# Single shared print mutex for all UI output (prompts, logging).
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file=None, flush: bool = False) -> None:
    """Thread-safe single-line print."""
    stream = file if file is not None else sys.stdout
    with PRINT_MUTEX:
        stream.write(f"{text}\n")
        if flush:
            stream.flush()


def get_terminal_columns(default: int = 80) -> int:
    """Return current terminal column width with a sensible default."""
    try:
        return shutil.get_terminal_size((default, 20)).columns
    except Exception:
        return default


def format_columns(words: list[str], *, width: int | None = None) -> str:
    """Lay out completion candidates in columns, readline style."""
    if not words:
        return ""
    width = width or get_terminal_columns()
    cell = max(len(w) for w in words) + 2
    per_row = max(1, width // cell)
    rows = []
    for start in range(0, len(words), per_row):
        row = words[start:start + per_row]
        rows.append("".join(w.ljust(cell) for w in row).rstrip())
    return "\n".join(rows)
