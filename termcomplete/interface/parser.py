#!/usr/bin/env python3
# termcomplete/interface/parser.py
from __future__ import annotations

"""
Tokenizing helpers for the input line.

Responsibilities:
- Split a raw line into shell-like tokens (POSIX rules).
- Report whether the line ends with whitespace that starts a fresh token.
- Locate the token being typed in the raw line and escape candidates replacing it.
"""

import logging
import re
import shlex

from termcomplete.spec import is_option

logger = logging.getLogger(__name__)

__all__ = [
    "tokenize",
    "has_trailing_whitespace",
    "token_start",
    "escape_token",
    "is_option",
]


def tokenize(command_line: str) -> list[str]:
    """
    Split a raw command line into tokens using POSIX rules.

    On malformed quotes (the user is still typing a quoted value) fall back to
    whitespace splitting.
    """
    try:
        return shlex.split(command_line, posix=True)
    except ValueError as exc:
        logger.debug("Falling back to whitespace split for %r: %s",
                     command_line, exc)
        return command_line.split()


def has_trailing_whitespace(command_line: str) -> bool:
    """Return True if the line ends in whitespace not escaped by a backslash."""
    if not command_line or not command_line[-1].isspace():
        return False
    body = command_line[:-1]
    backslashes = len(body) - len(body.rstrip("\\"))
    return backslashes % 2 == 0


def token_start(command_line: str) -> int:
    """
    Return the index in the raw line where the token being typed begins.

    Quotes and backslash escapes are honoured, so `cat my\\ fi` starts at `m`
    and `cat "my fi` starts at the opening quote. After trailing whitespace
    this is `len(command_line)`.
    """
    start: int | None = None
    quote = ""
    escaped = False

    for position, char in enumerate(command_line):
        if escaped:
            escaped = False
        elif quote == "'":
            if char == "'":
                quote = ""
        elif quote == '"':
            if char == "\\":
                escaped = True
            elif char == '"':
                quote = ""
        elif char.isspace():
            start = None
        else:
            if start is None:
                start = position
            if char == "\\":
                escaped = True
            elif char in "'\"":
                quote = char

    return len(command_line) if start is None else start


def escape_token(word: str, quote: str = "") -> str:
    """
    Render a candidate so that `tokenize` reads it back as one token.

    `quote` is the quote character the user opened the token with, if any;
    the candidate is then wrapped in the same quotes.
    """
    if quote == "'":
        return "'" + word.replace("'", "'\\''") + "'"
    if quote == '"':
        return '"' + re.sub(r'(["\\])', r"\\\1", word) + '"'
    return re.sub(r"""(\s|["'\\])""", r"\\\1", word)
