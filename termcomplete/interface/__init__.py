#!/usr/bin/env python3
# termcomplete/interface/__init__.py
from __future__ import annotations

"""
Package for the interactive console interface.

Provides:
- Tokenizer helpers for the input line.
- The specification tree walker.
- The autocomplete handler registry and candidate aggregation.
- Command dispatcher and help formatting.
- Dynamic command loader for the plugins package.
- CLI frontends with history and completion (prompt_toolkit / readline / plain).
"""

# Parser utilities
from .parser import (
    tokenize,
    has_trailing_whitespace,
    token_start,
    escape_token,
    is_option,
)

# Completion (cli depends on it)
from .walker import walk
from .completion import (
    Autocomplete,
    CandidatesHandler,
    Handler,
    Override,
    SpecHandler,
    to_handler,
)

# Command dispatcher / help
from .handler import (
    BUILT_IN_COMMANDS,
    HELP_TEXT,
    builtin_spec,
    format_command_help,
    handle_line,
    list_categories,
)

# Loader
from .loader import load_commands

# CLI frontends (after completion is available)
from .cli import BaseCLI, PromptToolkitCLI, ReadlineCLI, make_cli

__all__ = [
    # parser
    "tokenize",
    "has_trailing_whitespace",
    "token_start",
    "escape_token",
    "is_option",
    # completion
    "walk",
    "Autocomplete",
    "CandidatesHandler",
    "Handler",
    "Override",
    "SpecHandler",
    "to_handler",
    # handler
    "BUILT_IN_COMMANDS",
    "HELP_TEXT",
    "builtin_spec",
    "format_command_help",
    "handle_line",
    "list_categories",
    # loader
    "load_commands",
    # cli
    "BaseCLI",
    "PromptToolkitCLI",
    "ReadlineCLI",
    "make_cli",
]
