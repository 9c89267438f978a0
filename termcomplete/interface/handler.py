#!/usr/bin/env python3
# termcomplete/interface/handler.py
from __future__ import annotations

"""
Command dispatch and help formatting.

Built-in verbs:
  help [name]     - list categories, or describe a command/category
  complete <line> - print the completion candidates for <line>
  clear / cls     - clear the screen
  exit / quit     - leave the terminal
"""

import difflib
import logging
from typing import Optional

from termcomplete.commands import REGISTRY, CommandRegistry
from termcomplete.interface.completion import Autocomplete
from termcomplete.interface.parser import tokenize
from termcomplete.spec import LazyArgs, SpecNode
from termcomplete.ui import clear_screen, format_columns

logger = logging.getLogger(__name__)

# Short hint shown at startup and used in unknown command errors
HELP_TEXT = "Type 'help <command>' for more information on a specific command."

BUILT_IN_COMMANDS: tuple[str, ...] = (
    "help", "complete", "exit", "quit", "clear", "cls")


def builtin_spec(registry: CommandRegistry | None = None) -> SpecNode:
    """Completion tree for the built-in verbs."""
    registry = registry or REGISTRY

    def help_topics() -> list[str]:
        return [*registry.categories().keys(), *registry.names()]

    entries: dict[str, SpecNode] = {name: SpecNode() for name in BUILT_IN_COMMANDS}
    entries["help"] = SpecNode(positional_slots=((0, LazyArgs(help_topics)),))
    return SpecNode(named_entries=entries)


def _suggest_similar_names(name: str, registry: CommandRegistry) -> str:
    """Return a short suggestion string for misspelled commands."""
    universe = registry.names() + list(BUILT_IN_COMMANDS)
    matches = difflib.get_close_matches(name, universe, n=3, cutoff=0.6)
    return f" Did you mean: {', '.join(matches)}?" if matches else ""


def _format_rows(rows: list[list[str]], headers: list[str]) -> str:
    widths = [max(len(str(r[i])) for r in [headers, *rows]) for i in range(len(headers))]
    lines = ["  ".join(h.ljust(w) for h, w in zip(headers, widths)).rstrip(),
             "  ".join("-" * w for w in widths)]
    for row in rows:
        lines.append("  ".join(str(c).ljust(w) for c, w in zip(row, widths)).rstrip())
    return "\n".join(lines)


def list_categories(registry: CommandRegistry | None = None) -> str:
    """Render the categories overview."""
    registry = registry or REGISTRY
    categories = registry.categories()
    if not categories:
        return "No commands loaded."

    rows = []
    for category_name in sorted(categories):
        command_count = len(categories[category_name])
        rows.append(
            [category_name,
             f"{command_count} command{'s' if command_count != 1 else ''}",
             registry.get_category_description(category_name)]
        )
    return _format_rows(rows, headers=["Category", "Commands", "Description"])


def format_command_help(name: str, registry: CommandRegistry | None = None) -> str:
    """Render help for a command or a category if the name matches a category."""
    registry = registry or REGISTRY
    command_obj = registry.get(name)
    if not command_obj:
        commands_in_category = registry.categories().get(name)
        if not commands_in_category:
            return f"No such command or category: {name}"
        rows = [[c.name, ", ".join(c.aliases) or "-", c.description]
                for c in sorted(commands_in_category, key=lambda c: c.name)]
        return _format_rows(rows, headers=["Command", "Aliases", "Description"])

    alias_text = ", ".join(command_obj.aliases) or "(none)"
    lines = [
        f"Name:        {command_obj.name}",
        f"Aliases:     {alias_text}",
        f"Category:    {command_obj.category}",
        f"Description: {command_obj.description or '(none)'}",
        f"Example:     {command_obj.example or '(none)'}",
    ]
    return "\n".join(lines)


def handle_line(
    input_line: str,
    *,
    autocomplete: Autocomplete | None = None,
    registry: CommandRegistry | None = None,
) -> Optional[str]:
    """
    Parse and execute one input line.

    Returns None if nothing should be printed, else a printable string.
    Command failures are rendered as '[error] ...' rather than raised.
    """
    registry = registry or REGISTRY
    line = input_line.strip()
    if not line:
        return None

    verb, _, rest = input_line.lstrip().partition(" ")
    lowered = verb.lower()

    if lowered in {"exit", "quit"}:
        raise SystemExit()

    if lowered in {"clear", "cls"}:
        clear_screen()
        return None

    if lowered == "help":
        target = rest.strip()
        return format_command_help(target, registry) if target else list_categories(registry)

    if lowered == "complete":
        if autocomplete is None:
            return "[error] Completion is disabled."
        # keep trailing whitespace: it decides which token is completed
        return format_columns(autocomplete.get_candidates(rest)) or None

    tokens = tokenize(line)
    command_name, *arg_tokens = tokens
    command_obj = registry.get(command_name)
    if not command_obj:
        return f"Unknown command: {command_name}.{_suggest_similar_names(command_name, registry)} {HELP_TEXT}"

    try:
        result = command_obj.invoke(arg_tokens)
    except SystemExit:
        raise
    except Exception as exc:
        logger.debug("Command %s failed", command_obj.name, exc_info=True)
        return f"[error] {type(exc).__name__}: {exc}"
    return None if result is None else str(result)
