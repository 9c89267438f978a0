#!/usr/bin/env python3
# termcomplete/commands/commands.py
from __future__ import annotations

"""
Command registry and decorator utilities.

This module provides:
- CommandRegistry: in-memory registry of commands and aliases.
- command: decorator to register functions as commands with metadata.
- register_command: explicit API to register pre-built Command objects.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from termcomplete.commands.command_types import Command
from termcomplete.spec import SpecNode

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Holds all command definitions and provides lookup utilities."""

    def __init__(self) -> None:
        # Primary name -> Command
        self._commands_by_name: Dict[str, Command] = {}
        # Alias name -> primary name
        self._alias_to_primary: Dict[str, str] = {}
        # Category -> description text
        self._category_descriptions: Dict[str, str] = {}

    # ---------------- Registration ----------------

    def register(self, command_obj: Command) -> None:
        """Register a command and its aliases, ensuring no collisions."""
        primary_key = command_obj.name.lower()

        if primary_key in self._commands_by_name or primary_key in self._alias_to_primary:
            raise ValueError(
                f"Command '{command_obj.name}' already registered.")

        alias_keys = [alias.lower() for alias in command_obj.aliases]
        for alias_key in alias_keys:
            if (alias_key == primary_key or alias_key in self._commands_by_name
                    or alias_key in self._alias_to_primary):
                raise ValueError(
                    f"Alias '{alias_key}' for '{command_obj.name}' collides with an existing name."
                )

        self._commands_by_name[primary_key] = command_obj
        for alias_key in alias_keys:
            self._alias_to_primary[alias_key] = primary_key
        logger.debug("Registered command %s (aliases: %s)",
                     primary_key, ", ".join(alias_keys) or "-")

    def clear(self) -> None:
        """Forget every registered command."""
        self._commands_by_name.clear()
        self._alias_to_primary.clear()
        self._category_descriptions.clear()

    # ---------------- Lookup ----------------

    def get(self, name: str) -> Optional[Command]:
        """Return the command by primary name or alias, or None if not found."""
        key = name.lower()
        if key in self._commands_by_name:
            return self._commands_by_name[key]
        if key in self._alias_to_primary:
            return self._commands_by_name[self._alias_to_primary[key]]
        return None

    def all(self) -> list[Command]:
        """Return only primary commands (avoid duplicates in UIs)."""
        return list(self._commands_by_name.values())

    def names(self) -> list[str]:
        """Return a list of all primary names and aliases for completion."""
        return [*self._commands_by_name.keys(), *self._alias_to_primary.keys()]

    def categories(self) -> dict[str, list[Command]]:
        """Group commands by category for help output."""
        grouped: dict[str, list[Command]] = {}
        for cmd in self._commands_by_name.values():
            grouped.setdefault(cmd.category, []).append(cmd)
        return grouped

    def set_category_description(self, category: str, description: str) -> None:
        """Set display text for a category in help menus."""
        self._category_descriptions[category] = description.strip()

    def get_category_description(self, category: str) -> str:
        """Return display text for a category, or an empty string."""
        return self._category_descriptions.get(category, "")

    # ---------------- Completion ----------------

    def completion_spec(self) -> SpecNode:
        """
        Build the root completion tree: every name and alias maps to the
        command's own completion tree.
        """
        entries: dict[str, SpecNode] = {}
        for name in self.names():
            command_obj = self.get(name)
            if command_obj is not None:
                entries[name] = command_obj.completion_node
        return SpecNode(named_entries=entries)


# Global registry used across the app
REGISTRY = CommandRegistry()


def command(
    *,
    name: str | None = None,
    description: str | None = None,
    example: str | None = None,
    category: str | None = None,
    aliases: list[str] | None = None,
    completion: SpecNode | Mapping[Any, Any] | None = None,
    registry: CommandRegistry | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Decorator to register a function as a command with metadata.

    - Function name is transformed from snake_case to kebab-case for `name` if not provided.
    - `completion` is the specification tree for the tokens after the name.
    """

    def wrapper(func: Callable[..., Any]) -> Callable[..., Any]:
        command_obj = Command(
            name=name or func.__name__.replace("_", "-"),
            description=(description or (func.__doc__ or "")).strip(),
            callback=func,
            example=example or "",
            category=category or "general",
            aliases=aliases or [],
            completion=completion,
        )
        command_obj.module = func.__module__
        (registry or REGISTRY).register(command_obj)
        return func

    return wrapper


def register_command(command_obj: Command) -> None:
    """Explicit API for modules that construct Command objects directly."""
    REGISTRY.register(command_obj)
