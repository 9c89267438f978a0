#!/usr/bin/env python3
# termcomplete/commands/command_types.py
from __future__ import annotations

"""
Command data structures and protocols.

This module defines:
- CommandCallback: the callable protocol for any command implementation.
- Command: a registered command with metadata, a callable and its
  completion specification.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol

from termcomplete.spec import SpecNode, as_spec_node


class CommandCallback(Protocol):
    """Protocol for any command function: receives the argument tokens."""

    def __call__(self, args: list[str]) -> Any:  # pragma: no cover - signature only
        ...


@dataclass(slots=True)
class Command:
    """
    A registered command with metadata and a callable to execute.

    Important fields:
        name: Primary unique command name.
        description: Short, user-facing description.
        callback: Function implementing the command.
        example: One-line example usage string (optional).
        module: Python module path where the command is defined.
        category: Logical group for help menu organization.
        aliases: Extra names resolving to the same command.
        completion: Specification tree for the tokens after the command name.
    """

    name: str
    description: str
    callback: CommandCallback
    example: str = ""
    module: str = field(default="", repr=False)
    category: str = "general"
    aliases: list[str] = field(default_factory=list)
    completion: SpecNode | Mapping[Any, Any] | None = None

    def __post_init__(self) -> None:
        if self.completion is not None:
            self.completion = as_spec_node(self.completion)

    @property
    def completion_node(self) -> SpecNode:
        """The completion tree, or an empty node for commands without one."""
        return self.completion if isinstance(self.completion, SpecNode) else SpecNode()

    def invoke(self, args: list[str]) -> Any:
        """Execute the underlying command callback with the argument tokens."""
        return self.callback(args)
