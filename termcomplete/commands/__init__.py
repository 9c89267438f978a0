#!/usr/bin/env python3
# termcomplete/commands/__init__.py
from __future__ import annotations

"""
Package for command management and registration.

Provides:
- Data structures and protocols (`Command`, `CommandCallback`).
- In-memory registry and decorators (`REGISTRY`, `command`, `register_command`).

This package re-exports public APIs from:
- command_types.py
- commands.py
"""


from .command_types import Command, CommandCallback
from .commands import REGISTRY, CommandRegistry, command, register_command

__all__ = [
    "Command",
    "CommandCallback",
    "CommandRegistry",
    "REGISTRY",
    "command",
    "register_command",
]
