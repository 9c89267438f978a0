#!/usr/bin/env python3
# termcomplete/spec/__init__.py
from __future__ import annotations

"""
Declarative completion specification trees.

Provides:
- `SpecNode`: one level of a tree (positional slots + named entries).
- `OptionDescriptor`: option flag metadata (value-taking, alias).
- `LiteralArgs` / `LazyArgs`: positional argument sources.
- `is_option`: the option-like token classifier.
"""

from .types import (
    ArgumentSource,
    LazyArgs,
    LiteralArgs,
    NamedEntry,
    OptionDescriptor,
    SpecNode,
    as_spec_node,
    is_option,
    is_slot_key,
)

__all__ = [
    "ArgumentSource",
    "LazyArgs",
    "LiteralArgs",
    "NamedEntry",
    "OptionDescriptor",
    "SpecNode",
    "as_spec_node",
    "is_option",
    "is_slot_key",
]
