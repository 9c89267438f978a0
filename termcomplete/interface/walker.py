#!/usr/bin/env python3
# termcomplete/interface/walker.py
from __future__ import annotations

"""
Specification tree traversal.

Given a tree and the tokens typed so far, `walk` returns the strings that are
valid at the target index:

    tree = {"anchor": {"idl": {"init": {}, "upgrade": {}}}}

    index 0, tokens []                 -> ["anchor"]
    index 1, tokens ["anchor"]         -> ["idl"]
    index 2, tokens ["anchor", "idl"]  -> ["init", "upgrade"]

`offset` is the token position matched against the current node. Every
recursive call advances it, and traversal stops once it passes the target.
"""

from typing import Sequence

from termcomplete.spec import OptionDescriptor, SpecNode, is_option


def _token_at(tokens: Sequence[str], position: int) -> str | None:
    return tokens[position] if 0 <= position < len(tokens) else None


def walk(
    node: SpecNode,
    tokens: Sequence[str],
    target_index: int,
    offset: int = 0,
) -> list[str]:
    """Collect candidates for `tokens[target_index]` starting at `node`."""
    if offset > target_index:
        return []

    candidates: list[str] = []
    token = _token_at(tokens, offset)

    # Argument values
    for slot, source in node.positional_slots:
        # An option typed here takes precedence over positional values
        if token and is_option(token):
            continue

        if slot == target_index - offset:
            partial = _token_at(tokens, target_index)
            candidates.extend(
                arg for arg in source.resolve() if not partial or arg.startswith(partial))
        else:
            # Options are also valid after the arguments. This assumes every
            # argument was already supplied, so options typed between
            # arguments are not completed.
            candidates.extend(walk(
                node.options_only(), tokens, target_index, offset + node.argument_count))

    # Subcommands and options
    for name, entry in node.named_entries.items():
        if token and not name.startswith(token):
            continue

        if offset == target_index and name not in tokens[:offset]:
            candidates.append(name)

        if name != token:
            continue

        if isinstance(entry, OptionDescriptor):
            # Hide the long/short alias of an option that is already used
            next_node = node.without(entry.other) if entry.other else node
            step = 2 if entry.take_value else 1
            candidates.extend(walk(next_node, tokens, target_index, offset + step))
        else:
            candidates.extend(walk(entry, tokens, target_index, offset + 1))

    return candidates
