#!/usr/bin/env python3
# termcomplete/spec/types.py
from __future__ import annotations

"""
Completion specification data structures.

A specification tree describes what may be typed after a command:

- positional slots: the Nth argument value at this nesting level, backed by a
  literal list or a zero-argument producer;
- named entries: subcommands (nested nodes) and options (descriptors).

Trees are usually written as plain mappings and converted once with
`SpecNode.from_mapping`:

    {
        "anchor": {
            "idl": {"init": {}, "upgrade": {}},
        },
        "0": ["foo", "bar"],
        "--verbose": {"takeValue": False, "other": "-v"},
        "-v": {"takeValue": False, "other": "--verbose"},
    }
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Union


@dataclass(frozen=True, slots=True)
class OptionDescriptor:
    """
    An option flag.

    Attributes:
        take_value: True if the flag consumes the following token.
        other: Name of the long/short alias to hide once this flag is used.
    """
    take_value: bool = False
    other: str | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "OptionDescriptor":
        """Accept both `takeValue` and `take_value` spellings."""
        take_value = raw.get("takeValue", raw.get("take_value", False))
        other = raw.get("other")
        return cls(take_value=bool(take_value), other=other or None)


@dataclass(frozen=True, slots=True)
class LiteralArgs:
    """Fixed argument values for a positional slot."""
    values: tuple[str, ...] = ()

    def resolve(self) -> list[str]:
        return list(self.values)


@dataclass(frozen=True, slots=True)
class LazyArgs:
    """Argument values computed on every visit (e.g. file names)."""
    producer: Callable[[], Iterable[str]]

    def resolve(self) -> list[str]:
        return list(self.producer())


ArgumentSource = Union[LiteralArgs, LazyArgs]
NamedEntry = Union["SpecNode", OptionDescriptor]


def is_option(token: str | None) -> bool:
    """Return True if the token looks like an option flag (leading dash)."""
    return bool(token) and token.startswith("-")


def is_slot_key(key: Any) -> bool:
    """Return True for integer keys or strings made only of ASCII digits."""
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return key >= 0
    return isinstance(key, str) and key.isascii() and key.isdigit()


def _to_argument_source(value: Any) -> ArgumentSource:
    if isinstance(value, (LiteralArgs, LazyArgs)):
        return value
    if callable(value):
        return LazyArgs(value)
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise TypeError(
            f"Positional slot expects a list or a producer, got {type(value).__name__}")
    return LiteralArgs(tuple(value))


def _to_option(value: Any) -> OptionDescriptor:
    if isinstance(value, OptionDescriptor):
        return value
    if value is None:
        return OptionDescriptor()
    if isinstance(value, Mapping):
        return OptionDescriptor.from_mapping(value)
    raise TypeError(
        f"Option expects a descriptor mapping, got {type(value).__name__}")


def _to_subcommand(value: Any) -> "SpecNode":
    if isinstance(value, SpecNode):
        return value
    if value is None:
        return SpecNode()
    if isinstance(value, Mapping):
        return SpecNode.from_mapping(value)
    raise TypeError(
        f"Subcommand expects a nested mapping, got {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class SpecNode:
    """
    One level of a completion specification tree.

    Positional slots are kept sorted by slot index and are visited before
    named entries. Named entries keep their declaration order.
    """
    positional_slots: tuple[tuple[int, ArgumentSource], ...] = ()
    named_entries: Mapping[str, NamedEntry] = field(
        default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "positional_slots", tuple(
            sorted(self.positional_slots, key=lambda slot: slot[0])))
        if not isinstance(self.named_entries, MappingProxyType):
            object.__setattr__(self, "named_entries",
                               MappingProxyType(dict(self.named_entries)))

    @classmethod
    def from_mapping(cls, raw: Mapping[Any, Any]) -> "SpecNode":
        """Convert a declarative mapping into a node, recursively."""
        slots: list[tuple[int, ArgumentSource]] = []
        named: dict[str, NamedEntry] = {}
        for key, value in raw.items():
            if is_slot_key(key):
                slots.append((int(key), _to_argument_source(value)))
            elif not isinstance(key, str):
                raise TypeError(f"Unsupported specification key: {key!r}")
            elif is_option(key):
                named[key] = _to_option(value)
            else:
                named[key] = _to_subcommand(value)
        return cls(positional_slots=tuple(slots), named_entries=named)

    @property
    def argument_count(self) -> int:
        return len(self.positional_slots)

    def options_only(self) -> "SpecNode":
        """Return a node holding only the option entries of this node."""
        return SpecNode(named_entries={
            name: entry for name, entry in self.named_entries.items() if is_option(name)
        })

    def without(self, name: str) -> "SpecNode":
        """Shallow copy of this node with one named entry removed."""
        if name not in self.named_entries:
            return self
        return SpecNode(
            positional_slots=self.positional_slots,
            named_entries={k: v for k, v in self.named_entries.items() if k != name},
        )


def as_spec_node(value: SpecNode | Mapping[Any, Any]) -> SpecNode:
    """Return `value` as a SpecNode, converting declarative mappings."""
    if isinstance(value, SpecNode):
        return value
    if isinstance(value, Mapping):
        return SpecNode.from_mapping(value)
    raise TypeError(
        f"Expected a specification mapping, got {type(value).__name__}")
