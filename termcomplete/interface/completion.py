#!/usr/bin/env python3
# termcomplete/interface/completion.py
from __future__ import annotations

"""
Terminal autocomplete.

`Autocomplete` holds the completion handlers and turns an input line into the
final candidate list:

1) tokenize the line and pick the index of the token being completed,
2) ask every active handler for candidates (a failing handler is logged and
   skipped),
3) de-duplicate, put arguments before options, sort,
4) only keep options when the last token already starts with a dash.

Handlers are callables `(tokens, index) -> candidates`. Specification trees
(`SpecNode` or plain mappings) are wrapped into handlers at registration.
"""

import locale
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Sequence, Union

from termcomplete.interface.parser import has_trailing_whitespace, tokenize
from termcomplete.interface.walker import walk
from termcomplete.spec import SpecNode, as_spec_node, is_option

logger = logging.getLogger(__name__)

Handler = Callable[[Sequence[str], int], Iterable[str]]
HandlerLike = Union[Handler, SpecNode, Mapping[Any, Any]]


@dataclass(frozen=True, slots=True)
class SpecHandler:
    """Handler backed by a specification tree, walked from the root."""
    node: SpecNode

    def __call__(self, tokens: Sequence[str], index: int) -> list[str]:
        return walk(self.node, tokens, index)


@dataclass(frozen=True, slots=True)
class CandidatesHandler:
    """Handler offering a fixed list, filtered by the partial token."""
    candidates: tuple[str, ...]

    def __call__(self, tokens: Sequence[str], index: int) -> list[str]:
        token = tokens[index] if 0 <= index < len(tokens) else None
        return [c for c in self.candidates if not token or c.startswith(token)]


def to_handler(handler: HandlerLike) -> Handler:
    """Normalize a callable, SpecNode or mapping into a handler."""
    if isinstance(handler, (SpecNode, Mapping)):
        return SpecHandler(as_spec_node(handler))
    if callable(handler):
        return handler
    raise TypeError(
        f"Expected a handler or a specification tree, got {type(handler).__name__}")


def locale_key(text: str) -> tuple[str, str]:
    """Locale-aware sort key; lowercase sorts before uppercase on ties."""
    return locale.strxfrm(text.casefold()), text.swapcase()


def _dedupe(items: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(items))


def _option_visible(candidate: str, last_token: str) -> bool:
    """Only show options when the last token starts with '-' (or '--' for long ones)."""
    if not is_option(candidate):
        return True
    if candidate.startswith("--"):
        return last_token.startswith("--")
    return last_token.startswith("-")


@dataclass(eq=False)
class _Layer:
    handlers: tuple[Handler, ...]
    append: bool


@dataclass(eq=False)
class Override:
    """
    A temporary handler override.

    `restore()` removes this override only; overrides layered on top of it
    stay active. Usable as a context manager.
    """
    _owner: "Autocomplete" = field(repr=False)
    _layer: _Layer = field(repr=False)
    restored: bool = False

    def restore(self) -> None:
        if self.restored:
            return
        self._owner._remove_layer(self._layer)
        self.restored = True

    def __enter__(self) -> "Override":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()


class Autocomplete:
    """Terminal autocomplete over a list of handlers."""

    def __init__(self, handlers: Iterable[HandlerLike] = ()) -> None:
        self._base: tuple[Handler, ...] = tuple(to_handler(h) for h in handlers)
        self._layers: list[_Layer] = []
        self._handlers: tuple[Handler, ...] = self._base

    # ---------------- Handlers ----------------

    @property
    def handlers(self) -> tuple[Handler, ...]:
        """The active handlers, after applying all overrides."""
        return self._handlers

    def has_any_handler(self) -> bool:
        """Return whether there is at least one active handler."""
        return len(self._handlers) > 0

    def temporarily_set_handlers(self, handler: HandlerLike, *, append: bool = False) -> Override:
        """
        Temporarily replace the active handlers with `handler`.

        With `append=True` the handler is added after the active ones instead.
        Returns an `Override` whose `restore()` undoes this call.
        """
        layer = _Layer(handlers=(to_handler(handler),), append=append)
        self._layers.append(layer)
        self._recompute()
        logger.debug("Pushed autocomplete override (append=%s, depth=%d)",
                     append, len(self._layers))
        return Override(self, layer)

    def temporarily_set_candidates(self, candidates: Iterable[str], *, append: bool = False) -> Override:
        """Temporarily recommend a fixed list of candidates."""
        return self.temporarily_set_handlers(
            CandidatesHandler(tuple(candidates)), append=append)

    def _remove_layer(self, layer: _Layer) -> None:
        self._layers = [current for current in self._layers if current is not layer]
        self._recompute()
        logger.debug("Restored autocomplete override (depth=%d)", len(self._layers))

    def _recompute(self) -> None:
        active = self._base
        for layer in self._layers:
            active = active + layer.handlers if layer.append else layer.handlers
        self._handlers = active

    # ---------------- Candidates ----------------

    def get_candidates(self, input_line: str) -> list[str]:
        """Return the sorted autocomplete candidates for the given input."""
        tokens = tokenize(input_line)

        if not input_line.strip():
            index = 0
        elif has_trailing_whitespace(input_line):
            index = len(tokens)
        else:
            index = max(len(tokens) - 1, 0)

        collected: list[str] = []
        for handler in self._handlers:
            try:
                produced = list(handler(tokens, index))
            except Exception:
                logger.exception("Autocomplete error in handler %r", handler)
                continue
            collected.extend(produced)

        last_token = tokens[-1] if tokens else ""
        ordered = sorted(_dedupe(collected),
                         key=lambda c: (is_option(c), locale_key(c)))
        return [c for c in ordered if _option_visible(c, last_token)]
