#!/usr/bin/env python3
# termcomplete/interface/cli.py
from __future__ import annotations

"""
Interactive input frontends.

Selection order:
    1) prompt_toolkit (rich completion + history)
    2) readline (basic completion + history)
    3) plain input (last resort)
"""

import logging
from pathlib import Path
from typing import Optional

from termcomplete.config import AppConfig
from termcomplete.interface.completion import Autocomplete
from termcomplete.interface.parser import escape_token, token_start

logger = logging.getLogger(__name__)


def completion_replacements(
    autocomplete: Autocomplete, text_before_cursor: str
) -> tuple[int, list[tuple[str, str]]]:
    """
    Return where the typed token starts in the raw text, and for every
    candidate a `(candidate, replacement)` pair.

    The replacement is escaped (or quoted like the typed token) so the
    completed line tokenizes back to the candidate.
    """
    start = token_start(text_before_cursor)
    raw_token = text_before_cursor[start:]
    quote = raw_token[0] if raw_token[:1] in ("'", '"') else ""
    return start, [
        (word, escape_token(word, quote))
        for word in autocomplete.get_candidates(text_before_cursor)
    ]


class BaseCLI:
    """
    Plain `input()` frontend and base interface for the others.

    Subclasses override:
        - setup()
        - get_line()
        - teardown()

    Also a context manager guaranteeing teardown.
    """

    def __init__(self, prompt: str = "> ") -> None:
        self.prompt = prompt

    def setup(self) -> None:
        ...

    def get_line(self) -> str:
        return input(self.prompt)

    def teardown(self) -> None:
        ...

    def __enter__(self) -> "BaseCLI":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.teardown()
        except Exception:
            logger.warning("Frontend teardown failed", exc_info=True)


# ===== Preferred: prompt_toolkit =====
class PromptToolkitCLI(BaseCLI):
    """Rich line editor with history and live completion."""

    def __init__(
        self,
        autocomplete: Autocomplete | None,
        history_path: Path,
        *,
        prompt: str = "> ",
        complete_while_typing: bool = True,
    ) -> None:
        super().__init__(prompt)
        from prompt_toolkit import PromptSession
        from prompt_toolkit.completion import Completer, Completion
        from prompt_toolkit.history import FileHistory
        from prompt_toolkit.key_binding import KeyBindings

        self._history_path = history_path

        class _Completer(Completer):
            def get_completions(self, document, complete_event):
                text_before_cursor = document.text_before_cursor
                start, replacements = completion_replacements(
                    autocomplete, text_before_cursor)
                for word, text in replacements:
                    yield Completion(
                        text,
                        start_position=start - len(text_before_cursor),
                        display=word,
                    )

        self.completer = _Completer() if autocomplete is not None else None

        # Refresh suggestions after deleting characters.
        kb = KeyBindings()

        @kb.add("backspace")
        def _(event):
            b = event.app.current_buffer
            if b.selection_state:
                b.cut_selection()
            else:
                b.delete_before_cursor(1)
            b.start_completion(select_first=False)

        self._session_factory = lambda: PromptSession(
            history=FileHistory(str(history_path)),
            completer=self.completer,
            complete_while_typing=complete_while_typing and self.completer is not None,
            key_bindings=kb,
        )
        self._session = None

    def setup(self) -> None:
        self._history_path.parent.mkdir(parents=True, exist_ok=True)
        self._history_path.touch(exist_ok=True)
        self._session = self._session_factory()

    def get_line(self) -> str:
        if self._session is None:
            self.setup()
        return self._session.prompt(self.prompt)


# ===== Fallback: readline =====
class ReadlineCLI(BaseCLI):
    """Fallback editor with basic completion and history."""

    def __init__(
        self,
        autocomplete: Autocomplete | None,
        history_path: Path,
        *,
        prompt: str = "> ",
    ) -> None:
        super().__init__(prompt)
        import readline

        self.readline = readline
        self._autocomplete = autocomplete
        self._history_path = history_path

    def setup(self) -> None:
        self._history_path.parent.mkdir(parents=True, exist_ok=True)
        self._history_path.touch(exist_ok=True)
        try:
            self.readline.read_history_file(str(self._history_path))
        except OSError:
            logger.debug("Could not read history file %s", self._history_path)

        if self._autocomplete is None:
            return

        # Tokens are separated by whitespace only; '-' and '=' stay in the token
        self.readline.set_completer_delims(" \t\n")
        self.readline.set_completer(self.complete)
        self.readline.parse_and_bind("tab: complete")

    def complete(self, text_fragment: str, state_index: int) -> Optional[str]:
        """readline completer: return the `state_index`-th replacement or None."""
        if self._autocomplete is None:
            return None
        buffer_text = self.readline.get_line_buffer()[:self.readline.get_endidx()]
        start, replacements = completion_replacements(self._autocomplete, buffer_text)
        # readline replaces from its own word start; drop what is already typed
        typed = buffer_text[start:self.readline.get_begidx()]
        matches = [text[len(typed):] for _, text in replacements if text.startswith(typed)]
        return matches[state_index] if state_index < len(matches) else None

    def teardown(self) -> None:
        try:
            self.readline.write_history_file(str(self._history_path))
        except OSError:
            logger.debug("Could not write history file %s", self._history_path)


def make_cli(autocomplete: Autocomplete | None, config: AppConfig) -> BaseCLI:
    """
    Select the best available frontend at runtime.
    Completion is left out when disabled in the configuration.
    """
    if not config.enable_completion:
        autocomplete = None

    try:
        return PromptToolkitCLI(
            autocomplete,
            config.history_file_path,
            prompt=config.prompt,
            complete_while_typing=config.complete_while_typing,
        )
    except ImportError:
        logger.debug("prompt_toolkit unavailable, trying readline")

    try:
        return ReadlineCLI(autocomplete, config.history_file_path, prompt=config.prompt)
    except ImportError:
        logger.debug("readline unavailable, using plain input")

    return BaseCLI(config.prompt)
