#!/usr/bin/env python3
# termcomplete/__main__.py
from __future__ import annotations
"""
Interactive terminal entry point.

Boot: load configuration, initialize logging, load plugins, build the
autocomplete from the built-in verbs and the registered commands, then run
the read/dispatch loop.
"""

import locale
import logging
import sys
from typing import Any, Callable

from termcomplete.commands import REGISTRY, CommandRegistry
from termcomplete.config import AppConfig, default_config, load_config
from termcomplete.interface import (
    HELP_TEXT,
    Autocomplete,
    builtin_spec,
    handle_line,
    load_commands,
    make_cli,
)
from termcomplete.ui import colorize, init_logger, print_line

logger = logging.getLogger("termcomplete")


def _step(label: str, fn: Callable[[], Any]) -> Any:
    """Run a boot step with status output."""
    try:
        out = fn()
    except Exception as exc:
        print_line(
            colorize(f"[FAILED] {label} ({type(exc).__name__}: {exc})", "red"))
        raise
    print_line(colorize(f"[  OK  ] {label}", "green"))
    return out


def _load_config_or_defaults() -> AppConfig:
    try:
        return load_config()
    except ValueError as exc:
        print_line(colorize(f"[ WARN ] Invalid configuration: {exc}", "yellow"))
        return default_config()


def _init_locale() -> bool:
    """Sort candidates in the user's collation order."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.warning("Locale unavailable (%s); sorting by code point", exc)
        return False
    return True


def boot(registry: CommandRegistry | None = None) -> tuple[AppConfig, Autocomplete]:
    registry = registry or REGISTRY
    config = _step("Load configuration", _load_config_or_defaults)
    logfile = str(config.log_file_path) if config.log_file_path else None
    _step("Initialize logging",
          lambda: init_logger("termcomplete", config.log_level, logfile))
    _init_locale()
    _step(f"Load plugins from '{config.plugin_package}'",
          lambda: load_commands(config.plugin_package, registry=registry))
    autocomplete = _step("Build completion tree", lambda: Autocomplete(
        [builtin_spec(registry), registry.completion_spec()]))
    return config, autocomplete


def main(registry: CommandRegistry | None = None) -> int:
    registry = registry or REGISTRY
    try:
        config, autocomplete = boot(registry)
    except Exception:
        return 1

    logger.info("%d command(s) available", len(registry.all()))
    print_line(HELP_TEXT)

    completion = autocomplete if config.enable_completion else None
    with make_cli(autocomplete, config) as cli:
        while True:
            try:
                line = cli.get_line()
            except KeyboardInterrupt:
                continue
            except EOFError:
                break
            try:
                output = handle_line(line, autocomplete=completion, registry=registry)
            except SystemExit:
                break
            if output:
                print_line(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
