#!/usr/bin/env python3
# termcomplete/config.py
from __future__ import annotations

"""
Configuration loader (stdlib-only).

Precedence (low → high):
  1) Built-in defaults
  2) Files in CWD: termcomplete.json, termcomplete.toml
  3) Environment variables prefixed with TERMCOMPLETE_

Validation:
  - PLUGIN_PACKAGE: non-empty dotted module name
  - LOG_LEVEL: one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
  - LOG_FILE_PATH: None or normalized path
  - HISTORY_FILE_PATH: normalized path
  - ENABLE_COMPLETION / COMPLETE_WHILE_TYPING: bool
  - PROMPT: str
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping
import json
import os
import re
import tomllib

ENV_PREFIX = "TERMCOMPLETE_"

DEFAULTS: dict[str, Any] = {
    "PLUGIN_PACKAGE": "plugins",
    "LOG_LEVEL": "WARNING",
    "LOG_FILE_PATH": None,
    "HISTORY_FILE_PATH": "~/.termcomplete_history",
    "ENABLE_COMPLETION": True,
    "COMPLETE_WHILE_TYPING": True,
    "PROMPT": "> ",
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_MODULE_RE = re.compile(r"[A-Za-z_][\w]*(\.[A-Za-z_][\w]*)*")


@dataclass(frozen=True)
class AppConfig:
    plugin_package: str
    log_level: str
    log_file_path: Path | None
    history_file_path: Path

    enable_completion: bool
    complete_while_typing: bool
    prompt: str

    # Unrecognized keys preserved for debugging/forward-compat
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- file loaders ----------

def _load_json_file(path: Path) -> dict[str, Any]:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in {path}: {exc}") from exc


def _flatten_mapping(obj: Any, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested dicts to UPPER_SNAKE keys.
    Example: {'log': {'level': 'debug'}} -> {'LOG_LEVEL': 'debug'}
    """
    flat: dict[str, Any] = {}
    if isinstance(obj, Mapping):
        for k, v in obj.items():
            key = f"{prefix}_{k}" if prefix else str(k)
            if isinstance(v, Mapping):
                flat.update(_flatten_mapping(v, key))
            else:
                flat[str(key).upper()] = v
    return flat


def _find_config_files(base: Path | None = None) -> list[Path]:
    cwd = base or Path.cwd()
    return [
        cwd / "termcomplete.json",
        cwd / "termcomplete.toml",
    ]


# ---------- normalization & coercion ----------

_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}


def _as_bool(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in _BOOL_TRUE:
        return True
    if s in _BOOL_FALSE:
        return False
    raise ValueError(f"Expected boolean, got: {val!r}")


def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_log_level(val: Any) -> str:
    up = str(val).strip().upper()
    if up not in _LOG_LEVELS:
        raise ValueError(
            f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {val!r}")
    return up


def _as_module_name(val: Any) -> str:
    name = str(val).strip()
    if not _MODULE_RE.fullmatch(name):
        raise ValueError(f"PLUGIN_PACKAGE must be a module name, got {val!r}")
    return name


def _as_path(val: Any) -> Path:
    s = os.path.expandvars(os.path.expanduser(str(val)))
    return Path(s).resolve()


def _as_opt_path(val: Any) -> Path | None:
    v = _as_opt_str(val)
    return None if v is None else _as_path(v)


def _normalize_keys(d: Mapping[str, Any]) -> dict[str, Any]:
    return {str(k).upper(): v for k, v in d.items()}


# ---------- merge & load ----------

def _merge_sources(base: Path | None = None, environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    merged: dict[str, Any] = dict(DEFAULTS)

    for file in _find_config_files(base):
        if file.suffix == ".json":
            merged.update(_normalize_keys(_flatten_mapping(_load_json_file(file))))
        elif file.suffix == ".toml":
            merged.update(_normalize_keys(_flatten_mapping(_load_toml_file(file))))

    # Environment variables override all
    env = os.environ if environ is None else environ
    merged.update({k[len(ENV_PREFIX):]: v for k, v in env.items()
                   if k.startswith(ENV_PREFIX) and len(k) > len(ENV_PREFIX)})
    return merged


def _validate_and_build(config: Mapping[str, Any]) -> AppConfig:
    recognized = set(DEFAULTS.keys())
    extra = {k: v for k, v in config.items() if k not in recognized}

    return AppConfig(
        plugin_package=_as_module_name(
            config.get("PLUGIN_PACKAGE", DEFAULTS["PLUGIN_PACKAGE"])),
        log_level=_as_log_level(config.get("LOG_LEVEL", DEFAULTS["LOG_LEVEL"])),
        log_file_path=_as_opt_path(
            config.get("LOG_FILE_PATH", DEFAULTS["LOG_FILE_PATH"])),
        history_file_path=_as_path(
            config.get("HISTORY_FILE_PATH", DEFAULTS["HISTORY_FILE_PATH"])),
        enable_completion=_as_bool(
            config.get("ENABLE_COMPLETION", DEFAULTS["ENABLE_COMPLETION"])),
        complete_while_typing=_as_bool(
            config.get("COMPLETE_WHILE_TYPING", DEFAULTS["COMPLETE_WHILE_TYPING"])),
        prompt=str(config.get("PROMPT", DEFAULTS["PROMPT"])),
        extra=extra,
    )


# ---------- public API ----------

def default_config() -> AppConfig:
    """Configuration built from the defaults only."""
    return _validate_and_build(DEFAULTS)


def load_config(base: Path | None = None, environ: Mapping[str, str] | None = None) -> AppConfig:
    """
    Load, merge, normalize, and validate configuration.
    Raises ValueError on invalid values or unreadable config files.
    """
    return _validate_and_build(_merge_sources(base, environ))
