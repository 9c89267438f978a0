# plugins/anchor/entrypoint.py
from __future__ import annotations

from pathlib import Path

from termcomplete.commands import Command

# Value-taking options shared by the program subcommands
_PROVIDER_OPTIONS = {
    "--provider.cluster": {"takeValue": True},
    "--program-name": {"takeValue": True, "other": "-p"},
    "-p": {"takeValue": True, "other": "--program-name"},
}


def _program_names() -> list[str]:
    """Programs of the Anchor workspace in the working directory."""
    programs = Path.cwd() / "programs"
    if not programs.is_dir():
        return []
    return sorted(p.name for p in programs.iterdir() if p.is_dir())


def anchor(args: list[str]) -> str:
    """Describe what the anchor invocation would do (dry-run)."""
    if not args:
        return "Usage: anchor <build|deploy|idl> [options]"
    subcommand, *rest = args
    if subcommand == "idl" and rest:
        action, *targets = rest
        target = targets[0] if targets else "<program-id>"
        return f"[dry-run] anchor idl {action} {target}"
    return f"[dry-run] anchor {' '.join(args)}"


COMMAND = Command(
    name="anchor",
    description="Build, deploy and manage IDLs of Anchor programs (dry-run).",
    example="anchor idl init <program-id>",
    callback=anchor,
    module=__name__,
    completion={
        "build": {**_PROVIDER_OPTIONS, "--verifiable": {"takeValue": False}},
        "deploy": dict(_PROVIDER_OPTIONS),
        "idl": {
            "init": {"0": _program_names, **_PROVIDER_OPTIONS},
            "upgrade": {"0": _program_names, **_PROVIDER_OPTIONS},
            "fetch": {"0": _program_names},
        },
        "--help": {"takeValue": False, "other": "-h"},
        "-h": {"takeValue": False, "other": "--help"},
        "--cluster": {"takeValue": True},
    },
)

