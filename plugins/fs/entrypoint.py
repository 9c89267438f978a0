# plugins/fs/entrypoint.py
from __future__ import annotations

from pathlib import Path

from termcomplete.commands import Command
from termcomplete.spec import LazyArgs, OptionDescriptor, SpecNode


# -------------------------- helpers --------------------------

def _fmt_size(n: int) -> str:
    units = ["B", "KB", "MB", "GB", "TB"]
    i = 0
    f = float(n)
    while f >= 1024 and i < len(units) - 1:
        f /= 1024.0
        i += 1
    return f"{f:.1f} {units[i]}"


def _entries(*, files_only: bool = False, show_hidden: bool = False) -> list[str]:
    """Names in the working directory; directories get a trailing slash."""
    names = []
    for path in sorted(Path.cwd().iterdir()):
        if path.name.startswith(".") and not show_hidden:
            continue
        if path.is_dir():
            if not files_only:
                names.append(f"{path.name}/")
        else:
            names.append(path.name)
    return names


def _split_flags(args: list[str]) -> tuple[set[str], list[str]]:
    flags = {a for a in args if a.startswith("-")}
    return flags, [a for a in args if not a.startswith("-")]


# -------------------------- commands --------------------------

def ls(args: list[str]) -> str:
    flags, positional = _split_flags(args)
    show_all = bool(flags & {"-a", "--all"})
    long_format = bool(flags & {"-l", "--long"})
    target = Path(positional[0]) if positional else Path.cwd()
    if not target.is_dir():
        raise NotADirectoryError(str(target))

    lines = []
    for path in sorted(target.iterdir()):
        if path.name.startswith(".") and not show_all:
            continue
        name = f"{path.name}/" if path.is_dir() else path.name
        if long_format:
            size = "-" if path.is_dir() else _fmt_size(path.stat().st_size)
            lines.append(f"{size:>10}  {name}")
        else:
            lines.append(name)
    return "\n".join(lines)


def cat(args: list[str]) -> str:
    if not args:
        raise ValueError("Usage: cat <file>")
    return Path(args[0]).read_text(encoding="utf-8", errors="replace")


def pwd(args: list[str]) -> str:
    return str(Path.cwd())


COMMANDS = [
    Command(
        name="ls",
        description="List directory contents.",
        example="ls -l src/",
        callback=ls,
        module=__name__,
        aliases=["dir"],
        completion=SpecNode(
            positional_slots=((0, LazyArgs(lambda: [e for e in _entries() if e.endswith("/")])),),
            named_entries={
                "--all": OptionDescriptor(other="-a"),
                "-a": OptionDescriptor(other="--all"),
                "--long": OptionDescriptor(other="-l"),
                "-l": OptionDescriptor(other="--long"),
            },
        ),
    ),
    Command(
        name="cat",
        description="Print a text file.",
        example="cat README.md",
        callback=cat,
        module=__name__,
        completion={0: lambda: _entries(files_only=True)},
    ),
    Command(
        name="pwd",
        description="Print the working directory.",
        callback=pwd,
        module=__name__,
    ),
]
