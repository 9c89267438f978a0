#!/usr/bin/env python3
# termcomplete/__init__.py
from __future__ import annotations
"""
Tab-completion for line-oriented command terminals.

Typical use:

    from termcomplete import Autocomplete

    autocomplete = Autocomplete([{"anchor": {"idl": {"init": {}, "upgrade": {}}}}])
    autocomplete.get_candidates("anchor idl ")   # ['init', 'upgrade']
"""

from termcomplete.interface import Autocomplete, Override, walk
from termcomplete.spec import LazyArgs, LiteralArgs, OptionDescriptor, SpecNode, is_option

__version__ = "0.1.0"

__all__ = [
    "Autocomplete",
    "Override",
    "walk",
    "LazyArgs",
    "LiteralArgs",
    "OptionDescriptor",
    "SpecNode",
    "is_option",
]
