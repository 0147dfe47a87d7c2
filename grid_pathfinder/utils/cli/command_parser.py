"""Simple command parsing utilities for the development CLI."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class CLICommand:
    """Result of parsing a command string."""

    name: str
    args: List[str]


def parse_command(text: str) -> Optional[CLICommand]:
    """Parse ``text`` into a :class:`CLICommand` if it starts with ``/``."""

    text = text.strip()
    if not text.startswith("/"):
        return None
    try:
        parts = shlex.split(text[1:])
    except ValueError:
        return None
    if not parts:
        return None
    return CLICommand(name=parts[0].lower(), args=parts[1:])


__all__ = ["CLICommand", "parse_command"]
