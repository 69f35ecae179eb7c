"""Command mode language.

A line typed after ``:`` is parsed into a Directive. Parsing is pure; the
dispatcher applies the result.

Commands:
    ng, newglob <pattern>     replace the images with a new glob
    ?, h, help                show the help overlay
    q, quit                   quit
    sort [method]             re-sort, optionally switching method
    df, destfolder <path>     set the destination folder for move/copy
    m, max <n>                show at most n images (0 = all)
    r, reverse                reverse the current order
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Optional, Union

from .errors import InvalidArgumentError, MissingArgumentError
from .types import SortMethod

_UINT_RE = re.compile(r"\d+", re.ASCII)


@dataclass(frozen=True)
class NewGlob:
    pattern: str


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Sort:
    method: Optional[SortMethod] = None  # None re-applies the current method


@dataclass(frozen=True)
class DestFolder:
    path: str


@dataclass(frozen=True)
class Max:
    count: int


@dataclass(frozen=True)
class Reverse:
    pass


@dataclass(frozen=True)
class Unrecognized:
    text: str


Directive = Union[NewGlob, Help, Quit, Sort, DestFolder, Max, Reverse, Unrecognized]

_ALIASES = {
    "ng": "newglob", "newglob": "newglob",
    "?": "help", "h": "help", "help": "help",
    "q": "quit", "quit": "quit",
    "sort": "sort",
    "df": "destfolder", "destfolder": "destfolder",
    "m": "max", "max": "max",
    "r": "reverse", "reverse": "reverse",
}


def _require(name: str, arg: str, what: str) -> str:
    if not arg:
        raise MissingArgumentError(f'command "{name}" requires {what}')
    return arg


def parse_command(line: str) -> Optional[Directive]:
    """Parse one Command mode line.

    Returns None for a blank line. Raises MissingArgumentError or
    InvalidArgumentError for bad arguments; unknown commands come back as
    Unrecognized so the caller can show them.
    """
    text = line.strip()
    if not text:
        return None
    parts = text.split(None, 1)
    token = parts[0]
    arg = parts[1].strip() if len(parts) > 1 else ""
    name = _ALIASES.get(token.lower())

    if name is None:
        return Unrecognized(text)
    if name == "newglob":
        return NewGlob(_require(name, arg, "a glob"))
    if name == "help":
        return Help()
    if name == "quit":
        return Quit()
    if name == "destfolder":
        return DestFolder(_require(name, arg, "a path"))
    if name == "max":
        value = _require(name, arg, "a new maximum number of files to display")
        if not _UINT_RE.fullmatch(value):
            raise InvalidArgumentError(f'"{value}" is not a non-negative integer')
        return Max(int(value))
    if name == "reverse":
        return Reverse()
    # sort
    if not arg:
        return Sort(None)
    try:
        return Sort(SortMethod.parse(arg))
    except ValueError:
        raise InvalidArgumentError(
            f'invalid sort method "{arg}", expected one of {", ".join(SortMethod.names())}'
        ) from None
