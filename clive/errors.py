"""Error taxonomy.

Everything a user can trigger while browsing is recovered by the dispatcher
and shown as a message; only startup failures end the process.
"""

from __future__ import annotations


class CliveError(Exception):
    """Base class for all viewer errors."""


class PatternError(CliveError):
    """A path pattern is syntactically invalid."""


class DiscoveryError(CliveError):
    """A pattern matched no images."""


class PreconditionError(CliveError):
    """An operation was called in a state it does not support."""


class CommandError(CliveError):
    """A Command mode line could not be turned into a directive."""


class MissingArgumentError(CommandError):
    """A command that needs an argument was given none."""


class InvalidArgumentError(CommandError):
    """A command argument has the wrong shape."""


class FileActionError(CliveError):
    """Moving, copying or deleting an image failed."""


class DecodeError(CliveError):
    """An image could not be decoded for display."""
