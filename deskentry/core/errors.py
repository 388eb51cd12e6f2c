"""Exception types for desktop entry parsing and lookup."""

from __future__ import annotations


class DesktopEntryError(Exception):
    """Base class for recoverable desktop entry errors."""


class ParseError(DesktopEntryError):
    """A structural error that aborts the whole parse of one document."""

    def __init__(self, reason: str, line: int | None = None, path: str | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.line = line
        self.path = path

    def __str__(self) -> str:
        msg = self.reason
        if self.line is not None:
            msg = f"line {self.line}: {msg}"
        if self.path:
            msg = f"file {self.path}: {msg}"
        return msg


class LocaleTagError(ParseError):
    """Malformed locale qualifier."""


class LookupFailure(DesktopEntryError):
    """Base for failed value lookups returned by the ``try_*`` accessors."""


class GroupNotFoundError(LookupFailure):
    pass


class KeyNotFoundError(LookupFailure):
    pass


class ValueTypeError(LookupFailure):
    pass


class EntryStateError(DesktopEntryError):
    """Entry used out of order (decoded twice)."""


class FatalAccessError(RuntimeError):
    """Raised by plain accessors when data the caller relied on is absent or malformed.

    Not part of the DesktopEntryError hierarchy: callers are expected to check with
    the ``try_*`` accessors first, so this signals a programming error.
    """
