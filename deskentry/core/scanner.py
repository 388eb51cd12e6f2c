"""Line scanner for the desktop entry format.

Each line is one of:

  * blank or ``# comment``: ignored
  * ``[Group Name]``: starts a new group; names are unique per document
  * ``Key[locale] = value``: stored in the current group, first value wins

The first malformed line aborts the parse with a ParseError naming its line.
"""

from __future__ import annotations

import string
import unicodedata
from typing import BinaryIO

from deskentry.core.errors import LocaleTagError, ParseError
from deskentry.core.locale_tag import LocaleTag
from deskentry.core.tables import GroupTable

MAX_LINE_LENGTH = 4096  # bytes, terminator excluded

KEY_CHARS = frozenset(string.ascii_letters + string.digits + "-")
VENDOR_PREFIX = "x-"

# Whitespace for trimming and ending keys; also the control characters allowed inside values.
WHITESPACE = " \t\n\v\f\r\x85\xa0"
_SPACE_CONTROLS = frozenset(WHITESPACE)


class _LineError(Exception):
    """Problem on the current line; numbered by the parse loop."""


def _check_value(value: str) -> None:
    for ch in value:
        if unicodedata.category(ch) == "Cc" and ch not in _SPACE_CONTROLS:
            raise _LineError(f"invalid character {ch!r} in value")


class DocumentScanner:
    """Populates a GroupTable from one document. Use once per document."""

    def __init__(self) -> None:
        self.groups = GroupTable()
        self.current = ""

    def parse(self, stream: BinaryIO) -> GroupTable:
        lineno = 0
        while True:
            raw = stream.readline(MAX_LINE_LENGTH + 2)
            if not raw:
                return self.groups
            lineno += 1

            if raw.endswith(b"\n"):
                raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
            if len(raw) > MAX_LINE_LENGTH:
                raise ParseError("line is too long", line=lineno)

            try:
                self.parse_line(raw.decode("utf-8", errors="replace"))
            except LocaleTagError as exc:
                raise LocaleTagError(exc.reason, line=lineno) from exc
            except _LineError as exc:
                raise ParseError(str(exc), line=lineno) from exc

    def parse_line(self, line: str) -> None:
        line = line.strip(WHITESPACE)
        if not line or line.startswith("#"):
            return
        if line.startswith("["):
            self._parse_group(line)
        else:
            self._parse_assignment(line)

    def _parse_group(self, line: str) -> None:
        end = 1
        while end < len(line) and line[end] != "]":
            if not line[end].isprintable():
                raise _LineError(f"invalid character {line[end]!r} in group name")
            end += 1

        if end == len(line):
            raise _LineError("expected ']' but was not found")
        if end == 1:
            raise _LineError("group name is empty")
        if end != len(line) - 1:
            raise _LineError(f"unexpected {line[end + 1:]!r} after group header")

        group = line[1:end]
        if not self.groups.declare(group):
            raise _LineError(f"group {group!r} already exists")
        self.current = group

    def _parse_assignment(self, line: str) -> None:
        # Key
        i = 0
        while i < len(line):
            ch = line[i]
            if ch in KEY_CHARS:
                i += 1
            elif ch in "[=" or ch in WHITESPACE:
                break
            else:
                raise _LineError(f"invalid character {ch!r} in key")

        if i == len(line):
            raise _LineError("expected '=' but was not found")

        key = line[:i]
        rest = line[i:]

        # Locale qualifier
        locale = LocaleTag()
        if rest.startswith("["):
            close = rest.find("]", 1)
            if close == -1:
                raise _LineError("expected ']' but was not found")
            qualifier = rest[1:close]
            if qualifier.startswith(VENDOR_PREFIX):
                locale = LocaleTag(language=qualifier)
            else:
                locale = LocaleTag.parse(qualifier)
            rest = rest[close + 1:]

        rest = rest.strip(WHITESPACE)
        if not rest.startswith("="):
            raise _LineError("expected '=' but was not found")

        value = rest[1:].strip(WHITESPACE)
        _check_value(value)
        self.groups.add(self.current, key, locale, value)


def parse_document(stream: BinaryIO) -> GroupTable:
    """Parse a binary stream into a GroupTable. Raises ParseError."""
    return DocumentScanner().parse(stream)
