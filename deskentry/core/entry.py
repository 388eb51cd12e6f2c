"""Desktop entry documents with typed, locale-aware accessors."""

from __future__ import annotations

import io
from typing import BinaryIO

from deskentry.core.errors import (
    EntryStateError,
    GroupNotFoundError,
    ParseError,
)
from deskentry.core.locale_tag import LocaleTag
from deskentry.core.logger import get_logger
from deskentry.core.scanner import parse_document
from deskentry.core.tables import GroupTable, KeyTable, Lookup

_log = get_logger("entry")

MAIN_GROUP = "Desktop Entry"


class Entry:
    """One desktop entry: identity plus the groups parsed from its document.

    Constructed with identity only, populated by a single successful
    ``decode``, read-only afterwards. After a failed decode ``groups`` stays
    None and the entry should be discarded.

    Accessors come in pairs. ``try_get_*`` return a Lookup and never raise;
    ``get_*`` return the bare value and raise FatalAccessError when it is
    missing or has the wrong type. Locale lookup is an exact match on the
    canonical tag string, with no fallback to shorter tags.
    """

    def __init__(self, app_id: str, path: str) -> None:
        self._app_id = app_id
        self._path = path
        self._groups: GroupTable | None = None

    @property
    def app_id(self) -> str:
        return self._app_id

    @property
    def path(self) -> str:
        return self._path

    @property
    def groups(self) -> GroupTable | None:
        return self._groups

    def __repr__(self) -> str:
        return f"Entry(app_id={self._app_id!r}, path={self._path!r})"

    # ── Decoding ──
    def decode(self, stream: BinaryIO) -> None:
        """Parse *stream* into this entry. The stream is left open."""
        if self._groups is not None:
            raise EntryStateError(f"entry {self._app_id!r} is already decoded")
        try:
            groups = parse_document(stream)
        except ParseError as exc:
            exc.path = self._path
            _log.debug("Decode failed for %s: %s", self._app_id, exc)
            raise
        self._groups = groups
        _log.debug("Decoded %s: %d group(s)", self._app_id, len(groups))

    def decode_bytes(self, data: bytes) -> None:
        self.decode(io.BytesIO(data))

    # ── Groups ──
    def try_group(self, name: str) -> Lookup[KeyTable]:
        if self._groups is None or name not in self._groups:
            return Lookup(error=GroupNotFoundError(f"group {name!r} not found"))
        return Lookup(self._groups[name])

    def group(self, name: str) -> KeyTable:
        return self.try_group(name).unwrap()

    # ── Typed values ──
    def try_get_string(self, group: str, locale: LocaleTag | str, key: str) -> Lookup[str]:
        found = self.try_group(group)
        return found.value.try_get_string(locale, key) if found.ok else found

    def get_string(self, group: str, locale: LocaleTag | str, key: str) -> str:
        return self.try_get_string(group, locale, key).unwrap()

    def try_get_boolean(self, group: str, locale: LocaleTag | str, key: str) -> Lookup[bool]:
        found = self.try_group(group)
        return found.value.try_get_boolean(locale, key) if found.ok else found

    def get_boolean(self, group: str, locale: LocaleTag | str, key: str) -> bool:
        return self.try_get_boolean(group, locale, key).unwrap()

    def try_get_numeric(self, group: str, locale: LocaleTag | str, key: str) -> Lookup[float]:
        found = self.try_group(group)
        return found.value.try_get_numeric(locale, key) if found.ok else found

    def get_numeric(self, group: str, locale: LocaleTag | str, key: str) -> float:
        return self.try_get_numeric(group, locale, key).unwrap()

    def try_get_locales(self, group: str, key: str) -> Lookup[set[LocaleTag]]:
        found = self.try_group(group)
        return found.value.try_get_locales(key) if found.ok else found

    def get_locales(self, group: str, key: str) -> set[LocaleTag]:
        found = self.try_group(group)
        return found.value.get_locales(key) if found.ok else set()

    # ── Well-known keys ──
    def try_name(self) -> Lookup[str]:
        return self.try_get_string(MAIN_GROUP, "", "Name")

    @property
    def name(self) -> str:
        """Unqualified ``Name`` from the main group; FatalAccessError if absent."""
        return self.try_name().unwrap()

    @property
    def no_display(self) -> bool:
        """True when the main group sets ``NoDisplay=true``.

        Absent or malformed values mean the entry is displayable.
        """
        return self._flag("NoDisplay")

    @property
    def hidden(self) -> bool:
        return self._flag("Hidden")

    def _flag(self, key: str) -> bool:
        found = self.try_get_boolean(MAIN_GROUP, "", key)
        return found.ok and found.value
