"""Group -> key -> locale -> value tables backing a parsed desktop entry."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from deskentry.core.errors import (
    FatalAccessError,
    KeyNotFoundError,
    LookupFailure,
    ValueTypeError,
)
from deskentry.core.locale_tag import LocaleTag

T = TypeVar("T")


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Outcome of a ``try_*`` accessor: either a value or a lookup failure."""
    value: T | None = None
    error: LookupFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise FatalAccessError if the lookup failed."""
        if self.error is not None:
            raise FatalAccessError(str(self.error)) from self.error
        return self.value


def _qualified(key: str, locale: str) -> str:
    return f"{key}[{locale}]"


def parse_boolean(raw: str) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise ValueError(raw)


def parse_numeric(raw: str) -> float:
    """Parse a float literal; out-of-range values are rejected, not rounded to inf."""
    # float() accepts digit separators, desktop files never use them
    if "_" in raw:
        raise ValueError(raw)
    lowered = raw.lower()
    if "0x" in lowered:
        # hex floats need a binary exponent
        if "p" not in lowered:
            raise ValueError(raw)
        value = float.fromhex(raw)
    else:
        value = float(raw)
    if math.isinf(value) and lowered.lstrip("+-") not in ("inf", "infinity"):
        raise ValueError(raw)
    return value


class ValueTable(dict[str, str]):
    """Canonical locale string -> value for one key. First write wins."""

    def add(self, locale: LocaleTag | str, value: str) -> bool:
        loc = str(locale)
        if loc in self:
            return False
        self[loc] = value
        return True


class KeyTable(dict[str, ValueTable]):
    """Key name -> ValueTable for one group, with typed accessors."""

    def add(self, key: str, locale: LocaleTag | str, value: str) -> bool:
        values = self.get(key)
        if values is None:
            values = self[key] = ValueTable()
        return values.add(locale, value)

    # ── Locales ──
    def try_get_locales(self, key: str) -> Lookup[set[LocaleTag]]:
        values = self.get(key)
        if values is None:
            return Lookup(error=KeyNotFoundError(f"key {key} not found"))
        return Lookup({LocaleTag.from_canonical(loc) for loc in values})

    def get_locales(self, key: str) -> set[LocaleTag]:
        return {LocaleTag.from_canonical(loc) for loc in self.get(key, ())}

    # ── Strings ──
    def try_get_string(self, locale: LocaleTag | str, key: str) -> Lookup[str]:
        loc = str(locale)
        values = self.get(key)
        if values is None or loc not in values:
            return Lookup(error=KeyNotFoundError(f"key {_qualified(key, loc)} not found"))
        return Lookup(values[loc])

    def get_string(self, locale: LocaleTag | str, key: str) -> str:
        return self.try_get_string(locale, key).unwrap()

    # ── Booleans ──
    def try_get_boolean(self, locale: LocaleTag | str, key: str) -> Lookup[bool]:
        return self._convert(locale, key, parse_boolean, "boolean")

    def get_boolean(self, locale: LocaleTag | str, key: str) -> bool:
        return self.try_get_boolean(locale, key).unwrap()

    # ── Numbers ──
    def try_get_numeric(self, locale: LocaleTag | str, key: str) -> Lookup[float]:
        return self._convert(locale, key, parse_numeric, "numeric")

    def get_numeric(self, locale: LocaleTag | str, key: str) -> float:
        return self.try_get_numeric(locale, key).unwrap()

    def _convert(self, locale, key, convert, kind: str) -> Lookup:
        found = self.try_get_string(locale, key)
        if not found.ok:
            return found
        try:
            return Lookup(convert(found.value))
        except (ValueError, OverflowError):
            return Lookup(error=ValueTypeError(
                f"value for key {_qualified(key, str(locale))} isn't {kind}"
            ))


class GroupTable(dict[str, KeyTable]):
    """Group name -> KeyTable; the whole parsed document."""

    def declare(self, group: str) -> bool:
        """Register a new group. Returns False if it already exists."""
        if group in self:
            return False
        self[group] = KeyTable()
        return True

    def add(self, group: str, key: str, locale: LocaleTag | str, value: str) -> bool:
        keys = self.get(group)
        if keys is None:
            keys = self[group] = KeyTable()
        return keys.add(key, locale, value)
