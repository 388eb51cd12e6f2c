"""deskentry: parser for XDG Desktop Entry files."""

__app_name__ = "deskentry"
__version__ = "1.0.0"

from deskentry.core.entry import MAIN_GROUP, Entry
from deskentry.core.errors import (
    DesktopEntryError,
    EntryStateError,
    FatalAccessError,
    GroupNotFoundError,
    KeyNotFoundError,
    LocaleTagError,
    LookupFailure,
    ParseError,
    ValueTypeError,
)
from deskentry.core.locale_tag import LocaleTag
from deskentry.core.scanner import parse_document
from deskentry.core.tables import GroupTable, KeyTable, Lookup, ValueTable

__all__ = [
    "MAIN_GROUP",
    "DesktopEntryError",
    "Entry",
    "EntryStateError",
    "FatalAccessError",
    "GroupNotFoundError",
    "GroupTable",
    "KeyNotFoundError",
    "KeyTable",
    "LocaleTag",
    "LocaleTagError",
    "Lookup",
    "LookupFailure",
    "ParseError",
    "ValueTable",
    "ValueTypeError",
    "parse_document",
]
