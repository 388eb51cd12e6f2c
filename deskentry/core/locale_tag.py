"""Locale qualifiers: ``lang[_COUNTRY][.ENCODING][@MODIFIER]``."""

from __future__ import annotations

import string
from dataclasses import dataclass

from deskentry.core.errors import LocaleTagError

_FIELDS = ("language", "country", "encoding", "modifier")

# Delimiters closing each segment, by segment index.
_DELIMS = ("_-", ".", "@", "\0")

_CLASSES = (
    frozenset(string.ascii_lowercase),
    frozenset(string.ascii_letters + "-"),
    frozenset(string.ascii_letters + string.digits + "-"),
    frozenset(string.ascii_letters),
)


def _delim_index(ch: str) -> int:
    for i, delims in enumerate(_DELIMS):
        if ch in delims:
            return i
    return -1


@dataclass(frozen=True)
class LocaleTag:
    """A parsed locale qualifier. The empty tag stands for "no qualifier"."""
    language: str = ""
    country: str = ""
    encoding: str = ""
    modifier: str = ""

    @classmethod
    def parse(cls, text: str) -> "LocaleTag":
        """Parse *text* with the four-segment locale grammar.

        Raises LocaleTagError on a malformed tag. Leading whitespace is skipped;
        an empty string yields the empty tag.
        """
        fields = {name: "" for name in _FIELDS}
        buf: list[str] = []
        seg = 0
        last_delim = ""

        for ch in text.lstrip():
            k = _delim_index(ch)
            if k >= seg:
                if not buf:
                    raise LocaleTagError(f"expected something before {ch!r}")
                fields[_FIELDS[seg]] = "".join(buf)
                buf.clear()
                seg = k + 1
                last_delim = ch
                continue

            if seg >= len(_FIELDS):
                raise LocaleTagError(f"unexpected character {ch!r} after modifier")
            if ch not in _CLASSES[seg]:
                raise LocaleTagError(f"invalid character {ch!r} in {_FIELDS[seg]}")
            buf.append(ch)

        if buf:
            fields[_FIELDS[seg]] = "".join(buf)
        elif seg != 0:
            raise LocaleTagError(f"expected something after {last_delim!r}")

        return cls(**fields)

    @classmethod
    def from_canonical(cls, text: str) -> "LocaleTag":
        """Rebuild a tag from a stored lookup key, keeping ``x-`` tags verbatim."""
        if text.startswith("x-"):
            return cls(language=text)
        return cls.parse(text)

    def format(self) -> str:
        if not self.language:
            return ""
        parts = [self.language]
        if self.country:
            parts.append("_" + self.country)
        if self.encoding:
            parts.append("." + self.encoding)
        if self.modifier:
            parts.append("@" + self.modifier)
        return "".join(parts)

    def __str__(self) -> str:
        return self.format()

    def __bool__(self) -> bool:
        return bool(self.language)
