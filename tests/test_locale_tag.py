from __future__ import annotations

import itertools

import pytest

from deskentry import LocaleTag, LocaleTagError, ParseError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", LocaleTag()),
        ("de", LocaleTag("de")),
        ("de_AT", LocaleTag("de", "AT")),
        ("de-AT", LocaleTag("de", "AT")),
        ("sr@latin", LocaleTag("sr", modifier="latin")),
        ("en.UTF-8", LocaleTag("en", encoding="UTF-8")),
        ("de_AT.ISO-8859-1@euro", LocaleTag("de", "AT", "ISO-8859-1", "euro")),
        ("  fr_CA", LocaleTag("fr", "CA")),
    ],
)
def test_parse(text: str, expected: LocaleTag) -> None:
    assert LocaleTag.parse(text) == expected


@pytest.mark.parametrize(
    "text, message",
    [
        ("DE", "invalid character 'D' in language"),
        ("de_", "expected something after '_'"),
        ("_AT", "expected something before '_'"),
        ("de__AT", "invalid character '_' in country"),
        ("de_AT_x", "invalid character '_' in country"),
        ("de@euro.x", "invalid character '.' in modifier"),
        ("de.utf8@", "expected something after '@'"),
        ("de@eur0", "invalid character '0' in modifier"),
    ],
)
def test_parse_rejects(text: str, message: str) -> None:
    with pytest.raises(LocaleTagError) as excinfo:
        LocaleTag.parse(text)
    assert excinfo.value.reason == message
    assert isinstance(excinfo.value, ParseError)


def test_hyphen_allowed_after_language() -> None:
    tag = LocaleTag.parse("zh_Hant-TW.big-5")
    assert tag == LocaleTag("zh", "Hant-TW", "big-5")


def test_format() -> None:
    assert str(LocaleTag()) == ""
    assert str(LocaleTag("de", "AT")) == "de_AT"
    assert str(LocaleTag("sr", modifier="latin")) == "sr@latin"
    assert LocaleTag("de", "AT", "UTF-8", "euro").format() == "de_AT.UTF-8@euro"


def test_format_omits_fields_without_language() -> None:
    assert str(LocaleTag(country="AT")) == ""


@pytest.mark.parametrize(
    "tag",
    [
        LocaleTag(*fields)
        for fields in itertools.product(
            ["a", "de", "zhx"],
            ["", "BR", "Hant-TW"],
            ["", "UTF-8", "iso88591"],
            ["", "euro", "Latin"],
        )
    ],
    ids=str,
)
def test_round_trip(tag: LocaleTag) -> None:
    assert LocaleTag.parse(str(tag)) == tag


def test_from_canonical_keeps_vendor_tags() -> None:
    assert LocaleTag.from_canonical("x-test") == LocaleTag(language="x-test")
    assert LocaleTag.from_canonical("de_AT") == LocaleTag("de", "AT")
    assert LocaleTag.from_canonical("") == LocaleTag()


def test_tags_are_hashable() -> None:
    assert len({LocaleTag("de"), LocaleTag.parse("de"), LocaleTag()}) == 2
