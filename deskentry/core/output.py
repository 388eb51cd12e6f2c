"""Plain-text and JSON listings of desktop entries."""

from __future__ import annotations

import json
from typing import Iterable

from deskentry.core.entry import Entry


def visible(entries: Iterable[Entry]) -> list[Entry]:
    """Drop entries marked ``NoDisplay=true``."""
    return [e for e in entries if not e.no_display]


def _display_name(entry: Entry) -> str:
    found = entry.try_name()
    return found.value if found.ok else ""


def format_plain(
    entries: Iterable[Entry],
    show_id: bool = False,
    show_name: bool = True,
    show_path: bool = True,
    delimiter: str = "\t",
    separator: str = "\n",
) -> str:
    """One record per visible entry: selected fields joined by *delimiter*."""
    out: list[str] = []
    for e in visible(entries):
        parts = []
        if show_id:
            parts.append(e.app_id)
        if show_name:
            parts.append(_display_name(e))
        if show_path:
            parts.append(e.path)
        if not parts:
            continue
        out.append(delimiter.join(parts) + separator)
    return "".join(out)


def format_json(entries: Iterable[Entry]) -> str:
    rows = [
        {"AppID": e.app_id, "Name": _display_name(e), "Path": e.path}
        for e in visible(entries)
    ]
    return json.dumps(rows, indent=2, ensure_ascii=False) + "\n"
