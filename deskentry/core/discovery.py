"""Locate and load .desktop files from the XDG applications directories."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from deskentry.core.entry import Entry
from deskentry.core.errors import ParseError
from deskentry.core.logger import get_logger

_log = get_logger("discovery")

DESKTOP_SUFFIX = ".desktop"


@dataclass
class DiscoveryResult:
    """Entries that decoded cleanly, plus (path, error) for those that did not."""
    entries: list[Entry] = field(default_factory=list)
    errors: list[tuple[str, Exception]] = field(default_factory=list)


def applications_dirs() -> list[Path]:
    """Return existing XDG ``applications`` directories, most specific first."""
    from PyQt6.QtCore import QStandardPaths

    locations = QStandardPaths.standardLocations(
        QStandardPaths.StandardLocation.ApplicationsLocation
    )
    dirs: list[Path] = []
    for loc in locations:
        p = Path(loc)
        if p.is_dir() and p not in dirs:
            dirs.append(p)
    return dirs


def scan_directory(app_dir: str | Path) -> Iterator[tuple[str, Path]]:
    """Yield (app_id, path) for .desktop files directly inside *app_dir*."""
    app_dir = Path(app_dir)
    for f in sorted(app_dir.iterdir()):
        if f.is_dir() or f.suffix != DESKTOP_SUFFIX:
            continue
        yield f.stem, f


def load_entry(app_id: str, path: str | Path) -> Entry:
    """Open and decode one .desktop file. Raises ParseError or OSError."""
    entry = Entry(app_id, str(path))
    with open(path, "rb") as f:
        entry.decode(f)
    return entry


def discover_entries(
    dirs: Iterable[str | Path] | None = None,
    strict: bool = False,
) -> DiscoveryResult:
    """Load every .desktop file from *dirs* (the XDG directories by default).

    Files that fail to open or parse are logged and collected in
    ``errors``; with *strict* the first failure is raised instead.
    """
    if dirs is None:
        dirs = applications_dirs()

    result = DiscoveryResult()
    for d in dirs:
        d = Path(d)
        if not d.is_dir():
            continue
        for app_id, path in scan_directory(d):
            try:
                result.entries.append(load_entry(app_id, path))
            except (ParseError, OSError) as exc:
                if strict:
                    raise
                _log.warning("Skipping %s: %s", path, exc)
                result.errors.append((str(path), exc))
    _log.debug("Discovered %d entries, %d failed", len(result.entries), len(result.errors))
    return result
