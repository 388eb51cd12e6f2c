from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

from deskentry import Entry
from deskentry.core import config, logger


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep settings and logs out of the real home directory."""
    home = tmp_path / "home"
    monkeypatch.setattr(config, "CONFIG_DIR", home / ".config" / "deskentry")
    monkeypatch.setattr(config, "SETTINGS_FILE", home / ".config" / "deskentry" / "settings.json")
    monkeypatch.setattr(logger, "CACHE_DIR", home / ".cache" / "deskentry")
    monkeypatch.setattr(logger, "LOG_FILE", home / ".cache" / "deskentry" / "deskentry.log")
    monkeypatch.setattr(config.Config, "_instance", None)
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    yield home
    root = logging.getLogger("deskentry")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


@pytest.fixture
def make_entry():
    def _make(text: str, app_id: str = "sample", path: str = "/apps/sample.desktop") -> Entry:
        entry = Entry(app_id, path)
        entry.decode_bytes(text.encode("utf-8"))
        return entry
    return _make


@pytest.fixture
def apps_dir(tmp_path: Path) -> Path:
    d = tmp_path / "applications"
    d.mkdir()
    (d / "firefox.desktop").write_text(
        "[Desktop Entry]\nType=Application\nName=Firefox\nName[de]=Feuerfuchs\n",
        encoding="utf-8",
    )
    (d / "hidden.desktop").write_text(
        "[Desktop Entry]\nName=Hidden Tool\nNoDisplay=true\n",
        encoding="utf-8",
    )
    (d / "vim.desktop").write_text(
        "[Desktop Entry]\nName=Vim\nTerminal=true\n",
        encoding="utf-8",
    )
    (d / "README").write_text("not an entry\n", encoding="utf-8")
    nested = d / "nested"
    nested.mkdir()
    (nested / "inner.desktop").write_text("[Desktop Entry]\nName=Inner\n", encoding="utf-8")
    return d
