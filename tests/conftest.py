from pathlib import Path

import pytest


@pytest.fixture
def fake_home(monkeypatch, tmp_path):
    """Path.home() devuelve un directorio temporal."""
    home = tmp_path / "alice"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    return home


@pytest.fixture
def no_home(monkeypatch):
    """Path.home() falla como en un entorno sin home."""

    def _raise(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setenv("HOME", "/nonexistent")
    monkeypatch.setattr(Path, "home", classmethod(_raise))
