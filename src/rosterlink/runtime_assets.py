"""Helpers for locating bundled data files."""

from __future__ import annotations

from pathlib import Path

_PACKAGE_ASSETS_DIR = Path(__file__).resolve().parent / "assets"
_REPO_ASSETS_DIR = Path(__file__).resolve().parents[2] / "assets"

DEFAULT_ROSTER_FILE = "rosters.json"


def assets_dir() -> Path:
    """Return the root directory for bundled data."""
    if _PACKAGE_ASSETS_DIR.is_dir():
        return _PACKAGE_ASSETS_DIR
    return _REPO_ASSETS_DIR


def asset_path(*parts: str) -> Path:
    """Build an absolute path inside the bundled data directory."""
    return assets_dir().joinpath(*parts)


def default_roster_path() -> Path:
    return asset_path(DEFAULT_ROSTER_FILE)
