"""Fixtures for CLI integration tests."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    """Point every CLI store at a temporary export directory and keep logging quiet."""
    export_dir = tmp_path / "exports"
    monkeypatch.setenv("EXPORT_DIR", str(export_dir))
    monkeypatch.setenv("SEED_DEMO_DATA", "true")
    monkeypatch.setenv("STRICT_MODE", "false")
    monkeypatch.delenv("LOG_DIR", raising=False)
    with patch("vote_desk.cli.app.setup_logging"):
        yield export_dir
