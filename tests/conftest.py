from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from mimetable import dependencies
from mimetable.config import get_settings
from mimetable.services.magic_table import MagicTable, TableBuilder
from mimetable.services.resolver import MimeResolver

SAMPLE_TABLE = (
    "# Sample magic table\n"
    "#application/commented\tnope\n"
    "\n"
    "application/json\t\tjson map\n"
    "application/gzip\t\t\tgz tgz\n"
    "application/vnd.ms-excel\txls xlm xlt\n"
    "application/x-tar\ttar\n"
    "multipart/mixed\n"
    "   \n"
    "text/plain\t\t\ttxt text log\n"
    "text/x-c\tc h\n"
    "image/x-icon\tico\n"
)


# ── Shared state isolation ────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _isolate_shared_state(monkeypatch):
    """Every test starts without a shared table or cached settings."""
    monkeypatch.delenv("MIMETABLE_MAGIC", raising=False)
    monkeypatch.delenv("MIMETABLE_LOG_LEVEL", raising=False)
    dependencies.reset_magic_table()
    get_settings.cache_clear()
    yield
    dependencies.reset_magic_table()
    get_settings.cache_clear()


# ── Magic table fixtures ──────────────────────────────────────────────


@pytest.fixture(name="write_table")
def write_table_fixture(tmp_path: Path):
    """Factory writing magic table text to a temp file and returning its path."""

    def _write(text: str, name: str = "mime.types") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(name="magic_file")
def magic_file_fixture(write_table) -> Path:
    return write_table(SAMPLE_TABLE)


@pytest.fixture(name="table")
def table_fixture(magic_file: Path) -> MagicTable:
    return TableBuilder().build(magic_file)


@pytest.fixture(name="resolver")
def resolver_fixture(table: MagicTable) -> MimeResolver:
    return MimeResolver(table)


# ── HTTP client fixtures ──────────────────────────────────────────────


@pytest.fixture(name="client")
def client_fixture(magic_file: Path):
    """TestClient whose shared table is built from the sample magic file."""
    from mimetable.main import app

    dependencies.get_magic_table(magic_file)
    with TestClient(app) as client:
        yield client
