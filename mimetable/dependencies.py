"""Shared magic table state and FastAPI dependency providers.

The magic table is built once per process, on first use, from the path in
settings (or an explicit override given to that first call). Later calls
return the same table until reset_magic_table() drops it.
"""

from __future__ import annotations

import threading
from pathlib import Path

from mimetable.config import get_settings
from mimetable.services.magic_table import MagicTable, TableBuilder
from mimetable.services.resolver import MimeResolver

_lock = threading.Lock()
_table: MagicTable | None = None


def get_magic_table(magic: str | Path | None = None) -> MagicTable:
    """Return the shared magic table, building it if needed.

    ``magic`` only matters for the call that performs the build.
    """
    global _table
    table = _table
    if table is not None:
        return table
    with _lock:
        if _table is None:
            source = magic if magic is not None else get_settings().magic_path
            _table = TableBuilder().build(source)
        return _table


def reset_magic_table() -> None:
    """Drop the shared table so the next access rebuilds it."""
    global _table
    with _lock:
        _table = None


def get_resolver() -> MimeResolver:
    """Inject a MimeResolver over the shared magic table."""
    return MimeResolver(get_magic_table())
