"""Extension and MIME type lookups backed by a mime.types magic table.

The module-level helpers below work on the shared table, built from the
configured (or bundled) magic file the first time one of them is used::

    >>> import mimetable
    >>> mimetable.resolve("archive.tar.gz").mime
    'application/gzip'
"""

from __future__ import annotations

__version__ = "0.1.0"

from pathlib import Path

from mimetable.dependencies import get_magic_table, get_resolver, reset_magic_table
from mimetable.models.mime import MimeEntry, ResolvedMime
from mimetable.services.magic_table import (
    CorruptedSourceError,
    ExtensionNotFoundError,
    MagicTable,
    MalformedMimeError,
    MimeError,
    MimeNotFoundError,
    SourceUnavailableError,
    TableBuilder,
    parse_mime,
)
from mimetable.services.resolver import MimeResolver
from mimetable.streams import NamedStream, NameStream, PathStream

__all__ = [
    "CorruptedSourceError",
    "ExtensionNotFoundError",
    "MagicTable",
    "MalformedMimeError",
    "MimeEntry",
    "MimeError",
    "MimeNotFoundError",
    "MimeResolver",
    "NameStream",
    "NamedStream",
    "PathStream",
    "ResolvedMime",
    "SourceUnavailableError",
    "TableBuilder",
    "extension_exists",
    "extensions_from_mime",
    "get_magic_table",
    "mime_from_extension",
    "parse_mime",
    "reset_magic_table",
    "resolve",
]


def resolve(subject: NamedStream | str | Path) -> ResolvedMime:
    return get_resolver().resolve(subject)


def extension_exists(extension: str) -> bool:
    return get_resolver().extension_exists(extension)


def mime_from_extension(extension: str) -> str | None:
    return get_resolver().mime_from_extension(extension)


def extensions_from_mime(mime: str) -> list[str]:
    return get_resolver().extensions_from_mime(mime)
