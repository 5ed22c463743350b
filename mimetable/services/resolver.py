"""MIME resolution against a computed magic table."""

from __future__ import annotations

import logging
from pathlib import Path

from mimetable.models.mime import ResolvedMime
from mimetable.services.magic_table import (
    ExtensionNotFoundError,
    MagicTable,
    MimeNotFoundError,
    parse_mime,
)
from mimetable.streams import NamedStream, as_stream

logger = logging.getLogger(__name__)


class MimeResolver:
    """Look up MIME types by name or extension, and extensions by MIME.

    The table is injected; use ``mimetable.dependencies.get_magic_table``
    for the shared, lazily-built one.
    """

    def __init__(self, table: MagicTable) -> None:
        self._table = table

    @property
    def table(self) -> MagicTable:
        return self._table

    def resolve(self, subject: NamedStream | str | Path) -> ResolvedMime:
        """Resolve the MIME of a named subject from its last extension.

        Raises ExtensionNotFoundError when the base name has no ".", and
        MimeNotFoundError when the extension is not in the table.
        """
        stream = as_stream(subject)
        name = stream.stream_name
        based = stream.basename()

        dot = based.rfind(".")
        if dot == -1:
            raise ExtensionNotFoundError(
                f"Cannot find MIME type of {name}, because extension is not found."
            )

        extension = based[dot + 1:]
        mime = self.mime_from_extension(extension)
        if mime is None:
            raise MimeNotFoundError(
                f"No MIME type associated to the {extension} extension."
            )

        entry = parse_mime(mime)
        logger.debug("Resolved %s to %s", name, mime)
        return ResolvedMime(
            extension=extension,
            mime=mime,
            media=entry.media,
            type=entry.type,
        )

    def extension_exists(self, extension: str) -> bool:
        return extension in self._table.by_extension

    def mime_from_extension(self, extension: str) -> str | None:
        """Case-insensitive lookup; None when the extension is unknown."""
        return self._table.by_extension.get(extension.lower())

    def extensions_from_mime(self, mime: str) -> list[str]:
        entry = parse_mime(mime)
        extensions = self._table.by_media_type.get((entry.media, entry.type))
        if extensions is None:
            raise MimeNotFoundError(f"MIME type {mime} does not exist.")
        return list(extensions)

    def other_extensions_for(self, resolved: ResolvedMime) -> list[str]:
        """Extensions sharing ``resolved``'s MIME, minus its own extension."""
        current = resolved.extension.lower()
        siblings = self._table.by_media_type.get((resolved.media, resolved.type), ())
        return [ext for ext in siblings if ext.lower() != current]

    def known_mimes(self) -> list[str]:
        return [f"{media}/{type_}" for media, type_ in self._table.by_media_type]

    @staticmethod
    def is_experimental(resolved: ResolvedMime) -> bool:
        return resolved.is_experimental

    @staticmethod
    def is_vendor(resolved: ResolvedMime) -> bool:
        return resolved.is_vendor
