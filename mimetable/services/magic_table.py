"""Magic table — parse a mime.types style file into lookup indices.

The table is line oriented: ``media/type`` optionally followed by a run of
tabs and a space-separated list of extensions. Blank lines and ``#``
comments are ignored. Parsing produces two views over the same data:

    by_media_type   (media, type) -> extensions, in table order
    by_extension    extension -> "media/type", last line wins

A line that cannot be parsed aborts the build with a CorruptedSourceError
showing the surrounding lines, so the offending entry can be found in a
large hand-maintained file.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from mimetable.models.mime import MimeEntry

logger = logging.getLogger(__name__)

_TAB_RUN = re.compile(r"\t+")
CONTEXT_LINES = 3
MARKER = "➜  "


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class MimeError(Exception):
    """Base class for every magic table and lookup failure."""


class SourceUnavailableError(MimeError):
    """Raised when the magic table cannot be read."""


class MalformedMimeError(MimeError):
    """Raised when a MIME string is not of the form media/type."""


class CorruptedSourceError(MimeError):
    """Raised when a data line of the magic table cannot be parsed."""

    def __init__(self, source: str, line_number: int, context: str) -> None:
        self.source = source
        self.line_number = line_number
        self.context = context
        super().__init__(
            f"Magic file {source} seems to be corrupted (at line {line_number}). "
            f"You should take a look at this piece of code:{context}"
        )


class MimeNotFoundError(MimeError):
    """Raised when no table entry matches an extension or MIME."""


class ExtensionNotFoundError(MimeNotFoundError):
    """Raised when a name has no extension to look up."""


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------


def parse_mime(mime: str) -> MimeEntry:
    """Split ``media/type`` on the first slash."""
    media, sep, type_ = mime.partition("/")
    if not sep:
        raise MalformedMimeError(f"MIME {mime} is not well-formed (media/type).")
    return MimeEntry(media=media, type=type_)


def _context_window(lines: list[str], index: int) -> str:
    """Render lines around ``index`` with 1-based numbers, marking ``index``."""
    first = max(0, index - CONTEXT_LINES)
    last = min(len(lines) - 1, index + CONTEXT_LINES)
    width = len(str(last + 1))
    out = []
    for i in range(first, last + 1):
        prefix = MARKER if i == index else " " * len(MARKER)
        out.append(f"\n{i + 1:>{width}}. {prefix}{lines[i].strip()}")
    return "".join(out)


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MagicTable:
    """Computed magic table. Treat as read-only once built."""

    source: str
    by_media_type: dict[tuple[str, str], tuple[str, ...]] = field(default_factory=dict)
    by_extension: dict[str, str] = field(default_factory=dict)

    @property
    def mime_count(self) -> int:
        return len(self.by_media_type)

    @property
    def extension_count(self) -> int:
        return len(self.by_extension)


class TableBuilder:
    """Build a MagicTable from a magic file or from raw lines."""

    def build(self, source: str | Path) -> MagicTable:
        path = Path(source)
        if not path.is_file():
            raise SourceUnavailableError(f"Magic file {path} does not exist.")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceUnavailableError(f"Magic file {path} cannot be read: {exc}") from exc

        return self.build_from_lines(text.splitlines(), source=str(path))

    def build_from_lines(
        self, lines: Iterable[str], *, source: str = "<memory>"
    ) -> MagicTable:
        lines = list(lines)
        by_media_type: dict[tuple[str, str], tuple[str, ...]] = {}
        by_extension: dict[str, str] = {}

        for index, raw in enumerate(lines):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            parts = _TAB_RUN.split(line)
            mime = parts[0]
            extensions = parts[1] if len(parts) > 1 else None

            try:
                entry = parse_mime(mime)
            except MalformedMimeError as exc:
                raise CorruptedSourceError(
                    source, index + 1, _context_window(lines, index)
                ) from exc

            if not extensions:
                by_media_type[(entry.media, entry.type)] = ()
                continue

            tokens = tuple(ext for ext in extensions.split(" ") if ext)
            by_media_type[(entry.media, entry.type)] = tokens
            for ext in tokens:
                by_extension[ext] = mime

        table = MagicTable(
            source=source,
            by_media_type=by_media_type,
            by_extension=by_extension,
        )
        logger.info(
            "Built magic table from %s: %d MIME types, %d extensions",
            source,
            table.mime_count,
            table.extension_count,
        )
        return table
