from __future__ import annotations

from mimetable.models.mime import MimeEntry, ResolvedMime  # noqa: F401
from mimetable.models.mime import ExtensionMimeRead, MimeExtensionsRead, ResolvedMimeRead  # noqa: F401
