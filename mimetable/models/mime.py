"""MIME models — parsed entries, resolved lookups and API schemas."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MimeEntry(BaseModel):
    """A MIME string split into its media and type components."""
    model_config = ConfigDict(frozen=True)

    media: str
    type: str

    @property
    def mime(self) -> str:
        return f"{self.media}/{self.type}"


class ResolvedMime(BaseModel):
    """MIME information resolved for a named subject. Immutable once built."""
    model_config = ConfigDict(frozen=True)

    extension: str  # Text after the last "." of the base name, case preserved
    mime: str
    media: str
    type: str

    @property
    def is_experimental(self) -> bool:
        return self.type.startswith("x-")

    @property
    def is_vendor(self) -> bool:
        return self.type.startswith("vnd.")


# --- Pydantic schemas ---

class ResolvedMimeRead(BaseModel):
    name: str
    extension: str
    mime: str
    media: str
    type: str
    experimental: bool
    vendor: bool
    other_extensions: list[str]


class ExtensionMimeRead(BaseModel):
    extension: str
    mime: str


class MimeExtensionsRead(BaseModel):
    mime: str
    extensions: list[str]
