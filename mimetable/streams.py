"""Name providers consumed by the resolver.

A stream only has to say what it is called. Path-aware streams also know
their own base name; basic streams derive it from the raw name.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class NamedStream(Protocol):
    @property
    def stream_name(self) -> str: ...

    def basename(self) -> str: ...


@dataclass(frozen=True, slots=True)
class NameStream:
    """Stream known only by a path-like name."""

    name: str

    @property
    def stream_name(self) -> str:
        return self.name

    def basename(self) -> str:
        # Accept both separators and ignore trailing ones: "a\\b/" -> "b"
        name = self.name.replace("\\", "/").rstrip("/")
        return posixpath.basename(name)


@dataclass(frozen=True, slots=True)
class PathStream:
    """Stream backed by a filesystem path."""

    path: str | Path

    @property
    def stream_name(self) -> str:
        return str(self.path)

    def basename(self) -> str:
        return Path(self.path).name


def as_stream(subject: NamedStream | str | Path) -> NamedStream:
    """Wrap plain strings and paths so the resolver sees a NamedStream."""
    if isinstance(subject, Path):
        return PathStream(subject)
    if isinstance(subject, str):
        return NameStream(subject)
    return subject
