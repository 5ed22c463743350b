"""MIME lookup router — name, extension and MIME queries over the shared table."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from mimetable.dependencies import get_resolver
from mimetable.models.mime import ExtensionMimeRead, MimeExtensionsRead, ResolvedMimeRead
from mimetable.services.magic_table import MimeNotFoundError
from mimetable.services.resolver import MimeResolver

router = APIRouter(prefix="/api/mime", tags=["mime"])


@router.get("/resolve", response_model=ResolvedMimeRead)
def resolve_name(
    name: str = Query(..., min_length=1, max_length=1024),
    resolver: MimeResolver = Depends(get_resolver),
) -> ResolvedMimeRead:
    """Resolve the MIME of a file name from its last extension."""
    try:
        resolved = resolver.resolve(name)
    except MimeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    return ResolvedMimeRead(
        name=name,
        extension=resolved.extension,
        mime=resolved.mime,
        media=resolved.media,
        type=resolved.type,
        experimental=resolved.is_experimental,
        vendor=resolved.is_vendor,
        other_extensions=resolver.other_extensions_for(resolved),
    )


@router.get("/extensions/{extension}", response_model=ExtensionMimeRead)
def mime_for_extension(
    extension: str,
    resolver: MimeResolver = Depends(get_resolver),
) -> ExtensionMimeRead:
    mime = resolver.mime_from_extension(extension)
    if mime is None:
        raise HTTPException(status_code=404, detail=f"Unknown extension: {extension}")
    return ExtensionMimeRead(extension=extension, mime=mime)


@router.get("/types/{media}/{type}", response_model=MimeExtensionsRead)
def extensions_for_mime(
    media: str,
    type: str,
    resolver: MimeResolver = Depends(get_resolver),
) -> MimeExtensionsRead:
    mime = f"{media}/{type}"
    try:
        extensions = resolver.extensions_from_mime(mime)
    except MimeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return MimeExtensionsRead(mime=mime, extensions=extensions)
