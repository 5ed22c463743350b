from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from mimetable import __version__
from mimetable.dependencies import get_resolver
from mimetable.services.magic_table import MimeError
from mimetable.services.resolver import MimeResolver

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health(resolver: MimeResolver = Depends(get_resolver)):
    table = resolver.table
    return {
        "status": "healthy",
        "service": "mimetable",
        "version": __version__,
        "checks": {
            "magic_table": {
                "source": table.source,
                "mime_types": table.mime_count,
                "extensions": table.extension_count,
            },
        },
    }


@router.get("/health/ready")
def readiness():
    try:
        get_resolver()
    except MimeError as exc:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not ready",
                "service": "mimetable",
                "error": str(exc),
            },
        )

    return {
        "status": "ready",
        "service": "mimetable",
    }
