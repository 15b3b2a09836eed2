"""
Project export endpoints.
"""

from itertools import chain
from typing import Iterator

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response, StreamingResponse

from api.schemas.project import ProjectExportRequest
from manuscript.exceptions import RenderError, UnsupportedFormatError
from manuscript.export_service import ExportService
from config.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/exports", tags=["Exports"])


def _prime(body: Iterator[bytes]) -> Iterator[bytes]:
    """
    Pull the first chunk before the response starts.

    Engine failures surface here, while a 500 can still be sent.
    """
    first = next(body, b"")
    return chain([first], body)


@router.post("/{fmt}")
def export_project(fmt: str, request: ProjectExportRequest):
    """
    Export a project as PDF (streamed) or DOCX.

    Args:
        fmt: 'pdf' or 'docx'
        request: Fully hydrated project tree
    """
    project = request.to_project()
    service = ExportService()

    try:
        result = service.export(project, fmt)
        headers = {"Content-Disposition": f'attachment; filename="{result.filename}"'}

        if result.is_stream:
            return StreamingResponse(
                _prime(result.body),
                media_type=result.media_type,
                headers=headers
            )

        return Response(
            content=result.body,
            media_type=result.media_type,
            headers=headers
        )
    except UnsupportedFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RenderError as e:
        logger.error(f"Export error for '{project.name}': {e}")
        raise HTTPException(status_code=500, detail="Export failed")
