"""
Standardized response utilities
"""

from typing import Any, Optional
from fastapi.responses import JSONResponse, Response

from app.core.errors import AppError
from app.schemas.common import ErrorResponse

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

def error_response(
    message: str,
    error_code: Optional[str] = None,
    details: Any = None,
    status_code: int = 400,
    headers: Optional[dict] = None
) -> JSONResponse:
    """Create standardized error response"""
    response = ErrorResponse(
        message=message,
        error_code=error_code,
        details=details
    )
    return JSONResponse(
        content=response.model_dump(),
        status_code=status_code,
        headers=headers
    )

def app_error_response(exc: AppError) -> JSONResponse:
    """Render an application error with its own status code"""
    return error_response(
        message=exc.message,
        error_code=exc.error_code,
        details=exc.details,
        status_code=exc.status_code
    )

def file_response(content: bytes, media_type: str, filename: str) -> Response:
    """Attachment download"""
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )

def xlsx_response(content: bytes, filename: str) -> Response:
    return file_response(content, XLSX_MEDIA_TYPE, filename)

def csv_response(text: str, filename: str) -> Response:
    return file_response(text.encode("utf-8"), "text/csv; charset=utf-8", filename)
