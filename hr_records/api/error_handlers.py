"""Error Handlers — global exception handlers for APIs that accept HR records.

Invariants:
    - HrRecordsError → structured JSON with error code, message, severity
    - RequestValidationError → 400 with {fieldPath, errorKind, message} details
    - Rejected payload values are never echoed back

Design Decisions:
    - Request errors reuse the core classifier: one error vocabulary for body and record validation
    - No routes here; hosts mount their own endpoints and call register_error_handlers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hr_records.core.errors import ErrorSeverity, HrRecordsError
from hr_records.core.validate_record import field_errors_from

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_records_error_handler(app)
    _register_validation_error_handler(app)


def _register_records_error_handler(app: FastAPI) -> None:

    @app.exception_handler(HrRecordsError)
    async def records_error_handler(request: Request, exc: HrRecordsError):
        logger.warning(
            f"HrRecordsError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        details = [e.to_dict() for e in field_errors_from(_strip_body_prefix(exc.errors()))]
        logger.warning(
            f"Validation error on {request.url.path}: {len(details)} field(s)",
            extra={"error_count": len(details), "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Invalid request data",
                    "category": "validation",
                    "severity": ErrorSeverity.ERROR.value,
                    "details": details,
                },
            },
        )


def _strip_body_prefix(errors) -> list[dict]:
    """Body errors are located as ("body", field); report the field path only.

    Undecodable JSON is located at a character offset; it belongs to the whole record.
    """
    stripped = []
    for error in errors:
        loc = tuple(error["loc"])
        if error["type"] == "json_invalid":
            error = {**error, "loc": ()}
        elif loc[:1] == ("body",):
            error = {**error, "loc": loc[1:]}
        stripped.append(error)
    return stripped
