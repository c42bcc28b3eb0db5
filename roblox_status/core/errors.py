from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

EMPTY_USER_LIST_MESSAGE = "Daftar pengguna kosong."
INVALID_CREDENTIAL_MESSAGE = "Cookie Roblox tidak valid atau tidak memiliki izin akses."
PRESENCE_FAILED_MESSAGE = "Gagal memuat status dari Roblox."
USER_NOT_FOUND_MESSAGE = "Pengguna tidak ditemukan di Roblox."
INVALID_REQUEST_MESSAGE = "Permintaan tidak valid."


class APIError(Exception):
    def __init__(self, *, status_code: int, code: str, message: str) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message
        super().__init__(message)


def error_response(*, status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def add_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(APIError)
    async def handle_api_error(request: Request, exc: APIError) -> JSONResponse:
        logger.info(
            "API error path=%s status=%s code=%s",
            request.url.path,
            exc.status_code,
            exc.code,
        )
        return error_response(status_code=exc.status_code, message=exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        logger.debug("Request validation failed path=%s errors=%s", request.url.path, errors)
        # Only an absent body means the caller sent no user list at all.
        if errors and all(error.get("type") == "missing" for error in errors):
            message = EMPTY_USER_LIST_MESSAGE
        else:
            message = INVALID_REQUEST_MESSAGE
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message=message)

    @app.exception_handler(HTTPException)
    async def handle_http_error(_: Request, exc: HTTPException) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return error_response(status_code=exc.status_code, message=message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error path=%s", request.url.path, exc_info=exc)
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="Internal server error",
        )
