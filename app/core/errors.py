import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class SessionError(Exception):
    """
    Error terminal de un request a /dialogflow/session/.
    Cada subclase define la clave del body y el status HTTP.
    """

    error_key = "error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(SessionError):
    error_key = "error1"
    status_code = 400


class IntentClientError(SessionError):
    error_key = "error2"
    status_code = 500


class IntentDetectionError(SessionError):
    error_key = "error3"
    status_code = 500


class CompletionError(SessionError):
    error_key = "error4"
    status_code = 502


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(SessionError)
    async def _session_error(request: Request, exc: SessionError):
        logger.warning(
            "Request failed",
            extra={
                "path": request.url.path,
                "error_key": exc.error_key,
                "status_code": exc.status_code,
                "error": exc.message,
            },
        )
        return JSONResponse(status_code=exc.status_code, content={exc.error_key: exc.message})
