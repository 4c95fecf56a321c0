import logging
from enum import Enum
from typing import Any, Dict, Tuple

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# ---------------------------
# Error kinds
# ---------------------------
class ErrorKind(Enum):
    VALIDATION = (400, "ValidationError")
    UNAUTHORIZED = (401, "UnauthorizedError")
    NOT_FOUND = (404, "NotFoundError")
    METHOD_NOT_ALLOWED = (405, "MethodNotAllowedError")
    SERVER = (500, "ServerError")
    # fallback for 4xx statuses without a kind of their own (403, 415, ...)
    CLIENT = (400, "ClientError")

    def __init__(self, status_code: int, type_name: str):
        self.status_code = status_code
        self.type_name = type_name

    @classmethod
    def from_status(cls, status_code: int) -> "ErrorKind":
        for kind in cls:
            if kind.status_code == status_code:
                return kind
        if 400 <= status_code < 500:
            return cls.CLIENT
        return cls.SERVER


class ApiError(Exception):
    """A failure the service knows how to report: a kind plus a message."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @classmethod
    def validation(cls, message: str) -> "ApiError":
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def not_found(cls, message: str = "Product not found") -> "ApiError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def unauthorized(cls, message: str = "Unauthorized") -> "ApiError":
        return cls(ErrorKind.UNAUTHORIZED, message)


# ---------------------------
# Translation
# ---------------------------
def error_body(kind: ErrorKind, message: str) -> Dict[str, Any]:
    return {"error": {"message": message, "type": kind.type_name}}


def translate(exc: Exception) -> Tuple[int, Dict[str, Any]]:
    """Map any exception raised while handling a request to (status, body)."""
    if isinstance(exc, ApiError):
        kind, message = exc.kind, exc.message
    elif isinstance(exc, RequestValidationError):
        kind, message = ErrorKind.VALIDATION, _describe_request_errors(exc)
    elif isinstance(exc, StarletteHTTPException):
        kind = ErrorKind.from_status(exc.status_code)
        message = str(exc.detail) if exc.detail else kind.type_name
        # keep the real status (e.g. 403, 415) even when the kind is generic
        return exc.status_code, error_body(kind, message)
    else:
        kind, message = ErrorKind.SERVER, "Internal Server Error"
    return kind.status_code, error_body(kind, message)


def _describe_request_errors(exc: RequestValidationError) -> str:
    for err in exc.errors():
        if err.get("type") == "json_invalid":
            return "Malformed JSON body"
        loc = err.get("loc", ())
        if loc and loc[0] == "body":
            return "Request body must be a JSON object"
    return "Invalid request"


async def _handle(request: Request, exc: Exception) -> JSONResponse:
    status_code, body = translate(exc)
    if status_code >= 500:
        logger.error("%s %s failed", request.method, request.url.path, exc_info=exc)
    else:
        logger.info("%s %s -> %s %s", request.method, request.url.path, status_code, body["error"]["message"])
    return JSONResponse(status_code=status_code, content=body)


async def catch_unhandled(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:
        return await _handle(request, exc)


def install_error_handlers(app: FastAPI) -> None:
    """Register the translators.  Call before adding CORSMiddleware: the
    catch-all middleware has to sit inside CORS so 500 bodies still get
    CORS headers.  The ``Exception`` handler below only sees failures from
    middleware outside it."""
    app.middleware("http")(catch_unhandled)
    app.add_exception_handler(ApiError, _handle)
    app.add_exception_handler(RequestValidationError, _handle)
    app.add_exception_handler(StarletteHTTPException, _handle)
    app.add_exception_handler(Exception, _handle)
