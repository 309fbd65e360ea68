import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from skillswap.schemas.base import BaseResponseModel

logger = logging.getLogger(__name__)


class SkillSwapError(Exception):
    """Base class for failures that map onto an error response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthenticationRequired(SkillSwapError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class AuthorizationDenied(SkillSwapError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Unauthorized"


class ValidationFailed(SkillSwapError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"


class NotFound(SkillSwapError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


def error_response(code: int, error: str, message: str = "Request failed", headers: dict = None) -> JSONResponse:
    body = BaseResponseModel(success=False, code=code, message=message, error=error)
    return JSONResponse(status_code=code, content=jsonable_encoder(body), headers=headers)


def _describe_validation_errors(errors) -> str:
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    if location:
        return f"{location}: {first.get('msg')}"
    return str(first.get("msg"))


async def skillswap_error_handler(request: Request, exc: SkillSwapError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationRequired) else None
    return error_response(exc.status_code, exc.message, headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_errors(exc.errors()), "Validation failed")


async def model_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_errors(exc.errors()), "Validation failed")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SkillSwapError, skillswap_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, model_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
