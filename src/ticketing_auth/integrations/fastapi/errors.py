"""Uniform error responses: every failure renders as ``{"errors": [...]}``."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ticketing_auth.core.schemas import ErrorItem, ErrorResponse
from ticketing_auth.utils.passwords import PasswordHashingError

logger = logging.getLogger("ticketing_auth.integrations.fastapi")


def _render(status_code: int, items: list[ErrorItem], headers: dict | None = None) -> JSONResponse:
    body = ErrorResponse(errors=items).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTPException, accepting either our dict detail or a plain string."""
    detail = exc.detail
    if isinstance(detail, dict):
        item = ErrorItem(
            message=str(detail.get("message", "")),
            code=detail.get("error"),
            field=detail.get("field"),
        )
    else:
        item = ErrorItem(message=str(detail))
    return _render(exc.status_code, [item], headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Missing or ill-typed body fields → 400 with one entry per field."""
    items = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        items.append(ErrorItem(
            message=err.get("msg", "Invalid value"),
            code="invalid_request",
            field=".".join(loc) or None,
        ))
    return _render(400, items)


async def hashing_error_handler(request: Request, exc: PasswordHashingError) -> JSONResponse:
    logger.error("Password hashing failed on %s %s", request.method, request.url.path, exc_info=exc)
    return _render(500, [ErrorItem(message="Something went wrong", code="internal_error")])


def install_error_handlers(app: FastAPI) -> None:
    """Register the uniform error handlers on an application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PasswordHashingError, hashing_error_handler)
