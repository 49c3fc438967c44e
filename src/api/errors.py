"""Translation of domain errors into HTTP responses.

Registered on the app as exception handlers, so each failing request
gets exactly one response. The status code is chosen from the error's
``kind`` tag.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.models import ErrorResponse
from domain.model.errors import DataAccessError, DomainError, ErrorKind, ValidationError

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.DATA_ACCESS: 500,
}


def error_response(error: DomainError) -> JSONResponse:
    status_code = STATUS_BY_KIND.get(error.kind, 500)
    body = ErrorResponse(error=error.name, details=error.message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map a DomainError to 422/500 and log it."""
    context = {"path": request.url.path, "method": request.method, "errorKind": exc.kind.value}
    if exc.kind is ErrorKind.VALIDATION:
        logger.warning(f"Request rejected: {exc.message}", extra=context)
    else:
        logger.error(f"Request failed: {exc.message}", extra=context, exc_info=exc)
    return error_response(exc)


def _body_reason(err: dict) -> str:
    """One framework error entry as "<field>: <reason>".

    The leading "body" location is dropped; errors about the body as a
    whole are labelled "body".
    """
    if err['type'] == 'json_invalid':
        reason = f"invalid JSON ({err.get('ctx', {}).get('error', 'decode error')})"
        return f"body: {reason}"
    loc = tuple(err.get('loc', ()))
    if loc[:1] == ('body',):
        loc = loc[1:]
    loc = ".".join(str(part) for part in loc)
    msg = err['msg'][0].lower() + err['msg'][1:]
    return f"{loc or 'body'}: {msg}"


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Framework-level body errors (malformed JSON, a JSON array instead of an object)."""
    reasons = [_body_reason(err) for err in exc.errors()]
    return await domain_error_handler(request, ValidationError("; ".join(reasons)))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything that escaped the domain taxonomy still answers 500 with the envelope."""
    logger.error(
        f"Unhandled error: {exc}",
        extra={"path": request.url.path, "method": request.method, "errorKind": ErrorKind.DATA_ACCESS.value},
        exc_info=exc,
    )
    return error_response(DataAccessError(str(exc)))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    # Served by Starlette's ServerErrorMiddleware, which re-raises after responding
    app.add_exception_handler(Exception, unhandled_error_handler)
