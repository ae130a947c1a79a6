"""
Response helpers shared by every router.

Success:  {"success": true, "data": ...}
Error:    {"success": false, "errors": [...], "title", "status", "method", "type"}

`type` carries the request path. Creation answers 201 with the stored
DTO itself, deletion answers 204 with no body.
"""

from typing import Annotated

from fastapi import Path, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from recruiting_api.domain import messages
from recruiting_api.notification import NotificationCollector
from recruiting_api.schemas import ErrorEnvelope, SuccessEnvelope
from recruiting_api.services.result import ResultKind, ServiceResult

_TITLES = {
    400: messages.INVALID_REQUEST,
    404: messages.NOT_FOUND_TITLE,
    500: messages.SERVER_ERROR_TITLE,
}

# Path ids must fit a signed 64-bit column
RecordId = Annotated[int, Path(ge=1, le=2**63 - 1)]


def success(data=None, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=SuccessEnvelope(data=jsonable_encoder(data)).model_dump(),
    )


def failure(request: Request, errors: list[str], status_code: int = 400) -> JSONResponse:
    envelope = ErrorEnvelope(
        errors=errors,
        title=_TITLES.get(status_code, messages.INVALID_REQUEST),
        status=status_code,
        method=request.method,
        type=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(envelope))


def not_found(request: Request, notifier: NotificationCollector) -> JSONResponse:
    notifier.handle(messages.RECORD_NOT_FOUND)
    return failure(request, notifier.get_notification(), 404)


def status_for(result: ServiceResult) -> int:
    """HTTP status for a failed result."""
    if result.kind is ResultKind.NOT_FOUND:
        return 404
    if result.kind is ResultKind.PERSISTENCE_FAILED and result.cause is not None:
        return 500
    return 400


def respond(request: Request, notifier: NotificationCollector, result: ServiceResult,
            data=None, status_code: int = 200) -> Response:
    """
    Turn a service result into a response.

    A successful parent with failed children still answers 400: anything
    left in the collector means the request did not fully go through.
    """
    if not result:
        errors = notifier.get_notification() or list(result.messages)
        return failure(request, errors, status_for(result))
    if notifier.is_notification():
        return failure(request, notifier.get_notification(), 400)

    if status_code == 204:
        return Response(status_code=204)
    if status_code == 201:
        return JSONResponse(status_code=201, content=jsonable_encoder(data))
    return success(data, status_code)
