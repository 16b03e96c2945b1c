"""Serializes a question pair or a pipeline failure into an HTTP response."""

from __future__ import annotations

from typing import Union

from fastapi.responses import JSONResponse

from wyr.errors import ServiceError, WyrError
from wyr.models.question import ErrorResponse, QuestionPair


def emit(result: Union[QuestionPair, WyrError]) -> JSONResponse:
    if isinstance(result, QuestionPair):
        return JSONResponse(status_code=200, content=result.model_dump())

    body = ErrorResponse(message=result.message)
    if isinstance(result, ServiceError):
        body.details = result.detail
    return JSONResponse(
        status_code=result.status_code,
        content=body.model_dump(exclude_none=True),
    )
