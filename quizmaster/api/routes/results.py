from __future__ import annotations

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from quizmaster.quizzes.types import Error


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    code: str
    message: str


def error_response(error: Error | None, *, status_code: int = status.HTTP_400_BAD_REQUEST) -> JSONResponse:
    if error is None:
        raise ValueError("error_response requires a failed result")
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(code=error.code, message=error.message).model_dump(),
    )
