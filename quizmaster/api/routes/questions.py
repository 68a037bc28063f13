from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from quizmaster.api.routes.results import CamelModel, ErrorResponse, error_response
from quizmaster.quizzes.registry import dispatch
from quizmaster.quizzes.types import (
    AnswerInput,
    DeleteQuestionCommand,
    Error,
    HandlerContext,
    UpdateQuestionCommand,
)
from quizmaster.services.current_user import get_current_user_id

router = APIRouter(tags=["questions"])

ERROR_RESPONSES = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


class UpdateAnswerRequest(CamelModel):
    text: str
    is_correct: bool


class UpdateQuestionRequest(CamelModel):
    id: int
    text: str
    answers: list[UpdateAnswerRequest]


class UpdateQuestionResponse(CamelModel):
    id: int


@router.put(
    "/questions/{question_id}",
    response_model=UpdateQuestionResponse,
    responses=ERROR_RESPONSES,
)
async def update_question(
    question_id: int,
    payload: UpdateQuestionRequest,
    user_id: UUID = Depends(get_current_user_id),
) -> UpdateQuestionResponse | JSONResponse:
    if payload.id != question_id:
        return error_response(Error.validation("Mismatched question ID."))

    result = await dispatch(
        UpdateQuestionCommand(
            question_id=question_id,
            text=payload.text,
            answers=[
                AnswerInput(text=answer.text, is_correct=answer.is_correct)
                for answer in payload.answers
            ],
        ),
        HandlerContext(user_id=user_id),
    )
    if not result.is_success:
        return error_response(result.error)
    return UpdateQuestionResponse(id=result.value)


@router.delete(
    "/questions/{question_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=ERROR_RESPONSES,
)
async def delete_question(
    question_id: int,
    user_id: UUID = Depends(get_current_user_id),
) -> Response:
    result = await dispatch(
        DeleteQuestionCommand(question_id=question_id),
        HandlerContext(user_id=user_id),
    )
    if not result.is_success:
        return error_response(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
