from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse

from quizmaster.api.routes.results import CamelModel, ErrorResponse, error_response
from quizmaster.quizzes.constants import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE
from quizmaster.quizzes.generator import QuizGenerator, get_quiz_generator
from quizmaster.quizzes.registry import dispatch
from quizmaster.quizzes.types import (
    CreateQuizCommand,
    DeleteQuizCommand,
    GetQuizDetailsQuery,
    GetQuizzesQuery,
    HandlerContext,
    Page,
    QuizDetails,
    QuizSummary,
    UpdateTitleCommand,
)
from quizmaster.services.current_user import get_current_user_id

router = APIRouter(tags=["quizzes"])

ERROR_RESPONSES = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


class CreateQuizRequest(CamelModel):
    title: str
    topic: str
    difficulty: int
    number_of_questions: int


class CreateQuizResponse(CamelModel):
    id: int


class QuizSummaryResponse(CamelModel):
    id: int
    title: str
    topic: str
    difficulty: int
    number_of_questions: int


class QuizListResponse(CamelModel):
    items: list[QuizSummaryResponse]
    page_number: int
    total_pages: int
    total_count: int
    has_previous_page: bool
    has_next_page: bool


class AnswerResponse(CamelModel):
    id: int
    text: str
    is_correct: bool


class QuestionResponse(CamelModel):
    id: int
    text: str
    answers: list[AnswerResponse]


class QuizDetailsResponse(CamelModel):
    id: int
    title: str
    topic: str
    difficulty: int
    number_of_questions: int
    questions: list[QuestionResponse]


class UpdateTitleRequest(CamelModel):
    title: str


def _summary_as_response(summary: QuizSummary) -> QuizSummaryResponse:
    return QuizSummaryResponse(
        id=summary.id,
        title=summary.title,
        topic=summary.topic,
        difficulty=summary.difficulty,
        number_of_questions=summary.number_of_questions,
    )


def _page_as_response(page: Page[QuizSummary]) -> QuizListResponse:
    return QuizListResponse(
        items=[_summary_as_response(item) for item in page.items],
        page_number=page.page_number,
        total_pages=page.total_pages,
        total_count=page.total_count,
        has_previous_page=page.has_previous_page,
        has_next_page=page.has_next_page,
    )


def _details_as_response(details: QuizDetails) -> QuizDetailsResponse:
    return QuizDetailsResponse(
        id=details.id,
        title=details.title,
        topic=details.topic,
        difficulty=details.difficulty,
        number_of_questions=details.number_of_questions,
        questions=[
            QuestionResponse(
                id=question.id,
                text=question.text,
                answers=[
                    AnswerResponse(id=answer.id, text=answer.text, is_correct=answer.is_correct)
                    for answer in question.answers
                ],
            )
            for question in details.questions
        ],
    )


@router.post(
    "/quizzes",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateQuizResponse,
    responses=ERROR_RESPONSES,
)
async def create_quiz(
    payload: CreateQuizRequest,
    response: Response,
    user_id: UUID = Depends(get_current_user_id),
    generator: QuizGenerator = Depends(get_quiz_generator),
) -> CreateQuizResponse | JSONResponse:
    result = await dispatch(
        CreateQuizCommand(
            title=payload.title,
            topic=payload.topic,
            difficulty=payload.difficulty,
            number_of_questions=payload.number_of_questions,
        ),
        HandlerContext(user_id=user_id, generator=generator),
    )
    if not result.is_success:
        return error_response(result.error)

    response.headers["Location"] = f"/quizzes/{result.value}"
    return CreateQuizResponse(id=result.value)


@router.get("/quizzes", response_model=QuizListResponse, responses=ERROR_RESPONSES)
async def list_quizzes(
    page_number: int = Query(default=DEFAULT_PAGE_NUMBER, alias="pageNumber"),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, alias="pageSize"),
    user_id: UUID = Depends(get_current_user_id),
) -> QuizListResponse | JSONResponse:
    result = await dispatch(
        GetQuizzesQuery(page_number=page_number, page_size=page_size),
        HandlerContext(user_id=user_id),
    )
    if not result.is_success:
        return error_response(result.error)
    return _page_as_response(result.value)


@router.get(
    "/quizzes/{quiz_id}",
    response_model=QuizDetailsResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_quiz_details(
    quiz_id: int,
    user_id: UUID = Depends(get_current_user_id),
) -> QuizDetailsResponse | JSONResponse:
    result = await dispatch(GetQuizDetailsQuery(quiz_id=quiz_id), HandlerContext(user_id=user_id))
    if not result.is_success:
        return error_response(result.error, status_code=status.HTTP_404_NOT_FOUND)
    return _details_as_response(result.value)


@router.patch(
    "/quizzes/{quiz_id}/title",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=ERROR_RESPONSES,
)
async def update_quiz_title(
    quiz_id: int,
    payload: UpdateTitleRequest,
    user_id: UUID = Depends(get_current_user_id),
) -> Response:
    result = await dispatch(
        UpdateTitleCommand(quiz_id=quiz_id, title=payload.title),
        HandlerContext(user_id=user_id),
    )
    if not result.is_success:
        return error_response(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/quizzes/{quiz_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=ERROR_RESPONSES,
)
async def delete_quiz(
    quiz_id: int,
    user_id: UUID = Depends(get_current_user_id),
) -> Response:
    result = await dispatch(DeleteQuizCommand(quiz_id=quiz_id), HandlerContext(user_id=user_id))
    if not result.is_success:
        return error_response(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
