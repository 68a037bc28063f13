from __future__ import annotations

from quizmaster.db.models.quizzes import Quiz
from quizmaster.db.repo.quizzes_repo import QuizzesRepo
from quizmaster.db.session import SessionLocal
from quizmaster.quizzes.constants import QUIZ_NOT_FOUND_MESSAGE
from quizmaster.quizzes.errors import QuizNotFoundError
from quizmaster.quizzes.types import (
    AnswerDetails,
    Error,
    GetQuizDetailsQuery,
    GetQuizzesQuery,
    HandlerContext,
    Page,
    QuestionDetails,
    QuizDetails,
    QuizSummary,
    Result,
)
from quizmaster.quizzes.validation import validate_get_quizzes


def build_quiz_summary(quiz: Quiz) -> QuizSummary:
    return QuizSummary(
        id=quiz.id,
        title=quiz.title,
        topic=quiz.topic,
        difficulty=quiz.difficulty,
        number_of_questions=quiz.number_of_questions,
    )


def build_quiz_details(quiz: Quiz) -> QuizDetails:
    return QuizDetails(
        id=quiz.id,
        title=quiz.title,
        topic=quiz.topic,
        difficulty=quiz.difficulty,
        number_of_questions=len(quiz.questions),
        questions=[
            QuestionDetails(
                id=question.id,
                text=question.text,
                answers=[
                    AnswerDetails(id=answer.id, text=answer.text, is_correct=answer.is_correct)
                    for answer in question.answers
                ],
            )
            for question in quiz.questions
        ],
    )


async def handle_get_quizzes(
    query: GetQuizzesQuery,
    context: HandlerContext,
) -> Result[Page[QuizSummary]]:
    problems = validate_get_quizzes(query)
    if problems:
        return Result.failure(Error.validation("; ".join(problems)))

    async with SessionLocal() as session:
        page = await QuizzesRepo.get_page(
            session,
            user_id=context.user_id,
            page_number=query.page_number,
            page_size=query.page_size,
        )

    return Result.success(
        Page.build(
            items=[build_quiz_summary(quiz) for quiz in page.quizzes],
            page_number=query.page_number,
            page_size=query.page_size,
            total_count=page.total_count,
        )
    )


async def handle_get_quiz_details(
    query: GetQuizDetailsQuery,
    context: HandlerContext,
) -> Result[QuizDetails]:
    async with SessionLocal() as session:
        try:
            quiz = await QuizzesRepo.get_details(
                session,
                user_id=context.user_id,
                quiz_id=query.quiz_id,
            )
        except QuizNotFoundError:
            return Result.failure(Error.not_found(QUIZ_NOT_FOUND_MESSAGE))
        return Result.success(build_quiz_details(quiz))
