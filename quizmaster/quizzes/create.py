from __future__ import annotations

import structlog
from sqlalchemy.exc import SQLAlchemyError

from quizmaster.db.models.answers import Answer
from quizmaster.db.models.questions import Question
from quizmaster.db.models.quizzes import Quiz
from quizmaster.db.repo.quizzes_repo import QuizzesRepo
from quizmaster.db.session import SessionLocal
from quizmaster.quizzes.constants import THIRD_PARTY_REQUEST_MESSAGE
from quizmaster.quizzes.mapper import parse_questions
from quizmaster.quizzes.types import (
    CreateQuizCommand,
    Error,
    GeneratedQuestion,
    HandlerContext,
    Result,
)
from quizmaster.quizzes.validation import validate_create_quiz

logger = structlog.get_logger(__name__)


def build_quiz(
    command: CreateQuizCommand,
    *,
    context: HandlerContext,
    questions: list[GeneratedQuestion],
) -> Quiz:
    return Quiz(
        user_id=context.user_id,
        title=command.title.strip(),
        topic=command.topic.strip(),
        difficulty=command.difficulty,
        number_of_questions=command.number_of_questions,
        questions=[
            Question(
                text=question.text,
                answers=[
                    Answer(text=answer.text, is_correct=answer.is_correct)
                    for answer in question.answers
                ],
            )
            for question in questions
        ],
    )


async def handle_create_quiz(command: CreateQuizCommand, context: HandlerContext) -> Result[int]:
    logger.info("quiz_create_started", user_id=str(context.user_id), topic=command.topic)

    problems = validate_create_quiz(command)
    if problems:
        return Result.failure(Error.validation("; ".join(problems)))
    if context.generator is None:
        raise RuntimeError("quiz creation requires a generator in the handler context")

    try:
        raw_payload = await context.generator.generate(
            topic=command.topic.strip(),
            difficulty=command.difficulty,
            number_of_questions=command.number_of_questions,
        )
        questions = parse_questions(raw_payload)
    except Exception as exc:
        logger.error(
            "quiz_generation_failed",
            user_id=str(context.user_id),
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return Result.failure(Error.third_party_request(THIRD_PARTY_REQUEST_MESSAGE))

    if len(questions) != command.number_of_questions:
        logger.warning(
            "quiz_generation_count_mismatch",
            requested=command.number_of_questions,
            generated=len(questions),
        )

    try:
        async with SessionLocal.begin() as session:
            quiz = await QuizzesRepo.create(
                session,
                quiz=build_quiz(command, context=context, questions=questions),
            )
            quiz_id = quiz.id
    except SQLAlchemyError as exc:
        logger.error(
            "quiz_persist_failed",
            user_id=str(context.user_id),
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return Result.failure(Error.third_party_request(THIRD_PARTY_REQUEST_MESSAGE))

    logger.info(
        "quiz_created",
        user_id=str(context.user_id),
        quiz_id=quiz_id,
        questions_total=len(questions),
    )
    return Result.success(quiz_id)
