from __future__ import annotations

import structlog

from quizmaster.db.repo.questions_repo import QuestionsRepo
from quizmaster.db.repo.quizzes_repo import QuizzesRepo
from quizmaster.db.session import SessionLocal
from quizmaster.quizzes.constants import QUESTION_NOT_FOUND_MESSAGE, QUIZ_NOT_FOUND_MESSAGE
from quizmaster.quizzes.errors import QuestionNotFoundError, QuizNotFoundError
from quizmaster.quizzes.types import (
    DeleteQuestionCommand,
    DeleteQuizCommand,
    Error,
    HandlerContext,
    Result,
    UpdateQuestionCommand,
    UpdateTitleCommand,
)
from quizmaster.quizzes.validation import (
    validate_delete_question,
    validate_delete_quiz,
    validate_update_question,
    validate_update_title,
)

logger = structlog.get_logger(__name__)


async def handle_update_title(command: UpdateTitleCommand, context: HandlerContext) -> Result[None]:
    problems = validate_update_title(command)
    if problems:
        return Result.failure(Error.validation("; ".join(problems)))

    try:
        async with SessionLocal.begin() as session:
            await QuizzesRepo.update_title(
                session,
                user_id=context.user_id,
                quiz_id=command.quiz_id,
                title=command.title.strip(),
            )
    except QuizNotFoundError:
        return Result.failure(Error.not_found(QUIZ_NOT_FOUND_MESSAGE))

    logger.info("quiz_title_updated", user_id=str(context.user_id), quiz_id=command.quiz_id)
    return Result.success()


async def handle_delete_quiz(command: DeleteQuizCommand, context: HandlerContext) -> Result[None]:
    problems = validate_delete_quiz(command)
    if problems:
        return Result.failure(Error.validation("; ".join(problems)))

    try:
        async with SessionLocal.begin() as session:
            await QuizzesRepo.delete(session, user_id=context.user_id, quiz_id=command.quiz_id)
    except QuizNotFoundError:
        return Result.failure(Error.not_found(QUIZ_NOT_FOUND_MESSAGE))

    logger.info("quiz_deleted", user_id=str(context.user_id), quiz_id=command.quiz_id)
    return Result.success()


async def handle_update_question(
    command: UpdateQuestionCommand,
    context: HandlerContext,
) -> Result[int]:
    logger.info(
        "question_update_started",
        user_id=str(context.user_id),
        question_id=command.question_id,
    )
    problems = validate_update_question(command)
    if problems:
        return Result.failure(Error.validation("; ".join(problems)))

    try:
        async with SessionLocal.begin() as session:
            question = await QuestionsRepo.replace(
                session,
                user_id=context.user_id,
                question_id=command.question_id,
                text=command.text.strip(),
                answers=command.answers,
            )
            question_id = question.id
    except QuestionNotFoundError:
        return Result.failure(Error.not_found(QUESTION_NOT_FOUND_MESSAGE))

    logger.info(
        "question_updated",
        user_id=str(context.user_id),
        question_id=question_id,
        answers_total=len(command.answers),
    )
    return Result.success(question_id)


async def handle_delete_question(
    command: DeleteQuestionCommand,
    context: HandlerContext,
) -> Result[None]:
    problems = validate_delete_question(command)
    if problems:
        return Result.failure(Error.validation("; ".join(problems)))

    try:
        async with SessionLocal.begin() as session:
            await QuestionsRepo.delete(
                session,
                user_id=context.user_id,
                question_id=command.question_id,
            )
    except QuestionNotFoundError:
        return Result.failure(Error.not_found(QUESTION_NOT_FOUND_MESSAGE))

    logger.info(
        "question_deleted",
        user_id=str(context.user_id),
        question_id=command.question_id,
    )
    return Result.success()
