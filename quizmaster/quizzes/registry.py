from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from quizmaster.quizzes.create import handle_create_quiz
from quizmaster.quizzes.manage import (
    handle_delete_question,
    handle_delete_quiz,
    handle_update_question,
    handle_update_title,
)
from quizmaster.quizzes.queries import handle_get_quiz_details, handle_get_quizzes
from quizmaster.quizzes.types import (
    CreateQuizCommand,
    DeleteQuestionCommand,
    DeleteQuizCommand,
    GetQuizDetailsQuery,
    GetQuizzesQuery,
    HandlerContext,
    Result,
    UpdateQuestionCommand,
    UpdateTitleCommand,
)

Handler = Callable[[Any, HandlerContext], Awaitable[Result[Any]]]

HANDLERS: dict[type, Handler] = {
    CreateQuizCommand: handle_create_quiz,
    GetQuizzesQuery: handle_get_quizzes,
    GetQuizDetailsQuery: handle_get_quiz_details,
    UpdateTitleCommand: handle_update_title,
    DeleteQuizCommand: handle_delete_quiz,
    UpdateQuestionCommand: handle_update_question,
    DeleteQuestionCommand: handle_delete_question,
}


async def dispatch(command: object, context: HandlerContext) -> Result[Any]:
    handler = HANDLERS.get(type(command))
    if handler is None:
        raise LookupError(f"no handler registered for {type(command).__name__}")
    return await handler(command, context)
