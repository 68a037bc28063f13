from __future__ import annotations

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from quizmaster.db.models.answers import Answer
from quizmaster.db.models.questions import Question
from quizmaster.db.repo.quizzes_repo import QuizzesRepo
from quizmaster.quizzes.constants import MAX_ENTITY_ID
from quizmaster.quizzes.errors import QuestionNotFoundError, QuizNotFoundError
from quizmaster.quizzes.types import AnswerInput


class QuestionsRepo:
    @staticmethod
    async def get_by_id(session: AsyncSession, question_id: int) -> Question | None:
        if not 0 < question_id <= MAX_ENTITY_ID:
            return None
        return await session.get(Question, question_id)

    @staticmethod
    async def assert_owned(session: AsyncSession, *, user_id: UUID, question_id: int) -> Question:
        question = await QuestionsRepo.get_by_id(session, question_id)
        if question is None:
            raise QuestionNotFoundError(question_id)
        try:
            await QuizzesRepo.assert_owned(session, user_id=user_id, quiz_id=question.quiz_id)
        except QuizNotFoundError as exc:
            raise QuestionNotFoundError(question_id) from exc
        return question

    @staticmethod
    async def replace(
        session: AsyncSession,
        *,
        user_id: UUID,
        question_id: int,
        text: str,
        answers: Sequence[AnswerInput],
    ) -> Question:
        question = await QuestionsRepo.assert_owned(
            session,
            user_id=user_id,
            question_id=question_id,
        )
        question.text = text
        await session.execute(delete(Answer).where(Answer.question_id == question.id))
        session.add_all(
            [
                Answer(question_id=question.id, text=answer.text, is_correct=answer.is_correct)
                for answer in answers
            ]
        )
        await session.flush()
        return question

    @staticmethod
    async def delete(session: AsyncSession, *, user_id: UUID, question_id: int) -> None:
        question = await QuestionsRepo.assert_owned(
            session,
            user_id=user_id,
            question_id=question_id,
        )
        await session.execute(delete(Answer).where(Answer.question_id == question.id))
        await session.execute(delete(Question).where(Question.id == question.id))
