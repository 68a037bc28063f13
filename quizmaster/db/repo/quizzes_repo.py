from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from quizmaster.db.models.answers import Answer
from quizmaster.db.models.questions import Question
from quizmaster.db.models.quizzes import Quiz
from quizmaster.quizzes.constants import MAX_ENTITY_ID
from quizmaster.quizzes.errors import QuizNotFoundError


@dataclass(frozen=True, slots=True)
class QuizPage:
    quizzes: list[Quiz]
    total_count: int


class QuizzesRepo:
    @staticmethod
    async def create(session: AsyncSession, *, quiz: Quiz) -> Quiz:
        session.add(quiz)
        await session.flush()
        return quiz

    @staticmethod
    async def assert_owned(session: AsyncSession, *, user_id: UUID, quiz_id: int) -> Quiz:
        """Return the quiz when it exists and belongs to ``user_id``.

        Every read and mutation of a single quiz goes through here; a quiz owned by
        another user is reported exactly like a missing one.
        """
        if not 0 < quiz_id <= MAX_ENTITY_ID:
            raise QuizNotFoundError(quiz_id)
        stmt = select(Quiz).where(Quiz.id == quiz_id, Quiz.user_id == user_id)
        result = await session.execute(stmt)
        quiz = result.scalar_one_or_none()
        if quiz is None:
            raise QuizNotFoundError(quiz_id)
        return quiz

    @staticmethod
    async def count_for_user(session: AsyncSession, *, user_id: UUID) -> int:
        stmt = select(func.count(Quiz.id)).where(Quiz.user_id == user_id)
        return int(await session.scalar(stmt) or 0)

    @staticmethod
    async def get_page(
        session: AsyncSession,
        *,
        user_id: UUID,
        page_number: int,
        page_size: int,
    ) -> QuizPage:
        total_count = await QuizzesRepo.count_for_user(session, user_id=user_id)
        stmt = (
            select(Quiz)
            .where(Quiz.user_id == user_id)
            .order_by(Quiz.id.asc())
            .offset((page_number - 1) * page_size)
            .limit(page_size)
        )
        result = await session.execute(stmt)
        return QuizPage(quizzes=list(result.scalars().all()), total_count=total_count)

    @staticmethod
    async def get_details(session: AsyncSession, *, user_id: UUID, quiz_id: int) -> Quiz:
        quiz = await QuizzesRepo.assert_owned(session, user_id=user_id, quiz_id=quiz_id)
        stmt = (
            select(Quiz)
            .where(Quiz.id == quiz.id)
            .options(selectinload(Quiz.questions).selectinload(Question.answers))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one()

    @staticmethod
    async def update_title(
        session: AsyncSession,
        *,
        user_id: UUID,
        quiz_id: int,
        title: str,
    ) -> Quiz:
        quiz = await QuizzesRepo.assert_owned(session, user_id=user_id, quiz_id=quiz_id)
        quiz.title = title
        await session.flush()
        return quiz

    @staticmethod
    async def delete(session: AsyncSession, *, user_id: UUID, quiz_id: int) -> None:
        quiz = await QuizzesRepo.assert_owned(session, user_id=user_id, quiz_id=quiz_id)
        question_ids = select(Question.id).where(Question.quiz_id == quiz.id)
        await session.execute(delete(Answer).where(Answer.question_id.in_(question_ids)))
        await session.execute(delete(Question).where(Question.quiz_id == quiz.id))
        await session.execute(delete(Quiz).where(Quiz.id == quiz.id))
