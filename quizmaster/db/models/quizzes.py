from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import CheckConstraint, Index, Integer, SmallInteger, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quizmaster.db.models.base import Base

if TYPE_CHECKING:
    from quizmaster.db.models.questions import Question


class Quiz(Base):
    __tablename__ = "quizzes"
    __table_args__ = (
        CheckConstraint("difficulty >= 1 AND difficulty <= 3", name="difficulty_range"),
        CheckConstraint(
            "number_of_questions >= 1 AND number_of_questions <= 25",
            name="number_of_questions_range",
        ),
        Index("idx_quizzes_user_id", "user_id", "id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    topic: Mapped[str] = mapped_column(String(150), nullable=False)
    difficulty: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    number_of_questions: Mapped[int] = mapped_column(Integer, nullable=False)

    questions: Mapped[list[Question]] = relationship(
        back_populates="quiz",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Question.id",
    )
