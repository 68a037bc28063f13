"""m1_quizzes_questions_answers

Revision ID: 3c1d9e7a2b40
Revises:
Create Date: 2026-10-19 10:00:00.000000
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "3c1d9e7a2b40"
down_revision: str | None = None
branch_labels: Sequence[str] | None = None
depends_on: Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "quizzes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("topic", sa.String(length=150), nullable=False),
        sa.Column("difficulty", sa.SmallInteger(), nullable=False),
        sa.Column("number_of_questions", sa.Integer(), nullable=False),
        sa.CheckConstraint(
            "difficulty >= 1 AND difficulty <= 3",
            name="ck_quizzes_difficulty_range",
        ),
        sa.CheckConstraint(
            "number_of_questions >= 1 AND number_of_questions <= 25",
            name="ck_quizzes_number_of_questions_range",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_quizzes"),
    )
    op.create_index("idx_quizzes_user_id", "quizzes", ["user_id", "id"])

    op.create_table(
        "questions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("quiz_id", sa.Integer(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(
            ["quiz_id"],
            ["quizzes.id"],
            name="fk_questions_quiz_id_quizzes",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_questions"),
    )
    op.create_index("idx_questions_quiz_id", "questions", ["quiz_id"])

    op.create_table(
        "answers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("question_id", sa.Integer(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("is_correct", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(
            ["question_id"],
            ["questions.id"],
            name="fk_answers_question_id_questions",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_answers"),
    )
    op.create_index("idx_answers_question_id", "answers", ["question_id"])


def downgrade() -> None:
    op.drop_index("idx_answers_question_id", table_name="answers")
    op.drop_table("answers")
    op.drop_index("idx_questions_quiz_id", table_name="questions")
    op.drop_table("questions")
    op.drop_index("idx_quizzes_user_id", table_name="quizzes")
    op.drop_table("quizzes")
