from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Generic, Protocol, TypeVar
from uuid import UUID

from quizmaster.quizzes.constants import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    ERROR_CODE_NOT_FOUND,
    ERROR_CODE_THIRD_PARTY_REQUEST,
    ERROR_CODE_VALIDATION,
)

T = TypeVar("T")


class Difficulty(IntEnum):
    EASY = 1
    MEDIUM = 2
    HARD = 3


class StructuredQuizGenerator(Protocol):
    async def generate(self, *, topic: str, difficulty: int, number_of_questions: int) -> str: ...


@dataclass(frozen=True, slots=True)
class GeneratedAnswer:
    text: str
    is_correct: bool


@dataclass(frozen=True, slots=True)
class GeneratedQuestion:
    text: str
    answers: list[GeneratedAnswer]


@dataclass(frozen=True, slots=True)
class AnswerInput:
    text: str
    is_correct: bool


@dataclass(frozen=True, slots=True)
class CreateQuizCommand:
    title: str
    topic: str
    difficulty: int
    number_of_questions: int


@dataclass(frozen=True, slots=True)
class GetQuizzesQuery:
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True, slots=True)
class GetQuizDetailsQuery:
    quiz_id: int


@dataclass(frozen=True, slots=True)
class UpdateTitleCommand:
    quiz_id: int
    title: str


@dataclass(frozen=True, slots=True)
class DeleteQuizCommand:
    quiz_id: int


@dataclass(frozen=True, slots=True)
class UpdateQuestionCommand:
    question_id: int
    text: str
    answers: list[AnswerInput]


@dataclass(frozen=True, slots=True)
class DeleteQuestionCommand:
    question_id: int


@dataclass(frozen=True, slots=True)
class Error:
    code: str
    message: str

    @classmethod
    def validation(cls, message: str) -> Error:
        return cls(code=ERROR_CODE_VALIDATION, message=message)

    @classmethod
    def not_found(cls, message: str) -> Error:
        return cls(code=ERROR_CODE_NOT_FOUND, message=message)

    @classmethod
    def third_party_request(cls, message: str) -> Error:
        return cls(code=ERROR_CODE_THIRD_PARTY_REQUEST, message=message)


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """Outcome of a handler: either a value or an error, never both."""

    value: T | None = None
    error: Error | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: Error) -> Result[T]:
        return cls(error=error)


@dataclass(frozen=True, slots=True)
class QuizSummary:
    id: int
    title: str
    topic: str
    difficulty: int
    number_of_questions: int


@dataclass(frozen=True, slots=True)
class AnswerDetails:
    id: int
    text: str
    is_correct: bool


@dataclass(frozen=True, slots=True)
class QuestionDetails:
    id: int
    text: str
    answers: list[AnswerDetails] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class QuizDetails:
    id: int
    title: str
    topic: str
    difficulty: int
    number_of_questions: int
    questions: list[QuestionDetails] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    items: list[T]
    page_number: int
    total_pages: int
    total_count: int

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages

    @classmethod
    def build(cls, *, items: list[T], page_number: int, page_size: int, total_count: int) -> Page[T]:
        return cls(
            items=items,
            page_number=page_number,
            total_pages=math.ceil(total_count / page_size),
            total_count=total_count,
        )


@dataclass(frozen=True, slots=True)
class HandlerContext:
    user_id: UUID
    generator: StructuredQuizGenerator | None = None
