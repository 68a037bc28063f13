from __future__ import annotations

from quizmaster.quizzes.constants import (
    MAX_PAGE_NUMBER,
    MAX_PAGE_SIZE,
    MAX_QUESTIONS_PER_QUIZ,
    MAX_TOPIC_LENGTH,
    MIN_QUESTIONS_PER_QUIZ,
)
from quizmaster.quizzes.types import (
    CreateQuizCommand,
    DeleteQuestionCommand,
    DeleteQuizCommand,
    Difficulty,
    GetQuizzesQuery,
    UpdateQuestionCommand,
    UpdateTitleCommand,
)

DIFFICULTY_VALUES = frozenset(level.value for level in Difficulty)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_create_quiz(command: CreateQuizCommand) -> list[str]:
    problems: list[str] = []
    if _is_blank(command.title):
        problems.append("Title must not be empty.")
    if _is_blank(command.topic):
        problems.append("Topic must not be empty.")
    elif len(command.topic) > MAX_TOPIC_LENGTH:
        problems.append(f"Topic must be at most {MAX_TOPIC_LENGTH} characters.")
    if command.difficulty not in DIFFICULTY_VALUES:
        problems.append("Difficulty must be one of 1 (Easy), 2 (Medium), 3 (Hard).")
    if not MIN_QUESTIONS_PER_QUIZ <= command.number_of_questions <= MAX_QUESTIONS_PER_QUIZ:
        problems.append(
            f"NumberOfQuestions must be between {MIN_QUESTIONS_PER_QUIZ} "
            f"and {MAX_QUESTIONS_PER_QUIZ}."
        )
    return problems


def validate_get_quizzes(query: GetQuizzesQuery) -> list[str]:
    problems: list[str] = []
    if query.page_number < 1:
        problems.append("PageNumber must be greater than or equal to 1.")
    elif query.page_number > MAX_PAGE_NUMBER:
        problems.append(f"PageNumber must be less than or equal to {MAX_PAGE_NUMBER}.")
    if query.page_size < 1:
        problems.append("PageSize must be greater than or equal to 1.")
    elif query.page_size > MAX_PAGE_SIZE:
        problems.append(f"PageSize must be less than or equal to {MAX_PAGE_SIZE}.")
    return problems


def validate_update_title(command: UpdateTitleCommand) -> list[str]:
    problems: list[str] = []
    if command.quiz_id <= 0:
        problems.append("Quiz id must be greater than 0.")
    if _is_blank(command.title):
        problems.append("Title must not be empty.")
    return problems


def validate_delete_quiz(command: DeleteQuizCommand) -> list[str]:
    if command.quiz_id <= 0:
        return ["Quiz id must be greater than 0."]
    return []


def validate_update_question(command: UpdateQuestionCommand) -> list[str]:
    problems: list[str] = []
    if command.question_id <= 0:
        problems.append("Question id must be greater than 0.")
    if _is_blank(command.text):
        problems.append("Text must not be empty.")
    if not command.answers:
        problems.append("Answers must not be empty.")
        return problems
    if any(_is_blank(answer.text) for answer in command.answers):
        problems.append("Answer text must not be empty.")
    if sum(1 for answer in command.answers if answer.is_correct) != 1:
        problems.append("Exactly one answer must be marked as correct.")
    return problems


def validate_delete_question(command: DeleteQuestionCommand) -> list[str]:
    if command.question_id <= 0:
        return ["Question id must be greater than 0."]
    return []
