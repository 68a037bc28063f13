from __future__ import annotations

from quizmaster.quizzes.types import (
    AnswerInput,
    CreateQuizCommand,
    DeleteQuestionCommand,
    DeleteQuizCommand,
    GetQuizzesQuery,
    UpdateQuestionCommand,
    UpdateTitleCommand,
)
from quizmaster.quizzes.validation import (
    validate_create_quiz,
    validate_delete_question,
    validate_delete_quiz,
    validate_get_quizzes,
    validate_update_question,
    validate_update_title,
)


def _create(**overrides: object) -> CreateQuizCommand:
    values: dict[str, object] = {
        "title": "Capitals",
        "topic": "World Capitals",
        "difficulty": 1,
        "number_of_questions": 5,
    }
    values.update(overrides)
    return CreateQuizCommand(**values)


def test_validate_create_quiz_accepts_valid_command() -> None:
    assert validate_create_quiz(_create()) == []
    assert validate_create_quiz(_create(difficulty=3, number_of_questions=25)) == []
    assert validate_create_quiz(_create(number_of_questions=1)) == []


def test_validate_create_quiz_rejects_each_rule() -> None:
    assert validate_create_quiz(_create(title="   ")) == ["Title must not be empty."]
    assert validate_create_quiz(_create(topic="")) == ["Topic must not be empty."]
    assert validate_create_quiz(_create(topic="x" * 151)) == [
        "Topic must be at most 150 characters."
    ]
    assert len(validate_create_quiz(_create(difficulty=0))) == 1
    assert len(validate_create_quiz(_create(difficulty=4))) == 1
    assert len(validate_create_quiz(_create(number_of_questions=0))) == 1
    assert len(validate_create_quiz(_create(number_of_questions=26))) == 1


def test_validate_create_quiz_collects_all_problems() -> None:
    problems = validate_create_quiz(
        _create(title="", topic="", difficulty=9, number_of_questions=-1)
    )
    assert len(problems) == 4


def test_validate_get_quizzes_requires_positive_paging() -> None:
    assert validate_get_quizzes(GetQuizzesQuery()) == []
    assert validate_get_quizzes(GetQuizzesQuery(page_number=0, page_size=10)) == [
        "PageNumber must be greater than or equal to 1."
    ]
    assert validate_get_quizzes(GetQuizzesQuery(page_number=1, page_size=0)) == [
        "PageSize must be greater than or equal to 1."
    ]


def test_validate_get_quizzes_caps_paging() -> None:
    assert validate_get_quizzes(GetQuizzesQuery(page_number=2**31 - 1, page_size=2**31 - 1)) == []
    assert validate_get_quizzes(GetQuizzesQuery(page_number=2**63, page_size=2**31)) == [
        "PageNumber must be less than or equal to 2147483647.",
        "PageSize must be less than or equal to 2147483647.",
    ]


def test_validate_update_title() -> None:
    assert validate_update_title(UpdateTitleCommand(quiz_id=1, title="New")) == []
    assert validate_update_title(UpdateTitleCommand(quiz_id=0, title="New")) == [
        "Quiz id must be greater than 0."
    ]
    assert validate_update_title(UpdateTitleCommand(quiz_id=3, title=" ")) == [
        "Title must not be empty."
    ]


def test_validate_update_question_requires_exactly_one_correct_answer() -> None:
    one_correct = [AnswerInput("A", True), AnswerInput("B", False)]
    two_correct = [AnswerInput("A", True), AnswerInput("B", True)]
    none_correct = [AnswerInput("A", False), AnswerInput("B", False)]

    assert validate_update_question(UpdateQuestionCommand(1, "Q?", one_correct)) == []
    assert validate_update_question(UpdateQuestionCommand(1, "Q?", two_correct)) == [
        "Exactly one answer must be marked as correct."
    ]
    assert validate_update_question(UpdateQuestionCommand(1, "Q?", none_correct)) == [
        "Exactly one answer must be marked as correct."
    ]


def test_validate_update_question_rejects_empty_text_and_answers() -> None:
    assert validate_update_question(UpdateQuestionCommand(1, "", [])) == [
        "Text must not be empty.",
        "Answers must not be empty.",
    ]
    assert validate_update_question(
        UpdateQuestionCommand(1, "Q?", [AnswerInput(" ", True)])
    ) == ["Answer text must not be empty."]


def test_validate_delete_commands_require_positive_ids() -> None:
    assert validate_delete_quiz(DeleteQuizCommand(quiz_id=5)) == []
    assert validate_delete_quiz(DeleteQuizCommand(quiz_id=0)) != []
    assert validate_delete_question(DeleteQuestionCommand(question_id=5)) == []
    assert validate_delete_question(DeleteQuestionCommand(question_id=-2)) != []
