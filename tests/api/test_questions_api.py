from __future__ import annotations

import pytest

from quizmaster.db.models import Answer, Question
from tests.api.api_fixtures import api_client
from tests.quiz_fixtures import auth_headers, count_rows, new_user_id, seed_quiz


def _question_body(question_id: int, **overrides: object) -> dict[str, object]:
    body: dict[str, object] = {
        "id": question_id,
        "text": "What is the capital of France?",
        "answers": [
            {"text": "Paris", "isCorrect": True},
            {"text": "Lyon", "isCorrect": False},
            {"text": "Nice", "isCorrect": False},
            {"text": "Lille", "isCorrect": False},
        ],
    }
    body.update(overrides)
    return body


@pytest.mark.asyncio
async def test_update_question_replaces_answers() -> None:
    user_id = new_user_id()
    headers = auth_headers(user_id)
    quiz = await seed_quiz(user_id, questions_total=1)
    question_id = quiz.questions[0].id

    async with api_client() as client:
        response = await client.put(
            f"/questions/{question_id}",
            json=_question_body(question_id),
            headers=headers,
        )
        details = await client.get(f"/quizzes/{quiz.id}", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"id": question_id}

    (question,) = details.json()["questions"]
    assert question["text"] == "What is the capital of France?"
    assert [(answer["text"], answer["isCorrect"]) for answer in question["answers"]] == [
        ("Paris", True),
        ("Lyon", False),
        ("Nice", False),
        ("Lille", False),
    ]
    assert await count_rows(Answer) == 4


@pytest.mark.asyncio
async def test_update_question_rejects_mismatched_id() -> None:
    user_id = new_user_id()
    quiz = await seed_quiz(user_id, questions_total=1)
    question_id = quiz.questions[0].id

    async with api_client() as client:
        response = await client.put(
            f"/questions/{question_id}",
            json=_question_body(question_id + 1),
            headers=auth_headers(user_id),
        )

    assert response.status_code == 400
    assert response.json() == {"code": "E_VALIDATION", "message": "Mismatched question ID."}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("answers", "message"),
    [
        (
            [{"text": "A", "isCorrect": True}, {"text": "B", "isCorrect": True}],
            "Exactly one answer must be marked as correct.",
        ),
        (
            [{"text": "A", "isCorrect": False}, {"text": "B", "isCorrect": False}],
            "Exactly one answer must be marked as correct.",
        ),
        ([], "Answers must not be empty."),
    ],
)
async def test_update_question_validates_answers(answers: list[dict[str, object]], message: str) -> None:
    user_id = new_user_id()
    quiz = await seed_quiz(user_id, questions_total=1)
    question_id = quiz.questions[0].id

    async with api_client() as client:
        response = await client.put(
            f"/questions/{question_id}",
            json=_question_body(question_id, answers=answers),
            headers=auth_headers(user_id),
        )

    assert response.status_code == 400
    assert response.json() == {"code": "E_VALIDATION", "message": message}
    assert await count_rows(Answer) == 2


@pytest.mark.asyncio
async def test_other_user_cannot_touch_question() -> None:
    quiz = await seed_quiz(new_user_id(), questions_total=1)
    question_id = quiz.questions[0].id
    intruder_headers = auth_headers(new_user_id())

    async with api_client() as client:
        update = await client.put(
            f"/questions/{question_id}",
            json=_question_body(question_id),
            headers=intruder_headers,
        )
        delete = await client.delete(f"/questions/{question_id}", headers=intruder_headers)

    assert update.status_code == 400
    assert update.json() == {
        "code": "E_NOT_FOUND",
        "message": "Question not found or you have no access to this question.",
    }
    assert delete.status_code == 400
    assert await count_rows(Question) == 1
    assert await count_rows(Answer) == 2


@pytest.mark.asyncio
async def test_delete_question_returns_204() -> None:
    user_id = new_user_id()
    headers = auth_headers(user_id)
    quiz = await seed_quiz(user_id, questions_total=2)
    doomed_id = quiz.questions[0].id

    async with api_client() as client:
        response = await client.delete(f"/questions/{doomed_id}", headers=headers)
        details = await client.get(f"/quizzes/{quiz.id}", headers=headers)

    assert response.status_code == 204
    remaining = details.json()["questions"]
    assert [question["id"] for question in remaining] == [quiz.questions[1].id]
    assert details.json()["numberOfQuestions"] == 1


@pytest.mark.asyncio
async def test_out_of_range_question_ids_are_not_found() -> None:
    headers = auth_headers(new_user_id())
    huge_id = 9_223_372_036_854_775_808

    async with api_client() as client:
        update = await client.put(f"/questions/{huge_id}", json=_question_body(huge_id), headers=headers)
        delete = await client.delete(f"/questions/{huge_id}", headers=headers)

    assert update.status_code == 400
    assert update.json()["code"] == "E_NOT_FOUND"
    assert delete.status_code == 400
    assert delete.json()["code"] == "E_NOT_FOUND"
