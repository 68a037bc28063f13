from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError

from quizmaster.quizzes.errors import MalformedResponseError
from quizmaster.quizzes.types import GeneratedAnswer, GeneratedQuestion


class _CompletionAnswer(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: StrictStr = Field(min_length=1)
    is_correct: StrictBool = Field(alias="isCorrect")


class _CompletionQuestion(BaseModel):
    text: StrictStr = Field(min_length=1)
    answers: list[_CompletionAnswer] = Field(min_length=1)


class _CompletionPayload(BaseModel):
    questions: list[_CompletionQuestion] = Field(min_length=1)


def parse_questions(raw_payload: str) -> list[GeneratedQuestion]:
    """Turn the structured completion text into question/answer records.

    Raises ``MalformedResponseError`` when the payload is not JSON, holds no
    questions, a required field is missing, mistyped or blank, or a question
    does not have exactly one correct answer.
    """
    try:
        payload = _CompletionPayload.model_validate_json(raw_payload)
    except ValidationError as exc:
        raise MalformedResponseError(str(exc)) from exc

    questions: list[GeneratedQuestion] = []
    for position, question in enumerate(payload.questions, start=1):
        if not question.text.strip():
            raise MalformedResponseError(f"question {position} has empty text")
        if any(not answer.text.strip() for answer in question.answers):
            raise MalformedResponseError(f"question {position} has an answer with empty text")
        correct_total = sum(1 for answer in question.answers if answer.is_correct)
        if correct_total != 1:
            raise MalformedResponseError(
                f"question {position} has {correct_total} correct answers, expected exactly one"
            )
        questions.append(
            GeneratedQuestion(
                text=question.text,
                answers=[
                    GeneratedAnswer(text=answer.text, is_correct=answer.is_correct)
                    for answer in question.answers
                ],
            )
        )
    return questions
