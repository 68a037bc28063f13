from __future__ import annotations

from functools import lru_cache
from typing import Any

import structlog
from openai import AsyncOpenAI, OpenAIError

from quizmaster.core.config import get_settings
from quizmaster.quizzes.errors import GenerationError

logger = structlog.get_logger(__name__)

QUIZ_SCHEMA_NAME = "quiz_questions_schema"

SYSTEM_PROMPT = (
    "You are a helpful assistant specialized in generating structured quizzes. "
    "Your task is to create a collection of quiz questions and their corresponding answers "
    "based on the provided information:\n\n"
    "- **Quiz Title**: The title of the quiz.\n"
    "- **Topic**: The subject or topic the quiz focuses on.\n"
    "- **Number of Questions**: The number of questions to include in the quiz.\n"
    "- **Difficulty Level**: A scale from 1 to 3 where:\n"
    "  - 1 = Easy\n"
    "  - 2 = Medium\n"
    "  - 3 = Hard\n\n"
    "**Instructions:**\n"
    "1. Generate questions that align closely with the provided topic and difficulty level. "
    "Do not create questions outside the given topic.\n"
    "2. Each question must include **4 answers**:\n"
    "   - Exactly one correct answer.\n"
    "   - Three plausible but incorrect answers.\n"
    "3. The format of your response is strictly defined and will be provided. "
    "Do not deviate from this format.\n"
    "4. Avoid making up incorrect facts or hallucinating. All content must be realistic, "
    "logical, and appropriate for the specified difficulty level.\n\n"
    "Focus on clarity, accuracy, and relevance for each question and answer. "
    "Ensure that the generated quiz is engaging, educational, and suitable for the "
    "provided difficulty level."
)

QUIZ_JSON_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "questions": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "text": {"type": "string"},
                    "answers": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "text": {"type": "string"},
                                "isCorrect": {"type": "boolean"},
                            },
                            "required": ["text", "isCorrect"],
                            "additionalProperties": False,
                        },
                    },
                },
                "required": ["text", "answers"],
                "additionalProperties": False,
            },
        }
    },
    "required": ["questions"],
    "additionalProperties": False,
}


def build_user_prompt(*, topic: str, difficulty: int, number_of_questions: int) -> str:
    return (
        f"Generate a quiz about {topic}. Difficulty: {difficulty}. "
        f"Number of questions: {number_of_questions}."
    )


def build_response_format() -> dict[str, Any]:
    return {
        "type": "json_schema",
        "json_schema": {
            "name": QUIZ_SCHEMA_NAME,
            "strict": True,
            "schema": QUIZ_JSON_SCHEMA,
        },
    }


class QuizGenerator:
    """Single structured chat-completion call that drafts quiz questions.

    The call is made once; the provider client is built with retries disabled so
    a failure surfaces to the caller immediately as ``GenerationError``.
    """

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: float,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout_seconds = timeout_seconds
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                timeout=self._timeout_seconds,
                max_retries=0,
            )
        return self._client

    async def generate(self, *, topic: str, difficulty: int, number_of_questions: int) -> str:
        try:
            response = await self._get_client().chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {
                        "role": "user",
                        "content": build_user_prompt(
                            topic=topic,
                            difficulty=difficulty,
                            number_of_questions=number_of_questions,
                        ),
                    },
                ],
                response_format=build_response_format(),
            )
        except OpenAIError as exc:
            logger.warning(
                "quiz_generation_request_failed",
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise GenerationError(str(exc)) from exc

        if not response.choices:
            raise GenerationError("completion has no choices")

        message = response.choices[0].message
        refusal = getattr(message, "refusal", None)
        if refusal:
            logger.warning("quiz_generation_refused", refusal=refusal)
            raise GenerationError(f"completion refused: {refusal}")
        if not message.content:
            raise GenerationError("completion content is empty")
        return message.content


@lru_cache(maxsize=1)
def get_quiz_generator() -> QuizGenerator:
    settings = get_settings()
    return QuizGenerator(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        timeout_seconds=settings.openai_timeout_seconds,
    )
