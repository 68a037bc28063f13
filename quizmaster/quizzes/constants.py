from __future__ import annotations

MIN_QUESTIONS_PER_QUIZ = 1
MAX_QUESTIONS_PER_QUIZ = 25
MAX_TOPIC_LENGTH = 150
ANSWERS_PER_QUESTION = 4

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_NUMBER = 2_147_483_647
MAX_PAGE_SIZE = 2_147_483_647

# Integer primary keys; larger ids cannot be bound as query parameters.
MAX_ENTITY_ID = 2_147_483_647

ERROR_CODE_VALIDATION = "E_VALIDATION"
ERROR_CODE_NOT_FOUND = "E_NOT_FOUND"
ERROR_CODE_THIRD_PARTY_REQUEST = "E_THIRD_PARTY_REQUEST"

THIRD_PARTY_REQUEST_MESSAGE = "Error while asking the quiz generation API."
QUIZ_NOT_FOUND_MESSAGE = "Quiz not found or you have no access to this quiz."
QUESTION_NOT_FOUND_MESSAGE = "Question not found or you have no access to this question."
