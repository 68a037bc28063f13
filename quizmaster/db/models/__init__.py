from quizmaster.db.models.answers import Answer
from quizmaster.db.models.questions import Question
from quizmaster.db.models.quizzes import Quiz

__all__ = [
    "Answer",
    "Question",
    "Quiz",
]
