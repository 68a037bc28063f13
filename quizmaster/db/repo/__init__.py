from quizmaster.db.repo.questions_repo import QuestionsRepo
from quizmaster.db.repo.quizzes_repo import QuizPage, QuizzesRepo

__all__ = [
    "QuestionsRepo",
    "QuizPage",
    "QuizzesRepo",
]
