class QuizError(Exception):
    pass


class GenerationError(QuizError):
    pass


class MalformedResponseError(QuizError):
    pass


class QuizNotFoundError(QuizError):
    pass


class QuestionNotFoundError(QuizError):
    pass
