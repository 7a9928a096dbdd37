from typing import Any


class QcmError(Exception):
    """Базова помилка QCM-сервера."""


class BankError(QcmError):
    """Банк питань непридатний — сервер не стартує."""


class LoadError(BankError):
    pass


class ParseError(BankError):
    pass


class NotFound(QcmError):
    def __init__(self, question_id: int) -> None:
        super().__init__(f"Question {question_id} not found")
        self.question_id = question_id


class FormatMismatch(QcmError):
    def __init__(self, expected: str, got: str) -> None:
        super().__init__(f"Expected a {expected} answer, got {got}")
        self.expected = expected
        self.got = got


class UnsupportedAnswerShape(QcmError):
    def __init__(self, question_id: int, raw: Any) -> None:
        super().__init__(f"Question {question_id} has an unsupported correct answer: {raw!r}")
        self.question_id = question_id
        self.raw = raw
