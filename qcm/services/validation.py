import logging

from ..domain.errors import FormatMismatch, NotFound, UnsupportedAnswerShape
from ..domain.model import (
    Multiple,
    QuizBank,
    Single,
    StoredAnswer,
    Submission,
    ValidationResult,
    answer_kind,
)

logger = logging.getLogger(__name__)


def answers_match(correct: StoredAnswer, submitted: StoredAnswer) -> bool:
    """
    Порівнює відповідь користувача з правильною.

    Single — рівність індексів; Multiple — рівність множин (порядок і
    повтори не важливі). Різні теги -> FormatMismatch.
    """
    if isinstance(correct, Single):
        if not isinstance(submitted, Single):
            raise FormatMismatch("single", answer_kind(submitted))
        return submitted.index == correct.index

    if isinstance(correct, Multiple):
        if not isinstance(submitted, Multiple):
            raise FormatMismatch("multiple", answer_kind(submitted))
        return submitted.as_set() == correct.as_set()

    raise TypeError(f"Unsupported correct answer: {correct!r}")


def validate_answer(bank: QuizBank, submission: Submission) -> ValidationResult:
    question = bank.find(submission.question_id)
    if question is None:
        raise NotFound(submission.question_id)

    if not isinstance(question.correct, (Single, Multiple)):
        logger.error("Question %d has malformed correct answer: %r", question.id, question.correct)
        raise UnsupportedAnswerShape(question.id, question.correct.raw)

    return ValidationResult(
        correct=answers_match(question.correct, submission.answer),
        correct_answer=question.correct,
        correct_answer_json=question.public_correct(),
    )
