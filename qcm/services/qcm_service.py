from typing import Any, Optional

from ..domain.model import Question, QuizBank, Submission, parse_answer
from .selection import parse_limit, select_questions
from .validation import validate_answer


def _question_out(q: Question) -> dict:
    return {
        "id": q.id,
        "question": q.text,
        "options": list(q.options),
        "correct": q.public_correct(),
    }


class QcmService:
    def __init__(self, bank: QuizBank) -> None:
        self.bank = bank

    def get_qcm(self, count: Optional[str] = None, random: Optional[str] = None) -> dict:
        selection = select_questions(
            self.bank,
            shuffle=random == "true",
            limit=parse_limit(count),
        )
        return {
            "title": self.bank.title,
            "questions": [_question_out(q) for q in selection.questions],
            "total": selection.total,
        }

    def check(self, question_id: int, answer: Any) -> dict:
        result = validate_answer(self.bank, Submission(question_id=question_id, answer=parse_answer(answer)))
        return {
            "correct": result.correct,
            "correctAnswer": result.correct_answer_json,
        }
