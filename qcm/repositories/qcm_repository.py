import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from ..domain.errors import LoadError, ParseError
from ..domain.model import Question, QuizBank, is_non_finite, parse_answer
from ..schemas.qcm_schemas import QcmFileIn

logger = logging.getLogger(__name__)


def parse_bank(raw: Union[str, bytes]) -> QuizBank:
    """
    Розбирає JSON-документ банку питань і відкидає некоректні питання
    (порожній текст після strip або id <= 0). Окремі погані питання не є
    помилкою, а от невалідна структура — ParseError.
    """
    try:
        doc = QcmFileIn.model_validate_json(raw)
    except ValidationError as e:
        raise ParseError(f"Invalid question bank: {e}") from e

    questions: List[Question] = []
    dropped = 0
    for q in doc.questions:
        if is_non_finite(q.correct):
            raise ParseError(f"Invalid question bank: non-finite number in question {q.id}")
        text = q.question.strip()
        if not text or q.id <= 0:
            dropped += 1
            continue
        questions.append(
            Question(
                id=q.id,
                text=q.question,
                options=tuple(q.options),
                correct=parse_answer(q.correct),
                correct_json=q.correct,
            )
        )

    if dropped:
        logger.warning("Skipped %d malformed question(s) in '%s'", dropped, doc.title)
    return QuizBank(title=doc.title, questions=tuple(questions))


class QcmRepository:
    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> QuizBank:
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise LoadError(f"Error reading {self.path}: {e}") from e

        bank = parse_bank(raw)
        logger.info("QCM loaded: %s with %d questions", bank.title, len(bank.questions))
        return bank
