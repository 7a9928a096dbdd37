import random
from typing import Optional

from ..domain.model import QuizBank, Selection


def parse_limit(raw: Optional[str]) -> Optional[int]:
    """Значення `count` з query-рядка; все, що не є цілим числом, означає «без ліміту»."""
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def select_questions(
    bank: QuizBank,
    shuffle: bool = False,
    limit: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Selection:
    """
    Повертає копію питань банку, за потреби перемішану та обрізану.

    Банк не змінюється. Для перемішування кожен виклик отримує власний
    генератор, засіяний з ентропії ОС, тож паралельні запити не ділять стан.
    `limit` <= 0 або >= кількості питань ігнорується.
    """
    questions = list(bank.questions)

    if shuffle:
        (rng or random.Random()).shuffle(questions)

    if limit is not None and 0 < limit < len(questions):
        questions = questions[:limit]

    return Selection(questions=tuple(questions), total=len(questions))
