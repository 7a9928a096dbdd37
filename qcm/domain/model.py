import math
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple, Union


@dataclass(frozen=True)
class Single:
    index: int


@dataclass(frozen=True)
class Multiple:
    # порядок з файлу зберігається для відповіді клієнту, порівняння — як множини
    indices: Tuple[int, ...]

    def as_set(self) -> frozenset:
        return frozenset(self.indices)


@dataclass(frozen=True)
class Unsupported:
    raw: Any


AnswerValue = Union[Single, Multiple]
StoredAnswer = Union[Single, Multiple, Unsupported]


def _is_number(value: Any) -> bool:
    # bool у Python — підклас int, але в JSON це не число
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_non_finite(value: Any) -> bool:
    """inf/nan: json.loads і pydantic приймають 1e400, NaN, Infinity."""
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, (list, tuple)):
        return any(is_non_finite(v) for v in value)
    return False


def parse_answer(raw: Any) -> StoredAnswer:
    """
    Перетворює декодоване JSON-значення на тегований варіант.

    - число -> Single (дробова частина відкидається)
    - масив -> Multiple з числових елементів, решта пропускається
    - нескінченні числа або NaN (і масиви з ними) -> Unsupported
    - будь-що інше -> Unsupported
    """
    if is_non_finite(raw):
        return Unsupported(raw)
    if _is_number(raw):
        return Single(int(raw))
    if isinstance(raw, (list, tuple)):
        return Multiple(tuple(int(v) for v in raw if _is_number(v)))
    return Unsupported(raw)


def answer_to_json(value: StoredAnswer) -> Any:
    if isinstance(value, Single):
        return value.index
    if isinstance(value, Multiple):
        return list(value.indices)
    return value.raw


def answer_kind(value: StoredAnswer) -> str:
    if isinstance(value, Single):
        return "single"
    if isinstance(value, Multiple):
        return "multiple"
    return "unsupported"


@dataclass(frozen=True)
class Question:
    id: int
    text: str
    options: Tuple[str, ...]
    correct: StoredAnswer
    # значення "correct" з файлу як є, віддається клієнту без нормалізації
    correct_json: Any = field(default=None, compare=False)

    def public_correct(self) -> Any:
        if self.correct_json is not None:
            return self.correct_json
        return answer_to_json(self.correct)


@dataclass(frozen=True)
class QuizBank:
    title: str
    questions: Tuple[Question, ...]

    def find(self, question_id: int) -> Optional[Question]:
        for q in self.questions:
            if q.id == question_id:
                return q
        return None


@dataclass(frozen=True)
class Submission:
    question_id: int
    answer: StoredAnswer


@dataclass(frozen=True)
class ValidationResult:
    correct: bool
    correct_answer: StoredAnswer
    correct_answer_json: Any = field(default=None, compare=False)


@dataclass(frozen=True)
class Selection:
    questions: Tuple[Question, ...]
    total: int
