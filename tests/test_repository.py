import json

import pytest

from qcm.domain.errors import LoadError, ParseError
from qcm.domain.model import Multiple, Single, Unsupported
from qcm.repositories.qcm_repository import QcmRepository, parse_bank


def write_bank(path, doc):
    path.write_text(json.dumps(doc), encoding="utf-8")
    return path


def test_load_filters_malformed_questions(tmp_path):
    path = write_bank(
        tmp_path / "qcm.json",
        {
            "title": "T",
            "questions": [
                {"id": 0, "question": "  ", "options": ["a"], "correct": 0},
                {"id": 1, "question": "Q1", "options": ["a", "b"], "correct": 0},
            ],
        },
    )

    bank = QcmRepository(path).load()

    assert bank.title == "T"
    assert [q.id for q in bank.questions] == [1]
    assert bank.questions[0].correct == Single(0)
    assert bank.questions[0].options == ("a", "b")


def test_drops_blank_text_and_non_positive_ids_independently():
    bank = parse_bank(
        json.dumps(
            {
                "title": "T",
                "questions": [
                    {"id": 5, "question": "\t\n", "correct": 0},
                    {"id": -2, "question": "Negative", "correct": 0},
                    {"question": "No id", "correct": 0},
                    {"id": 7, "question": "Kept", "correct": [2, 0]},
                ],
            }
        )
    )
    assert [q.id for q in bank.questions] == [7]
    assert bank.questions[0].correct == Multiple((2, 0))


def test_malformed_correct_is_kept_as_unsupported():
    bank = parse_bank('{"title": "T", "questions": [{"id": 1, "question": "Q", "correct": "b"}]}')
    assert bank.questions[0].correct == Unsupported("b")


def test_missing_file_is_load_error(tmp_path):
    with pytest.raises(LoadError):
        QcmRepository(tmp_path / "missing.json").load()


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[]",
        '{"title": 1, "questions": []}',
        '{"title": "T", "questions": {}}',
        '{"title": "T", "questions": [{"id": "1", "question": "Q"}]}',
        '{"title": "T", "questions": [{"id": 1, "question": "Q", "options": [1]}]}',
        '{"title": "T", "questions": [{"id": 1, "question": "Q", "correct": 1e400}]}',
        '{"title": "T", "questions": [{"id": 1, "question": "Q", "correct": [0, 1e400]}]}',
        '{"title": "T", "questions": [{"id": 1, "question": "Q", "correct": NaN}]}',
    ],
)
def test_bad_structure_is_parse_error(raw):
    with pytest.raises(ParseError):
        parse_bank(raw)


def test_bank_is_immutable():
    bank = parse_bank('{"title": "T", "questions": [{"id": 1, "question": "Q", "correct": 0}]}')
    assert isinstance(bank.questions, tuple)
    with pytest.raises(AttributeError):
        bank.title = "other"


def test_raw_correct_value_is_kept():
    bank = parse_bank('{"title": "T", "questions": [{"id": 1, "question": "Q", "correct": [2.0, 1]}]}')
    q = bank.questions[0]
    assert q.correct == Multiple((2, 1))
    assert q.public_correct() == [2.0, 1]
