import pytest
from fastapi.testclient import TestClient

from qcm.core.config import Settings
from qcm.domain.model import Multiple, Question, QuizBank, Single, Unsupported
from qcm.main import create_app


@pytest.fixture
def bank() -> QuizBank:
    return QuizBank(
        title="Geography",
        questions=(
            Question(id=1, text="Capital of France?", options=("Paris", "Rome", "Oslo"), correct=Single(0)),
            Question(id=2, text="Largest ocean?", options=("Atlantic", "Indian", "Pacific"), correct=Single(2)),
            Question(id=3, text="Nordic countries?", options=("Norway", "Spain", "Finland", "Chile"), correct=Multiple((0, 2))),
            Question(id=4, text="Rivers in Africa?", options=("Nile", "Congo", "Danube"), correct=Multiple((1, 0))),
            Question(id=5, text="Broken entry", options=("a", "b"), correct=Unsupported("a")),
        ),
    )


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(_env_file=None, STATIC_DIR=str(tmp_path), QCM_FILE=str(tmp_path / "qcm.json"))


@pytest.fixture
def client(bank, settings):
    with TestClient(create_app(bank=bank, settings=settings)) as c:
        yield c
