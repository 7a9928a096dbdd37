from typing import Any, List
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

# --- формат файлу з питаннями (qcm.json) ---

class QuestionIn(BaseModel):
    # відсутні поля -> нульові значення, такі питання потім відфільтровуються
    model_config = ConfigDict(extra="ignore")

    id: StrictInt = 0
    question: StrictStr = ""
    options: List[StrictStr] = Field(default_factory=list)
    correct: Any = None

class QcmFileIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: StrictStr = ""
    questions: List[QuestionIn] = Field(default_factory=list)

# --- API ---

class QuestionOut(BaseModel):
    id: int
    question: str
    options: list[str]
    correct: Any

class QcmOut(BaseModel):
    title: str
    questions: List[QuestionOut]
    total: int

class CheckIn(BaseModel):
    questionId: StrictInt
    answer: Any = Field(...)

class CheckOut(BaseModel):
    correct: bool
    correctAnswer: Any
