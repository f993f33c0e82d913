"""Pydantic request/response schemas used by the API.

Schemas keep the JSON contract stable (camelCase keys such as
`questionText` and `questionId`) and validate payloads before any
service code runs. Snake-case keys are accepted on input as well.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class QuestionIn(CamelModel):
    """Payload for creating a question.

    A client-supplied `id` is accepted but ignored; the store assigns ids.
    """
    id: Optional[int] = None
    subject: Optional[str] = None
    question_text: str
    option_a: str
    option_b: str
    option_c: str
    option_d: str
    correct_answer: str


class QuestionUpdate(CamelModel):
    """Partial payload for updating a question.

    Only the text, options and correct answer are applied; `id` and
    `subject` are accepted for round-tripping but never written.
    """
    id: Optional[int] = None
    subject: Optional[str] = None
    question_text: Optional[str] = None
    option_a: Optional[str] = None
    option_b: Optional[str] = None
    option_c: Optional[str] = None
    option_d: Optional[str] = None
    correct_answer: Optional[str] = None


class QuestionOut(CamelModel):
    """Stored question as returned to clients."""
    id: int
    subject: Optional[str] = None
    question_text: str
    option_a: str
    option_b: str
    option_c: str
    option_d: str
    correct_answer: str


class UserAnswer(CamelModel):
    """Single submitted answer."""
    question_id: int
    answer: Optional[str] = None


class QuizSubmission(CamelModel):
    """Request model for scoring containing a list of answers."""
    answers: List[UserAnswer]


class SubmitResponse(CamelModel):
    score: int
    total: int
