"""Repository classes encapsulating question storage.

`QuestionRepository` is the SQLModel-backed store used by the running
application. `InMemoryQuestionRepository` implements the same methods over
a dict and is used by tests and scripts that should not touch a database.
Services only rely on the shared method names, so either can be injected.
"""

from threading import Lock
from typing import Dict, Iterable, List, Optional
from sqlmodel import Session, select
from . import models

# SQLite and most SQL backends store integer keys as signed 64-bit values.
MIN_ID = -2**63
MAX_ID = 2**63 - 1


def _storable_id(question_id: int) -> bool:
    return MIN_ID <= question_id <= MAX_ID


class QuestionRepository:
    """CRUD operations for `Question` records.

    Ids outside the 64-bit range cannot name a stored row, so lookups treat
    them as missing instead of handing them to the driver.
    """
    def __init__(self, session: Session):
        self.session = session

    def list_all(self) -> List[models.Question]:
        """Return every stored question in id order."""
        stmt = select(models.Question).order_by(models.Question.id)
        return list(self.session.exec(stmt).all())

    def list_by_subject(self, subject: str) -> List[models.Question]:
        """Return questions whose subject equals `subject`, ignoring case."""
        stmt = (
            select(models.Question)
            .where(models.Question.subject_key == models.fold_subject(subject))
            .order_by(models.Question.id)
        )
        return list(self.session.exec(stmt).all())

    def get(self, question_id: int) -> Optional[models.Question]:
        """Fetch a question by id."""
        if not _storable_id(question_id):
            return None
        return self.session.get(models.Question, question_id)

    def exists(self, question_id: int) -> bool:
        if not _storable_id(question_id):
            return False
        stmt = select(models.Question.id).where(models.Question.id == question_id)
        return self.session.exec(stmt).first() is not None

    def create(self, question: models.Question) -> models.Question:
        """Persist a new question and return the managed instance."""
        question.subject_key = models.fold_subject(question.subject)
        self.session.add(question)
        self.session.commit()
        self.session.refresh(question)
        return question

    def create_many(self, questions: Iterable[models.Question]) -> List[models.Question]:
        """Persist several questions in a single commit."""
        questions = list(questions)
        for q in questions:
            q.subject_key = models.fold_subject(q.subject)
        self.session.add_all(questions)
        self.session.commit()
        for q in questions:
            self.session.refresh(q)
        return questions

    def save(self, question: models.Question) -> models.Question:
        """Flush changes made to an existing question."""
        question.subject_key = models.fold_subject(question.subject)
        self.session.add(question)
        self.session.commit()
        self.session.refresh(question)
        return question

    def delete(self, question_id: int) -> None:
        question = self.get(question_id)
        if question is not None:
            self.session.delete(question)
            self.session.commit()


class InMemoryQuestionRepository:
    """Dict-backed question store with sequential ids."""

    def __init__(self, questions: Optional[Iterable[models.Question]] = None):
        self._rows: Dict[int, models.Question] = {}
        self._next_id = 1
        self._lock = Lock()
        for q in questions or ():
            self.create(q)

    def list_all(self) -> List[models.Question]:
        with self._lock:
            return list(self._rows.values())

    def list_by_subject(self, subject: str) -> List[models.Question]:
        needle = models.fold_subject(subject)
        with self._lock:
            return [q for q in self._rows.values() if models.fold_subject(q.subject) == needle]

    def get(self, question_id: int) -> Optional[models.Question]:
        with self._lock:
            return self._rows.get(question_id)

    def exists(self, question_id: int) -> bool:
        with self._lock:
            return question_id in self._rows

    def create(self, question: models.Question) -> models.Question:
        with self._lock:
            question.id = self._next_id
            self._next_id += 1
            self._rows[question.id] = question
        return question

    def create_many(self, questions: Iterable[models.Question]) -> List[models.Question]:
        return [self.create(q) for q in questions]

    def save(self, question: models.Question) -> models.Question:
        with self._lock:
            self._rows[question.id] = question
        return question

    def delete(self, question_id: int) -> None:
        with self._lock:
            self._rows.pop(question_id, None)
