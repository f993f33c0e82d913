"""Business logic services used by HTTP controllers.

Services receive their question store at construction time, so the same
code runs against the SQLModel repository in production and the in-memory
repository in tests. Errors are raised to the caller; controllers decide
how they surface over HTTP.
"""

import logging
from typing import Iterable, List, Optional
from . import models, schemas

logger = logging.getLogger("quizbank.services")

UPDATABLE_FIELDS = ("question_text", "option_a", "option_b", "option_c", "option_d", "correct_answer")


class QuestionNotFoundError(LookupError):
    """Raised when an operation references a question id that does not exist."""
    def __init__(self, question_id: int):
        super().__init__(f"Question not found with id: {question_id}")
        self.question_id = question_id


class QuestionService:
    """List, create, update and delete questions."""
    def __init__(self, repo):
        self.repo = repo

    def list_questions(self, subject: Optional[str] = None) -> List[models.Question]:
        """Return all questions, or only those matching `subject` ignoring case.

        An empty `subject` is treated the same as no filter.
        """
        if subject:
            return self.repo.list_by_subject(subject)
        return self.repo.list_all()

    def get_question(self, question_id: int) -> models.Question:
        question = self.repo.get(question_id)
        if question is None:
            logger.warning("question %s not found", question_id)
            raise QuestionNotFoundError(question_id)
        return question

    def create_question(self, data: schemas.QuestionIn) -> models.Question:
        """Persist one question; any client-supplied id is discarded."""
        created = self.repo.create(_to_model(data))
        logger.info("created question %s", created.id)
        return created

    def create_questions(self, items: Iterable[schemas.QuestionIn]) -> List[models.Question]:
        """Persist a batch of questions.

        Atomicity is whatever the store provides: the SQL repository commits
        the batch once, the in-memory one inserts item by item.
        """
        created = self.repo.create_many([_to_model(d) for d in items])
        logger.info("created %d questions in batch", len(created))
        return created

    def update_question(self, question_id: int, patch: schemas.QuestionUpdate) -> models.Question:
        """Replace text, options and correct answer of an existing question.

        `id` and `subject` are never overwritten. Fields left out of the
        patch (or sent as null) keep their stored value.
        """
        question = self.get_question(question_id)
        changes = patch.model_dump(include=set(UPDATABLE_FIELDS), exclude_unset=True, exclude_none=True)
        for field, value in changes.items():
            setattr(question, field, value)
        updated = self.repo.save(question)
        logger.info("updated question %s fields=%s", question_id, sorted(changes))
        return updated

    def delete_question(self, question_id: int) -> None:
        """Permanently remove a question; unknown ids raise every time."""
        if not self.repo.exists(question_id):
            logger.warning("delete of missing question %s", question_id)
            raise QuestionNotFoundError(question_id)
        self.repo.delete(question_id)
        logger.info("deleted question %s", question_id)


class QuizScorer:
    """Score quiz submissions against stored correct answers."""
    def __init__(self, repo):
        self.repo = repo

    def score(self, submission: schemas.QuizSubmission) -> schemas.SubmitResponse:
        """Count answers matching the stored correct answer, ignoring case.

        `total` is the number of submitted answers. Answers that reference an
        unknown question count towards `total` but never score. Repeated
        question ids are scored each time they appear.
        """
        total = len(submission.answers)
        score = 0
        for a in submission.answers:
            q = self.repo.get(a.question_id)
            if q is None or a.answer is None:
                continue
            if q.correct_answer.lower() == a.answer.lower():
                score += 1
        logger.info("scored submission score=%d total=%d", score, total)
        return schemas.SubmitResponse(score=score, total=total)


def _to_model(data: schemas.QuestionIn) -> models.Question:
    return models.Question(**data.model_dump(exclude={"id"}))
