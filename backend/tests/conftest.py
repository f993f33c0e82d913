from pathlib import Path
import os
import tempfile
import pytest

# Point the app at a throwaway SQLite file before `quizbank` is imported anywhere.
_TMP_DIR = Path(tempfile.mkdtemp(prefix="quizbank-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'test.db'}"

from quizbank import models, repositories  # noqa: E402


def make_question(**overrides) -> models.Question:
    data = {
        'subject': 'Java',
        'question_text': 'Which keyword declares a constant?',
        'option_a': 'static',
        'option_b': 'final',
        'option_c': 'const',
        'option_d': 'var',
        'correct_answer': 'B',
    }
    data.update(overrides)
    return models.Question(**data)


@pytest.fixture
def memory_repo():
    """Fresh in-memory question store."""
    return repositories.InMemoryQuestionRepository()


@pytest.fixture
def client(memory_repo):
    """TestClient whose routes use `memory_repo` instead of the database."""
    from fastapi.testclient import TestClient
    from quizbank.main import app, get_question_repository

    app.dependency_overrides[get_question_repository] = lambda: memory_repo
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
