"""CLI script to load questions from a JSON file into the backend DB.
Usage: python scripts/seed_questions.py questions.json [--subject SUBJECT]

The file must contain a JSON array of question objects using the same
shape as the API (`questionText`, `optionA`..`optionD`, `correctAnswer`).
"""
import sys
import argparse
import json
import pathlib
from typing import List, Optional
# Ensure `backend/` is on sys.path so `quizbank` package imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from pydantic import TypeAdapter
from sqlmodel import Session
from quizbank.database import engine, create_db_and_tables
from quizbank import repositories, schemas, services


def load_questions(path: pathlib.Path, subject: Optional[str] = None) -> List[schemas.QuestionIn]:
    """Parse and validate the question file.

    When `subject` is given it fills in items that have no subject of
    their own.
    """
    raw = json.loads(path.read_text(encoding='utf-8'))
    items = TypeAdapter(List[schemas.QuestionIn]).validate_python(raw)
    if subject:
        for item in items:
            if not item.subject:
                item.subject = subject
    return items


def main(path: pathlib.Path, subject: Optional[str] = None) -> int:
    """Insert every question from `path` as a single batch.

    Results are printed to stdout for a quick CLI feedback loop.
    """
    if not path.exists():
        print(f'File not found: {path}')
        return 1
    try:
        items = load_questions(path, subject=subject)
    except ValueError as e:
        print(f'Invalid question file {path}: {e}')
        return 1
    create_db_and_tables()
    with Session(engine) as session:
        svc = services.QuestionService(repositories.QuestionRepository(session))
        created = svc.create_questions(items)
    print(f'Created {len(created)} questions from {path}')
    return 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('path', type=pathlib.Path, help='JSON file with an array of questions')
    parser.add_argument('--subject', help='Subject for items that do not set one')
    args = parser.parse_args()
    sys.exit(main(args.path, subject=args.subject))
