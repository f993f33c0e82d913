import json
import pytest
from pydantic import ValidationError
import seed_questions


def test_load_questions_fills_missing_subject(tmp_path):
    path = tmp_path / 'q.json'
    path.write_text(json.dumps([
        {'questionText': 'Q1', 'optionA': 'a', 'optionB': 'b', 'optionC': 'c', 'optionD': 'd', 'correctAnswer': 'A'},
        {'subject': 'DSA', 'questionText': 'Q2', 'optionA': 'a', 'optionB': 'b', 'optionC': 'c', 'optionD': 'd', 'correctAnswer': 'd'},
    ]))
    items = seed_questions.load_questions(path, subject='Aptitude')
    assert [i.subject for i in items] == ['Aptitude', 'DSA']


def test_load_questions_rejects_incomplete_items(tmp_path):
    path = tmp_path / 'bad.json'
    path.write_text(json.dumps([{'questionText': 'no options'}]))
    with pytest.raises(ValidationError):
        seed_questions.load_questions(path)


def test_main_reports_missing_file(tmp_path, capsys):
    assert seed_questions.main(tmp_path / 'nope.json') == 1
    assert 'File not found' in capsys.readouterr().out


def test_main_inserts_batch(tmp_path, capsys):
    from sqlmodel import Session
    from quizbank import repositories
    from quizbank.database import engine

    path = tmp_path / 'seed.json'
    path.write_text(json.dumps([
        {'questionText': 'Seeded Q1', 'optionA': 'a', 'optionB': 'b', 'optionC': 'c', 'optionD': 'd', 'correctAnswer': 'A'},
        {'questionText': 'Seeded Q2', 'optionA': 'a', 'optionB': 'b', 'optionC': 'c', 'optionD': 'd', 'correctAnswer': 'B'},
    ]))
    assert seed_questions.main(path, subject='Seeding') == 0
    assert 'Created 2 questions' in capsys.readouterr().out
    with Session(engine) as session:
        stored = repositories.QuestionRepository(session).list_by_subject('seeding')
        assert [q.question_text for q in stored] == ['Seeded Q1', 'Seeded Q2']
        for q in stored:
            session.delete(q)
        session.commit()
