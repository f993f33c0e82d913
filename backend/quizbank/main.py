"""FastAPI application entrypoint and HTTP controllers.

Controllers are intentionally thin: they validate requests through the
pydantic schemas, build a service around the injected question store and
return JSON responses.

Endpoints implemented:
- GET /api/questions
- GET /api/questions/{question_id}
- POST /api/questions
- POST /api/questions/batch
- PUT /api/questions/{question_id}
- DELETE /api/questions/{question_id}
- POST /api/quiz/submit
- GET /health
"""

from fastapi import FastAPI, Depends, HTTPException, Request
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session
from typing import List, Optional
import json
import logging
import time
import uuid
from .database import create_db_and_tables, get_session
from . import services, repositories, schemas
from .config import settings

app = FastAPI(title="Quiz Bank API")
logger = logging.getLogger("quizbank.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

# Browser front-ends are served from their own dev servers; only those origins may call the API.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

create_db_and_tables()


def _request_summary(request: Request, req_id: str, started: float, status_code: Optional[int] = None) -> str:
    """JSON line describing a finished (or failed) request."""
    summary = {
        "request_id": req_id,
        "path": request.url.path,
        "method": request.method,
        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
        "client": request.client.host if request.client else "unknown",
    }
    if status_code is not None:
        summary["status_code"] = status_code
    return json.dumps(summary, ensure_ascii=True)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("request_failed %s", _request_summary(request, req_id, started))
        raise
    response.headers["X-Request-ID"] = req_id
    if request.url.path.startswith("/api"):
        logger.info("request_done %s", _request_summary(request, req_id, started, response.status_code))
    return response


def get_question_repository(db: Session = Depends(get_session)):
    """FastAPI dependency returning the question store for this request.

    Tests replace it through `app.dependency_overrides` to run the API
    against `InMemoryQuestionRepository`.
    """
    return repositories.QuestionRepository(db)


@app.get('/api/questions', response_model=List[schemas.QuestionOut])
def list_questions(subject: Optional[str] = None, repo=Depends(get_question_repository)):
    """List all questions, or only those whose subject matches `subject`.

    The subject comparison ignores case; an empty value returns everything.
    """
    return services.QuestionService(repo).list_questions(subject)


@app.get('/api/questions/{question_id}', response_model=schemas.QuestionOut)
def get_question(question_id: int, repo=Depends(get_question_repository)):
    try:
        return services.QuestionService(repo).get_question(question_id)
    except services.QuestionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.post('/api/questions', response_model=schemas.QuestionOut)
def add_question(payload: schemas.QuestionIn, repo=Depends(get_question_repository)):
    """Create a question and return it with its assigned id."""
    return services.QuestionService(repo).create_question(payload)


@app.post('/api/questions/batch', response_model=List[schemas.QuestionOut])
def add_questions(payload: List[schemas.QuestionIn], repo=Depends(get_question_repository)):
    """Create several questions in one request."""
    return services.QuestionService(repo).create_questions(payload)


@app.put('/api/questions/{question_id}', response_model=schemas.QuestionOut)
def update_question(question_id: int, payload: schemas.QuestionUpdate, repo=Depends(get_question_repository)):
    """Replace the text, options and correct answer of a question.

    The subject of an existing question is left untouched.
    """
    try:
        return services.QuestionService(repo).update_question(question_id, payload)
    except services.QuestionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.delete('/api/questions/{question_id}', status_code=204, response_class=Response)
def delete_question(question_id: int, repo=Depends(get_question_repository)):
    try:
        services.QuestionService(repo).delete_question(question_id)
    except services.QuestionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)


@app.post('/api/quiz/submit', response_model=schemas.SubmitResponse)
def submit_quiz(submission: schemas.QuizSubmission, repo=Depends(get_question_repository)):
    """Score a submitted quiz.

    The body contains a list of `{questionId, answer}` items. Nothing is
    stored; the response is `{score, total}`.
    """
    return services.QuizScorer(repo).score(submission)


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
