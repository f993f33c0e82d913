"""SQLModel data models.

The quiz bank stores a single table: multiple-choice questions with four
options and an opaque correct-answer marker.
"""

from typing import Optional
from sqlmodel import SQLModel, Field


def fold_subject(subject: Optional[str]) -> Optional[str]:
    """Case-fold a subject label for comparisons (Unicode-aware)."""
    return subject.casefold() if subject is not None else None


class Question(SQLModel, table=True):
    """A multiple-choice question.

    Fields:
    - `subject`: free-text label, matched case-insensitively when filtering
    - `subject_key`: `fold_subject(subject)`, written by the repository and
      used for filtering; SQLite's own `lower()` only folds ASCII
    - `option_a`..`option_d`: the four choices
    - `correct_answer`: compared case-insensitively against submitted answers;
      may be a letter or the option text, whichever convention the options use
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    subject: Optional[str] = None
    subject_key: Optional[str] = Field(default=None, index=True)
    question_text: str
    option_a: str
    option_b: str
    option_c: str
    option_d: str
    correct_answer: str
