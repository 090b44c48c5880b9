from enum import Enum
from typing import Optional, Type
from pyq.models.filters import QuestionFilter
from pyq.models.question import Subject, ExamType, Difficulty, QuestionType
from pyq.utils.parsing import parse_int

MIN_YEAR = 2015
MAX_YEAR = 2030
MIN_SEARCH_LENGTH = 2

def _enum_or_none(enum_cls: Type[Enum], value: Optional[str]):
    if not value:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None

def _year_or_none(value: Optional[str]) -> Optional[int]:
    year = parse_int(value)
    if year is None:
        return None
    return year if MIN_YEAR <= year <= MAX_YEAR else None

def build_question_filter(
    subject: Optional[str] = None,
    exam_type: Optional[str] = None,
    year: Optional[str] = None,
    difficulty: Optional[str] = None,
    chapter: Optional[str] = None,
    topic: Optional[str] = None,
    question_type: Optional[str] = None,
    search: Optional[str] = None,
) -> QuestionFilter:
    """
    Translate raw request parameters into a QuestionFilter.
    Invalid values are dropped, never rejected.
    """
    return QuestionFilter(
        subject=_enum_or_none(Subject, subject),
        exam_type=_enum_or_none(ExamType, exam_type),
        year=_year_or_none(year),
        difficulty=_enum_or_none(Difficulty, difficulty),
        chapter=chapter or None,
        topic=topic or None,
        question_type=_enum_or_none(QuestionType, question_type),
        search=search if search and len(search) >= MIN_SEARCH_LENGTH else None,
    )
