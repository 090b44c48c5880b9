from typing import Any, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict
from pyq.models.question import Subject, ExamType, Difficulty, QuestionType

def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user text matches literally"""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")

class QuestionFilter(BaseModel):
    """Validated predicate over the questions table"""
    model_config = ConfigDict(frozen=True)

    subject: Optional[Subject] = None
    exam_type: Optional[ExamType] = None
    year: Optional[int] = None
    difficulty: Optional[Difficulty] = None
    chapter: Optional[str] = None
    topic: Optional[str] = None
    question_type: Optional[QuestionType] = None
    search: Optional[str] = None

    @property
    def is_active(self) -> bool:
        # Never client-controlled
        return True

    def to_sql(self) -> Tuple[str, List[Any]]:
        """Render as a parameterized WHERE clause body (psycopg2 %s style)"""
        conditions = ["is_active = %s"]
        params: List[Any] = [self.is_active]

        if self.subject is not None:
            conditions.append("subject = %s")
            params.append(self.subject.value)
        if self.exam_type is not None:
            conditions.append("exam_type = %s")
            params.append(self.exam_type.value)
        if self.year is not None:
            conditions.append("exam_year = %s")
            params.append(self.year)
        if self.difficulty is not None:
            conditions.append("difficulty = %s")
            params.append(self.difficulty.value)
        if self.chapter is not None:
            conditions.append("chapter ILIKE %s")
            params.append(f"%{escape_like(self.chapter)}%")
        if self.topic is not None:
            conditions.append("topic ILIKE %s")
            params.append(f"%{escape_like(self.topic)}%")
        if self.question_type is not None:
            conditions.append("question_type = %s")
            params.append(self.question_type.value)
        if self.search is not None:
            pattern = f"%{escape_like(self.search)}%"
            conditions.append("(question_text ILIKE %s OR topic ILIKE %s OR concept ILIKE %s)")
            params.extend([pattern, pattern, pattern])

        return " AND ".join(conditions), params
