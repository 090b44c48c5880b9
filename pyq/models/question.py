from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class Subject(str, Enum):
    PHYSICS = "PHYSICS"
    CHEMISTRY = "CHEMISTRY"
    MATHEMATICS = "MATHEMATICS"

class ExamType(str, Enum):
    MAIN = "MAIN"
    ADVANCED = "ADVANCED"

class Difficulty(str, Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"

class QuestionType(str, Enum):
    MCQ_SINGLE = "MCQ_SINGLE"
    MCQ_MULTIPLE = "MCQ_MULTIPLE"
    NUMERICAL = "NUMERICAL"
    INTEGER = "INTEGER"
    # Stored by the database but never produced by the extractor
    ASSERTION_REASON = "ASSERTION_REASON"
    MATCH_THE_COLUMN = "MATCH_THE_COLUMN"

class Skill(str, Enum):
    CONCEPTUAL = "CONCEPTUAL"
    NUMERICAL = "NUMERICAL"
    APPLICATION = "APPLICATION"
    ANALYTICAL = "ANALYTICAL"
    DERIVATION = "DERIVATION"
    GRAPHICAL = "GRAPHICAL"

class QuestionOption(BaseModel):
    id: str
    text: str

class ExtractedQuestion(BaseModel):
    """Shape the LLM is asked to produce. Records are not validated against it."""
    model_config = ConfigDict(populate_by_name=True)

    question_number: int = Field(..., alias="questionNumber")
    subject: Subject
    question_text: str = Field(..., alias="questionText")
    options: Optional[List[QuestionOption]] = None
    correct_answer: str = Field("UNKNOWN", alias="correctAnswer")
    question_type: QuestionType = Field(..., alias="questionType")
    chapter: Optional[str] = None
    topic: Optional[str] = None
    concept: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    skills: List[Skill] = Field(default_factory=list)
