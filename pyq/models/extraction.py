from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pyq.models.question import ExamType

class ExamMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int = 0
    session: Optional[str] = None
    exam_type: ExamType = ExamType.MAIN

class ExtractionResult(BaseModel):
    """One per input PDF; written to <stem>.json"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    filename: str
    exam_year: int = Field(..., alias="examYear")
    exam_session: str = Field("", alias="examSession")
    exam_type: ExamType = Field(..., alias="examType")
    questions: List[Any] = Field(default_factory=list)  # raw LLM records, unvalidated
    extracted_at: str = Field(..., alias="extractedAt")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
