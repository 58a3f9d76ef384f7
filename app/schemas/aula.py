"""Esquemas del aula virtual."""
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class ClassmateItem(BaseModel):
    """Compañero inscrito en la misma materia y periodo."""

    id: int
    student_code: str
    full_name: str
    email: str


class MaterialItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    subject_id: int
    title: str
    description: str | None = None
    file_url: str | None = None
    created_at: datetime | None = None


class EvaluationStatusItem(BaseModel):
    """Evaluación con el estado de la entrega del estudiante (pending si no entregó)."""

    id: int
    subject_id: int
    title: str
    description: str | None = None
    due_date: date | None = None
    max_score: float
    status: str
    score: float | None = None
    file_url: str | None = None
    submitted_at: datetime | None = None


class SubmitRequest(BaseModel):
    """Body de POST /classroom/submit."""

    model_config = ConfigDict(populate_by_name=True)

    evaluation_id: int = Field(alias="evaluationId")
    student_code: str = Field(alias="studentCode", min_length=1)
    file_url: str | None = Field(default=None, alias="fileUrl")
