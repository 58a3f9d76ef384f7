"""Esquemas de inscripción: horario embebido y guardado del periodo."""
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class ScheduleData(BaseModel):
    """Horario elegido para una materia. Se guarda como documento JSON dentro de la inscripción."""

    model_config = ConfigDict(populate_by_name=True)

    day: str | None = Field(default=None, examples=["Lunes"])
    day_idx: int | None = Field(default=None, alias="dayIdx")
    start_time: str | None = Field(default=None, alias="startTime", examples=["07:00"])
    end_time: str | None = Field(default=None, alias="endTime", examples=["08:30"])
    room: str | None = None
    color: str | None = None
    duration: int | float | str | None = None
    professor: str | None = None

    def to_document(self) -> dict[str, Any]:
        """Documento opaco que se persiste en enrollments.schedule_data."""
        return self.model_dump(by_alias=True, exclude_none=True)


class EnrolledSubjectIn(ScheduleData):
    """Materia enviada por el cliente: código externo más su horario."""

    codigo: str = Field(
        validation_alias=AliasChoices("codigo", "code"),
        description="Código de la materia en el catálogo",
        examples=["MAT101"],
    )

    def schedule(self) -> ScheduleData:
        return ScheduleData.model_validate(self.model_dump(exclude={"codigo"}))


class EnrollmentSaveRequest(BaseModel):
    """Body de POST /enrollments/save."""

    model_config = ConfigDict(populate_by_name=True)

    student_code: str = Field(alias="studentCode", min_length=1)
    period: str | None = Field(default=None, description="Periodo; por defecto el periodo actual")
    enrolled_subjects: list[EnrolledSubjectIn] = Field(
        default_factory=list, alias="enrolledSubjects"
    )

    @field_validator("enrolled_subjects", mode="before")
    @classmethod
    def lista_nula_es_vacia(cls, v):
        # null equivale a una inscripción vacía: se borra el conjunto del periodo
        return [] if v is None else v


class EnrollmentSaveResponse(BaseModel):
    success: bool = True
    message: str
    period: str
    saved: int = Field(description="Cantidad de materias inscritas tras el guardado")
