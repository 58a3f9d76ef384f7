"""Esquemas del catálogo académico: carreras, menciones y materias."""
from pydantic import BaseModel, ConfigDict, Field


class CareerItem(BaseModel):
    """Carrera: id y nombre."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="ID de la carrera")
    name: str = Field(description="Nombre de la carrera")


class SpecializationItem(BaseModel):
    """Mención de una carrera."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="ID de la mención")
    name: str = Field(description="Nombre de la mención")
    career_id: int = Field(description="ID de la carrera a la que pertenece")


class SubjectItem(BaseModel):
    """Materia del plan de estudios. specialization_id nulo = común a todas las menciones."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    code: str = Field(description="Código único de la materia (ej. MAT101)")
    name: str
    semester: int = Field(description="Semestre del plan en que se dicta")
    credits: int | None = None
    specialization_id: int | None = None
