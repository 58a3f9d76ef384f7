"""Esquema del formulario de onboarding (primer ingreso del cadete)."""
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OnboardingRequest(BaseModel):
    """Perfil del cadete y materias que ya tenía aprobadas."""

    model_config = ConfigDict(populate_by_name=True)

    student_code: str = Field(alias="studentCode", min_length=1)
    full_name: str = Field(alias="fullName")
    age: int | None = None
    birth_date: date | None = Field(default=None, alias="birthDate")
    phone: str | None = None
    career_id: int | None = Field(default=None, alias="careerId")
    mencion_id: int | None = Field(default=None, alias="mencionId")
    approved_subjects: list[str] = Field(
        default_factory=list,
        alias="approvedSubjects",
        description="Códigos de materias aprobadas previamente",
    )

    @field_validator("career_id", "mencion_id", mode="before")
    @classmethod
    def id_vacio_es_none(cls, v):
        # Un select sin elegir llega como ""; se aplica el valor por defecto
        return None if v == "" else v

    @field_validator("approved_subjects", mode="before")
    @classmethod
    def lista_nula_es_vacia(cls, v):
        return [] if v is None else v
