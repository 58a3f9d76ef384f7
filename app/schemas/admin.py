"""Esquemas del panel administrativo."""
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.models.user import Role


class AdminUserUpdate(BaseModel):
    """Body de PUT /admin/users/{id}. Se reescriben todos los campos."""

    full_name: str = Field(description="Nombre completo")
    email: EmailStr
    phone: str | None = None
    role: str = Field(default=Role.CADETE, description="cadete o admin")
    career_id: int | None = Field(default=None, description="Si no se envía se usa 1")
    specialization_id: int | None = Field(default=None, description="Si no se envía se usa 1")

    @field_validator("role")
    @classmethod
    def rol_valido(cls, v: str) -> str:
        if v not in (Role.CADETE, Role.ADMIN):
            raise ValueError("role debe ser 'cadete' o 'admin'")
        return v

    @field_validator("career_id", "specialization_id", mode="before")
    @classmethod
    def id_vacio_es_none(cls, v):
        # Un select sin elegir llega como ""; se aplica el valor por defecto
        return None if v == "" else v


class BulkRecordsRequest(BaseModel):
    """Reemplaza por completo el récord de materias aprobadas de un usuario."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userId")
    approved_subject_codes: list[str] = Field(
        default_factory=list, alias="approvedSubjectCodes"
    )

    @field_validator("approved_subject_codes", mode="before")
    @classmethod
    def lista_nula_es_vacia(cls, v):
        return [] if v is None else v


class UserRecordsResponse(BaseModel):
    user_id: int
    approved_subject_codes: list[str]
