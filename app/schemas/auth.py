"""Esquemas para login y registro."""
from datetime import date

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class LoginRequest(BaseModel):
    """Body del endpoint de login."""

    model_config = ConfigDict(populate_by_name=True)

    student_code: str = Field(alias="studentCode", description="Código de estudiante", examples=["A001"])
    password: str = Field(description="Contraseña en texto", min_length=1, examples=["1234"])


class RegisterRequest(BaseModel):
    """Body del registro de una cuenta nueva (rol cadete)."""

    model_config = ConfigDict(populate_by_name=True)

    student_code: str = Field(alias="studentCode", min_length=1)
    email: EmailStr = Field(description="Correo electrónico")
    password: str = Field(min_length=1)


class UserOut(BaseModel):
    """Usuario con los nombres de su carrera y mención (null si no tiene)."""

    id: int
    student_code: str
    email: str
    full_name: str
    role: str
    age: int | None = None
    birth_date: date | None = None
    phone: str | None = None
    career_id: int | None = None
    specialization_id: int | None = None
    career_name: str | None = None
    mencion_name: str | None = None


class LoginResponse(BaseModel):
    success: bool = True
    user: UserOut
