"""Esquemas compartidos por varios endpoints."""
from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Respuesta estándar de las operaciones de escritura."""

    success: bool = Field(default=True, description="Siempre true en respuestas 2xx")
    message: str = Field(description="Mensaje legible para el usuario")


class ErrorResponse(BaseModel):
    """Cuerpo de cualquier respuesta de error 4xx/5xx."""

    success: bool = Field(default=False)
    error: str = Field(description="Código corto del error (ej. not_found)")
    message: str = Field(description="Explicación del error")
