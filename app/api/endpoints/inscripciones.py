"""Endpoints de inscripción del periodo."""
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query

from app.core.config import settings
from app.core.database import Database, get_database
from app.schemas.common import ErrorResponse
from app.schemas.inscripcion import EnrollmentSaveRequest, EnrollmentSaveResponse
from app.services import inscripcion_service

router = APIRouter(prefix="/enrollments", tags=["inscripciones"])


@router.post(
    "/save",
    response_model=EnrollmentSaveResponse,
    summary="Guardar inscripción",
    description=(
        "Reemplaza de forma atómica las materias inscritas del estudiante en el periodo. "
        "Los códigos que no existen en el catálogo se omiten."
    ),
    responses={
        404: {"model": ErrorResponse, "description": "Código de estudiante inexistente"},
        500: {"model": ErrorResponse, "description": "Fallo al guardar; la inscripción anterior se conserva"},
    },
)
async def guardar_inscripcion(body: EnrollmentSaveRequest, db: Database = Depends(get_database)):
    periodo = body.period or settings.current_period
    guardadas = await inscripcion_service.guardar_inscripcion(
        db, body.student_code, periodo, body.enrolled_subjects
    )
    return EnrollmentSaveResponse(
        message="Inscripción guardada correctamente",
        period=periodo,
        saved=guardadas,
    )


@router.get(
    "/{student_code}",
    response_model=list[dict[str, Any]],
    summary="Inscripción guardada del estudiante",
    description="Materias inscritas con los datos del horario combinados en cada fila.",
)
async def obtener_inscripcion(
    student_code: str,
    db: Database = Depends(get_database),
    period: Annotated[str | None, Query(description="Periodo; por defecto el actual")] = None,
):
    return await inscripcion_service.obtener_inscripcion(
        db, student_code, period or settings.current_period
    )
