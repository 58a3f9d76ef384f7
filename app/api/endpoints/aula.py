"""Endpoints del aula virtual."""
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.core.config import settings
from app.core.database import Database, get_database
from app.schemas.aula import ClassmateItem, EvaluationStatusItem, MaterialItem, SubmitRequest
from app.schemas.common import ErrorResponse, MessageResponse
from app.services import aula_service

router = APIRouter(prefix="/classroom", tags=["aula"])


@router.get(
    "/{subject_id}/classmates",
    response_model=list[ClassmateItem],
    summary="Compañeros de clase",
)
async def listar_companeros(
    subject_id: int,
    db: Database = Depends(get_database),
    student_code: Annotated[
        str | None, Query(alias="studentCode", description="Estudiante que consulta (se excluye)")
    ] = None,
    period: Annotated[str | None, Query(description="Periodo; por defecto el actual")] = None,
):
    return await aula_service.listar_companeros(
        db, subject_id, period or settings.current_period, student_code
    )


@router.get(
    "/{subject_id}/materials",
    response_model=list[MaterialItem],
    summary="Materiales de la materia",
    description="Más recientes primero. Lista vacía si el aula virtual no está habilitada.",
)
async def listar_materiales(subject_id: int, db: Database = Depends(get_database)):
    return await aula_service.listar_materiales(db, subject_id)


@router.get(
    "/{subject_id}/evaluations/{student_code}",
    response_model=list[EvaluationStatusItem],
    summary="Evaluaciones con estado de entrega",
    responses={404: {"model": ErrorResponse, "description": "Código de estudiante inexistente"}},
)
async def listar_evaluaciones(subject_id: int, student_code: str, db: Database = Depends(get_database)):
    return await aula_service.listar_evaluaciones(db, subject_id, student_code)


@router.post(
    "/submit",
    response_model=MessageResponse,
    summary="Entregar evaluación",
    description="Crea o reemplaza la entrega del estudiante para la evaluación.",
    responses={404: {"model": ErrorResponse, "description": "Estudiante o evaluación inexistente"}},
)
async def entregar(body: SubmitRequest, db: Database = Depends(get_database)):
    registrada = await aula_service.entregar(db, body.evaluation_id, body.student_code, body.file_url)
    if not registrada:
        return MessageResponse(message="Entrega recibida")
    return MessageResponse(message="Entrega registrada correctamente")
