"""Endpoints del catálogo académico (carreras, menciones, materias) y progreso del estudiante."""
from fastapi import APIRouter, Depends

from app.core.database import Database, get_database
from app.schemas.catalogo import CareerItem, SpecializationItem, SubjectItem
from app.services import catalogo_service

router = APIRouter(tags=["catalogo"])


@router.get(
    "/careers",
    response_model=list[CareerItem],
    summary="Listar carreras",
)
async def listar_carreras(db: Database = Depends(get_database)):
    """Todas las carreras ordenadas por ID."""
    return await catalogo_service.listar_carreras(db)


@router.get(
    "/specializations/{career_id}",
    response_model=list[SpecializationItem],
    summary="Listar menciones de una carrera",
)
async def listar_menciones(career_id: int, db: Database = Depends(get_database)):
    return await catalogo_service.listar_menciones(db, career_id)


@router.get(
    "/subjects",
    response_model=list[SubjectItem],
    summary="Catálogo completo de materias",
)
async def listar_todas_materias(db: Database = Depends(get_database)):
    return await catalogo_service.listar_materias(db)


@router.get(
    "/subjects/{specialization_id}",
    response_model=list[SubjectItem],
    summary="Materias visibles para una mención",
    description="Materias comunes (sin mención) más las de la mención indicada, ordenadas por semestre.",
)
async def listar_materias(specialization_id: int, db: Database = Depends(get_database)):
    return await catalogo_service.listar_materias(db, specialization_id)


@router.get(
    "/progress/{student_code}",
    response_model=list[str],
    summary="Materias aprobadas del estudiante",
    response_description="Lista de códigos de materia con estado aprobada",
)
async def progreso(student_code: str, db: Database = Depends(get_database)):
    return await catalogo_service.codigos_aprobados(db, student_code)
