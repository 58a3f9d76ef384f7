"""Endpoints del panel administrativo."""
from fastapi import APIRouter, Depends

from app.core.database import Database, get_database
from app.schemas.admin import AdminUserUpdate, BulkRecordsRequest, UserRecordsResponse
from app.schemas.auth import UserOut
from app.schemas.common import ErrorResponse, MessageResponse
from app.services import admin_service

router = APIRouter(prefix="/admin", tags=["admin"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Usuario no encontrado"}}


@router.get(
    "/users",
    response_model=list[UserOut],
    summary="Listar usuarios",
    description="Todos los usuarios con carrera y mención, ordenados por rol y nombre.",
)
async def listar_usuarios(db: Database = Depends(get_database)):
    return await admin_service.listar_usuarios(db)


@router.put(
    "/users/{user_id}",
    response_model=MessageResponse,
    summary="Editar usuario",
    responses=NOT_FOUND,
)
async def editar_usuario(user_id: int, body: AdminUserUpdate, db: Database = Depends(get_database)):
    await admin_service.editar_usuario(db, user_id, body)
    return MessageResponse(message="Usuario actualizado correctamente")


@router.delete(
    "/users/{user_id}",
    response_model=MessageResponse,
    summary="Eliminar usuario",
    responses=NOT_FOUND,
)
async def eliminar_usuario(user_id: int, db: Database = Depends(get_database)):
    await admin_service.eliminar_usuario(db, user_id)
    return MessageResponse(message="Usuario eliminado correctamente")


@router.get(
    "/users/{user_id}/records",
    response_model=UserRecordsResponse,
    summary="Récord académico del usuario",
    responses=NOT_FOUND,
)
async def record_usuario(user_id: int, db: Database = Depends(get_database)):
    codigos = await admin_service.codigos_record(db, user_id)
    return UserRecordsResponse(user_id=user_id, approved_subject_codes=codigos)


@router.post(
    "/update-records-bulk",
    response_model=MessageResponse,
    summary="Reemplazar récord académico",
    description="Borra el récord del usuario e inserta las materias enviadas en una sola transacción.",
    responses={
        **NOT_FOUND,
        500: {"model": ErrorResponse, "description": "Fallo al guardar; el récord anterior se conserva"},
    },
)
async def actualizar_record(body: BulkRecordsRequest, db: Database = Depends(get_database)):
    await admin_service.actualizar_record(db, body.user_id, body.approved_subject_codes)
    return MessageResponse(message="Récord actualizado con éxito")
