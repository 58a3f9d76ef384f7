"""Panel administrativo: usuarios y récord académico."""
import logging

from sqlalchemy import delete, insert, select

from app.core.database import Database
from app.core.exceptions import NotFoundError
from app.models import AcademicRecord, RecordStatus, Subject, User
from app.schemas.admin import AdminUserUpdate
from app.schemas.auth import UserOut
from app.services.catalogo_service import ids_por_codigo_materia
from app.services.cuenta_service import (
    CARRERA_POR_DEFECTO,
    MENCION_POR_DEFECTO,
    consulta_usuarios,
    usuario_out,
)

logger = logging.getLogger(__name__)


async def listar_usuarios(db: Database) -> list[UserOut]:
    async with db.session() as session:
        result = await session.execute(
            consulta_usuarios().order_by(User.role, User.full_name)
        )
        return [usuario_out(u, career_name, mencion_name) for u, career_name, mencion_name in result.all()]


async def editar_usuario(db: Database, user_id: int, datos: AdminUserUpdate) -> None:
    async with db.transaction() as session:
        usuario = await session.get(User, user_id)
        if usuario is None:
            raise NotFoundError("Usuario no encontrado")
        usuario.full_name = datos.full_name
        usuario.email = datos.email
        usuario.phone = datos.phone
        usuario.role = datos.role
        usuario.career_id = datos.career_id or CARRERA_POR_DEFECTO
        usuario.specialization_id = datos.specialization_id or MENCION_POR_DEFECTO
    logger.info("Usuario %s actualizado", user_id)


async def eliminar_usuario(db: Database, user_id: int) -> None:
    """Elimina el usuario; inscripciones y récord caen por ON DELETE CASCADE."""
    async with db.transaction() as session:
        usuario = await session.get(User, user_id)
        if usuario is None:
            raise NotFoundError("Usuario no encontrado")
        await session.delete(usuario)
    logger.info("Usuario %s eliminado", user_id)


async def codigos_record(db: Database, user_id: int) -> list[str]:
    async with db.session() as session:
        if await session.get(User, user_id) is None:
            raise NotFoundError("Usuario no encontrado")
        result = await session.execute(
            select(Subject.code)
            .join(AcademicRecord, AcademicRecord.subject_id == Subject.id)
            .where(
                AcademicRecord.user_id == user_id,
                AcademicRecord.status == RecordStatus.APROBADA,
            )
            .order_by(Subject.semester, Subject.code)
        )
        return list(result.scalars().all())


async def actualizar_record(db: Database, user_id: int, codes: list[str]) -> int:
    """Reemplaza el récord del usuario por las materias de ``codes`` en una transacción.

    Si la inserción falla se revierte también el borrado. Devuelve la cantidad
    de materias registradas.
    """
    filas: list[dict] = []
    async with db.transaction() as session:
        if await session.get(User, user_id) is None:
            raise NotFoundError("Usuario no encontrado")

        await session.execute(delete(AcademicRecord).where(AcademicRecord.user_id == user_id))

        if codes:
            ids = await ids_por_codigo_materia(session, codes)
            filas = [
                {"user_id": user_id, "subject_id": subject_id, "status": RecordStatus.APROBADA}
                for subject_id in sorted(ids.values())
            ]
            if filas:
                await session.execute(insert(AcademicRecord), filas)

    logger.info("Récord del usuario %s reemplazado: %d materias", user_id, len(filas))
    return len(filas)
