"""Lecturas del catálogo académico y resolución de códigos externos a IDs internos."""
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import Database
from app.core.exceptions import NotFoundError
from app.models import AcademicRecord, Career, RecordStatus, Specialization, Subject, User
from app.schemas.catalogo import CareerItem, SpecializationItem, SubjectItem


async def listar_carreras(db: Database) -> list[CareerItem]:
    async with db.session() as session:
        result = await session.execute(select(Career).order_by(Career.id))
        return [CareerItem.model_validate(c) for c in result.scalars().all()]


async def listar_menciones(db: Database, career_id: int) -> list[SpecializationItem]:
    async with db.session() as session:
        result = await session.execute(
            select(Specialization)
            .where(Specialization.career_id == career_id)
            .order_by(Specialization.id)
        )
        return [SpecializationItem.model_validate(s) for s in result.scalars().all()]


async def listar_materias(db: Database, specialization_id: int | None = None) -> list[SubjectItem]:
    """Materias visibles para una mención: las comunes (sin mención) más las propias.

    Sin mención devuelve el catálogo completo.
    """
    q = select(Subject).order_by(Subject.semester, Subject.code)
    if specialization_id is not None:
        q = q.where(
            or_(
                Subject.specialization_id.is_(None),
                Subject.specialization_id == specialization_id,
            )
        )
    async with db.session() as session:
        result = await session.execute(q)
        return [SubjectItem.model_validate(s) for s in result.scalars().all()]


async def codigos_aprobados(db: Database, student_code: str) -> list[str]:
    """Códigos de las materias aprobadas del estudiante ([] si no tiene o no existe)."""
    q = (
        select(Subject.code)
        .join(AcademicRecord, AcademicRecord.subject_id == Subject.id)
        .join(User, User.id == AcademicRecord.user_id)
        .where(
            User.student_code == student_code,
            AcademicRecord.status == RecordStatus.APROBADA,
        )
        .order_by(Subject.semester, Subject.code)
    )
    async with db.session() as session:
        result = await session.execute(q)
        return list(result.scalars().all())


async def id_por_codigo_estudiante(session: AsyncSession, student_code: str) -> int:
    """Resuelve el código de estudiante a users.id o lanza NotFoundError."""
    user_id = await session.scalar(select(User.id).where(User.student_code == student_code))
    if user_id is None:
        raise NotFoundError("Usuario no encontrado")
    return user_id


async def ids_por_codigo_materia(session: AsyncSession, codes: list[str]) -> dict[str, int]:
    """Una sola consulta para todos los códigos; los que no existen no aparecen en el dict."""
    if not codes:
        return {}
    result = await session.execute(
        select(Subject.code, Subject.id).where(Subject.code.in_(sorted(set(codes))))
    )
    return {code: subject_id for code, subject_id in result.all()}
