"""Aula virtual: compañeros, materiales, evaluaciones y entregas.

Las tablas del aula son opcionales. Si no están provisionadas
(``Database.classroom_available`` en False) los listados devuelven [] y la
entrega se registra solo en el log.
"""
import logging
from datetime import datetime, timezone

from sqlalchemy import and_, select

from app.core.database import Database, dialect_insert
from app.core.exceptions import NotFoundError
from app.models import ClassMaterial, Enrollment, Evaluation, StudentSubmission, SubmissionStatus, User
from app.schemas.aula import ClassmateItem, EvaluationStatusItem, MaterialItem
from app.services.catalogo_service import id_por_codigo_estudiante

logger = logging.getLogger(__name__)

ARCHIVO_POR_DEFECTO = "archivo_pendiente.pdf"


async def listar_companeros(
    db: Database, subject_id: int, period: str, student_code: str | None
) -> list[ClassmateItem]:
    """Otros estudiantes inscritos en la materia y periodo (excluye al solicitante)."""
    q = (
        select(User.id, User.student_code, User.full_name, User.email)
        .join(Enrollment, Enrollment.user_id == User.id)
        .where(Enrollment.subject_id == subject_id, Enrollment.period == period)
        .order_by(User.full_name, User.student_code)
    )
    if student_code:
        q = q.where(User.student_code != student_code)
    async with db.session() as session:
        result = await session.execute(q)
        return [
            ClassmateItem(id=r.id, student_code=r.student_code, full_name=r.full_name, email=r.email)
            for r in result.all()
        ]


async def listar_materiales(db: Database, subject_id: int) -> list[MaterialItem]:
    if not db.classroom_available:
        return []
    q = (
        select(ClassMaterial)
        .where(ClassMaterial.subject_id == subject_id)
        .order_by(ClassMaterial.created_at.desc(), ClassMaterial.id.desc())
    )
    async with db.session() as session:
        result = await session.execute(q)
        return [MaterialItem.model_validate(m) for m in result.scalars().all()]


async def listar_evaluaciones(
    db: Database, subject_id: int, student_code: str
) -> list[EvaluationStatusItem]:
    """Evaluaciones de la materia con el estado de entrega del estudiante."""
    async with db.session() as session:
        user_id = await id_por_codigo_estudiante(session, student_code)
        if not db.classroom_available:
            return []
        q = (
            select(
                Evaluation,
                StudentSubmission.status,
                StudentSubmission.score,
                StudentSubmission.file_url,
                StudentSubmission.submitted_at,
            )
            .outerjoin(
                StudentSubmission,
                and_(
                    StudentSubmission.evaluation_id == Evaluation.id,
                    StudentSubmission.user_id == user_id,
                ),
            )
            .where(Evaluation.subject_id == subject_id)
            .order_by(Evaluation.due_date, Evaluation.id)
        )
        result = await session.execute(q)
        filas = result.all()

    return [
        EvaluationStatusItem(
            id=ev.id,
            subject_id=ev.subject_id,
            title=ev.title,
            description=ev.description,
            due_date=ev.due_date,
            max_score=ev.max_score,
            status=estado or SubmissionStatus.PENDING,
            score=score,
            file_url=file_url,
            submitted_at=submitted_at,
        )
        for ev, estado, score, file_url, submitted_at in filas
    ]


async def entregar(db: Database, evaluation_id: int, student_code: str, file_url: str | None) -> bool:
    """Registra o reemplaza la entrega del estudiante.

    Devuelve False si el aula no está provisionada (no se escribe nada).
    """
    async with db.transaction() as session:
        user_id = await id_por_codigo_estudiante(session, student_code)
        if not db.classroom_available:
            logger.warning(
                "Aula virtual no disponible: entrega de %s para evaluación %s no registrada",
                student_code, evaluation_id,
            )
            return False

        existe = await session.scalar(select(Evaluation.id).where(Evaluation.id == evaluation_id))
        if existe is None:
            raise NotFoundError("Evaluación no encontrada")

        stmt = dialect_insert(session, StudentSubmission).values(
            evaluation_id=evaluation_id,
            user_id=user_id,
            status=SubmissionStatus.SUBMITTED,
            file_url=file_url or ARCHIVO_POR_DEFECTO,
            submitted_at=datetime.now(timezone.utc),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["evaluation_id", "user_id"],
            set_={
                "status": stmt.excluded.status,
                "file_url": stmt.excluded.file_url,
                "submitted_at": stmt.excluded.submitted_at,
            },
        )
        await session.execute(stmt)
    logger.info("Entrega registrada: estudiante=%s evaluación=%s", student_code, evaluation_id)
    return True
