"""Guardado atómico de la inscripción (borrado + inserción masiva en una transacción)."""
import pytest
from sqlalchemy import event, func, select

from app.core.database import Database
from app.core.exceptions import NotFoundError, TransactionError
from app.models import Enrollment
from app.schemas.inscripcion import EnrolledSubjectIn
from app.services import inscripcion_service
from tests.conftest import user_id

PERIODO = "2026-I"


def materia(codigo: str, **horario) -> dict:
    base = {
        "codigo": codigo,
        "day": "Lunes",
        "dayIdx": 0,
        "startTime": "07:00",
        "endTime": "08:30",
        "room": "A-12",
        "color": "#1e88e5",
        "duration": 2,
        "professor": "Prof. Rivas",
    }
    base.update(horario)
    return base


async def guardar(client, materias, student_code="A001", **extra):
    return await client.post(
        "/api/enrollments/save",
        json={"studentCode": student_code, "enrolledSubjects": materias, **extra},
    )


async def filas_inscripcion(db: Database, student_code: str, period: str = PERIODO) -> list[int]:
    uid = await user_id(db, student_code)
    async with db.session() as session:
        result = await session.execute(
            select(Enrollment.subject_id)
            .where(Enrollment.user_id == uid, Enrollment.period == period)
            .order_by(Enrollment.subject_id)
        )
        return list(result.scalars().all())


async def test_guardar_y_leer_combina_materia_y_horario(client):
    response = await guardar(client, [materia("MAT101", day="Martes", dayIdx=1)])
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["saved"] == 1
    assert body["period"] == PERIODO

    response = await client.get("/api/enrollments/A001")
    assert response.status_code == 200
    [fila] = response.json()
    assert fila["code"] == "MAT101"
    assert fila["name"] == "Matemática I"
    assert fila["day"] == "Martes"
    assert fila["dayIdx"] == 1
    assert fila["startTime"] == "07:00"
    assert fila["professor"] == "Prof. Rivas"


async def test_segundo_guardado_reemplaza_el_primero(client, db):
    await guardar(client, [materia("MAT101"), materia("NAV301")])
    await guardar(client, [materia("FIS201")])

    response = await client.get("/api/enrollments/A001")
    assert [f["code"] for f in response.json()] == ["FIS201"]
    assert await filas_inscripcion(db, "A001") == [2]


async def test_guardar_lista_vacia_deja_la_inscripcion_vacia(client, db):
    await guardar(client, [materia("MAT101")])
    response = await guardar(client, [])
    assert response.status_code == 200
    assert response.json()["saved"] == 0
    assert await filas_inscripcion(db, "A001") == []


async def test_lista_nula_equivale_a_vacia(client, db):
    await guardar(client, [materia("MAT101"), materia("FIS201")])
    response = await guardar(client, None)
    assert response.status_code == 200
    assert response.json()["saved"] == 0
    assert await filas_inscripcion(db, "A001") == []


async def test_codigo_inexistente_se_omite(client):
    response = await guardar(client, [materia("XXX999"), materia("MAT101")])
    assert response.status_code == 200
    assert response.json()["saved"] == 1

    response = await client.get("/api/enrollments/A001")
    assert [f["code"] for f in response.json()] == ["MAT101"]


async def test_codigo_repetido_genera_una_sola_fila(client, db):
    response = await guardar(client, [materia("MAT101", room="A-1"), materia("MAT101", room="B-2")])
    assert response.status_code == 200
    assert response.json()["saved"] == 1

    response = await client.get("/api/enrollments/A001")
    [fila] = response.json()
    assert fila["room"] == "A-1"


async def test_periodos_independientes(client, db):
    await guardar(client, [materia("MAT101")], period="2025-II")
    await guardar(client, [materia("FIS201")])

    assert await filas_inscripcion(db, "A001", "2025-II") == [1]
    assert await filas_inscripcion(db, "A001", PERIODO) == [2]

    response = await client.get("/api/enrollments/A001", params={"period": "2025-II"})
    assert [f["code"] for f in response.json()] == ["MAT101"]


async def test_no_afecta_a_otros_estudiantes(client, db):
    await guardar(client, [materia("MAT101")], student_code="A002")
    await guardar(client, [materia("FIS201")], student_code="A001")
    await guardar(client, [], student_code="A001")

    assert await filas_inscripcion(db, "A002") == [1]


async def test_estudiante_inexistente_es_404_sin_escrituras(client, db):
    response = await guardar(client, [materia("MAT101")], student_code="NOEXISTE")
    assert response.status_code == 404
    assert response.json()["success"] is False
    assert response.json()["error"] == "not_found"

    async with db.session() as session:
        assert await session.scalar(select(func.count()).select_from(Enrollment)) == 0


async def test_lectura_de_estudiante_sin_inscripcion(client):
    response = await client.get("/api/enrollments/A002")
    assert response.status_code == 200
    assert response.json() == []


async def test_fallo_tras_el_borrado_revierte_y_conserva_el_conjunto_previo(client, db):
    await guardar(client, [materia("MAT101"), materia("NAV301")])
    assert await filas_inscripcion(db, "A001") == [1, 3]

    def fallar_insercion(conn, cursor, statement, parameters, context, executemany):
        if statement.lstrip().upper().startswith("INSERT INTO ENROLLMENTS"):
            raise RuntimeError("disco lleno")

    event.listen(db.engine.sync_engine, "before_cursor_execute", fallar_insercion)
    try:
        response = await guardar(client, [materia("FIS201")])
    finally:
        event.remove(db.engine.sync_engine, "before_cursor_execute", fallar_insercion)

    assert response.status_code == 500
    assert response.json()["success"] is False
    assert response.json()["error"] == "transaction_failed"
    assert await filas_inscripcion(db, "A001") == [1, 3]


async def test_servicio_lanza_transaction_error_y_conserva_filas(db):
    await inscripcion_service.guardar_inscripcion(
        db, "A001", PERIODO, [EnrolledSubjectIn.model_validate(materia("MAT101"))]
    )

    def fallar_insercion(conn, cursor, statement, parameters, context, executemany):
        if statement.lstrip().upper().startswith("INSERT INTO ENROLLMENTS"):
            raise RuntimeError("fallo simulado")

    event.listen(db.engine.sync_engine, "before_cursor_execute", fallar_insercion)
    try:
        with pytest.raises(TransactionError):
            await inscripcion_service.guardar_inscripcion(
                db, "A001", PERIODO, [EnrolledSubjectIn.model_validate(materia("FIS201"))]
            )
    finally:
        event.remove(db.engine.sync_engine, "before_cursor_execute", fallar_insercion)

    assert await filas_inscripcion(db, "A001") == [1]


async def test_servicio_estudiante_inexistente(db):
    with pytest.raises(NotFoundError):
        await inscripcion_service.guardar_inscripcion(db, "NOEXISTE", PERIODO, [])


def test_horario_se_serializa_con_claves_del_cliente():
    entrada = EnrolledSubjectIn.model_validate(materia("MAT101", room=None))
    documento = entrada.schedule().to_document()
    assert "codigo" not in documento
    assert "room" not in documento
    assert documento["dayIdx"] == 0
    assert documento["startTime"] == "07:00"
