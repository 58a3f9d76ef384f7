"""Pool de conexiones: agotamiento, liberación de conexiones y salud del servicio."""
import pytest
from sqlalchemy import select, text
from sqlalchemy.dialects import postgresql

from app.core.database import Database, setval_identidad, sincronizar_identidad
from app.core.exceptions import NotFoundError, ServiceUnavailableError
from app.models import Career
from tests.conftest import sqlite_url


@pytest.fixture
async def pool_pequeno(db, tmp_path):
    # Mismo archivo que el fixture db, pero con una sola conexión disponible
    database = Database(sqlite_url(tmp_path), pool_size=1, max_overflow=0, pool_timeout=0.2)
    await database.start(create_tables=False)
    yield database
    await database.dispose()


async def test_pool_agotado_es_503_en_lectura(pool_pequeno, make_client):
    async with pool_pequeno.engine.connect():
        async with await make_client(pool_pequeno) as client:
            response = await client.get("/api/careers")
    assert response.status_code == 503
    assert response.json()["error"] == "service_unavailable"


async def test_pool_agotado_es_503_en_transaccion(pool_pequeno, make_client):
    async with pool_pequeno.engine.connect():
        with pytest.raises(ServiceUnavailableError):
            async with pool_pequeno.transaction() as session:
                await session.execute(text("SELECT 1"))

        async with await make_client(pool_pequeno) as client:
            response = await client.post(
                "/api/enrollments/save", json={"studentCode": "A001", "enrolledSubjects": []}
            )
    assert response.status_code == 503


async def test_la_conexion_vuelve_al_pool_en_cada_salida(pool_pequeno, make_client):
    async with await make_client(pool_pequeno) as client:
        # error de dominio, éxito y error otra vez: con una sola conexión nada debe quedar retenido
        for _ in range(3):
            response = await client.post(
                "/api/enrollments/save", json={"studentCode": "NOEXISTE", "enrolledSubjects": []}
            )
            assert response.status_code == 404
            response = await client.post(
                "/api/enrollments/save", json={"studentCode": "A001", "enrolledSubjects": []}
            )
            assert response.status_code == 200
            response = await client.get("/api/careers")
            assert response.status_code == 200


async def test_not_found_dentro_de_transaccion_se_propaga_sin_envolver(db):
    with pytest.raises(NotFoundError):
        async with db.transaction():
            raise NotFoundError("Usuario no encontrado")


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "Servicio en ejecución", "classroom": True}


async def test_validacion_devuelve_422(client):
    response = await client.post("/api/enrollments/save", json={"enrolledSubjects": []})
    assert response.status_code == 422


def test_setval_identidad_apunta_a_la_secuencia_de_la_tabla():
    sql = str(setval_identidad(Career.__table__).compile(dialect=postgresql.dialect()))
    assert "setval(pg_get_serial_sequence(" in sql
    assert "max(careers.id)" in sql
    assert "FROM careers" in sql


async def test_ids_explicitos_no_bloquean_inserciones_posteriores(db):
    # Las carreras 1 y 2 se sembraron con id explícito
    async with db.transaction() as session:
        await sincronizar_identidad(session, Career)
        session.add(Career(name="Ingeniería Naval"))

    async with db.session() as session:
        ids = (await session.scalars(select(Career.id).order_by(Career.id))).all()
    assert ids == [1, 2, 3]
