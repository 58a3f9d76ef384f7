"""Conexión asíncrona a la base de datos con SQLAlchemy 2.0 (pool con ciclo de vida explícito)."""
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Request
from sqlalchemy import BigInteger, Integer, Select, Table, event, func, inspect, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import AsyncAdaptedQueuePool

from app.core.config import Settings
from app.core.exceptions import AppError, ServiceUnavailableError, TransactionError

logger = logging.getLogger(__name__)

# BIGINT en PostgreSQL; en SQLite solo INTEGER PRIMARY KEY es autoincremental
BigIntPK = BigInteger().with_variant(Integer, "sqlite")


class Base(DeclarativeBase):
    """Base para todos los modelos SQLAlchemy."""

    pass


def _activar_claves_foraneas(dbapi_connection, connection_record):
    # SQLite no aplica ON DELETE CASCADE sin este pragma
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Pool de conexiones compartido por el proceso.

    Se crea una vez al iniciar la aplicación y se inyecta en cada handler.
    Las lecturas usan ``session()``; las escrituras de varias sentencias usan
    ``transaction()``, que reserva una conexión exclusiva hasta el commit o
    rollback y la devuelve al pool en cualquier caso.
    """

    def __init__(
        self,
        url: str,
        *,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_timeout: float = 30.0,
        classroom_enabled: bool | None = None,
    ):
        self.engine = create_async_engine(
            url,
            echo=echo,
            pool_pre_ping=True,
            poolclass=AsyncAdaptedQueuePool,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
        )
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _activar_claves_foraneas)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        self.classroom_enabled = classroom_enabled
        self.classroom_available = bool(classroom_enabled)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url_async,
            echo=settings.debug,
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_timeout=settings.pool_timeout,
            classroom_enabled=settings.classroom_enabled,
        )

    async def start(self, *, create_tables: bool = True, include_classroom: bool = True) -> None:
        """Crea las tablas (si se pide) y determina si el aula virtual está disponible."""
        from app import models  # noqa: F401 - registra modelos en Base.metadata
        from app.models.classroom import CLASSROOM_TABLES

        if create_tables:
            tablas = [
                t for t in Base.metadata.sorted_tables
                if include_classroom or t.name not in CLASSROOM_TABLES
            ]
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all, tables=tablas)

        if self.classroom_enabled is None:
            async with self.engine.connect() as conn:
                existentes = await conn.run_sync(
                    lambda sync_conn: set(inspect(sync_conn).get_table_names())
                )
            self.classroom_available = CLASSROOM_TABLES <= existentes
        else:
            self.classroom_available = self.classroom_enabled
        logger.info(
            "Base de datos lista (%s); aula virtual %s",
            self.engine.dialect.name,
            "disponible" if self.classroom_available else "no disponible",
        )

    async def dispose(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Sesión para lecturas sueltas; la conexión vuelve al pool al salir."""
        async with self.session_factory() as session:
            yield session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """Unidad de trabajo atómica: commit al salir, rollback ante cualquier error."""
        async with self.session_factory() as session:
            try:
                async with session.begin():
                    yield session
            except AppError:
                raise
            except PoolTimeoutError as exc:
                raise ServiceUnavailableError(
                    "Base de datos no disponible. Intente nuevamente."
                ) from exc
            except Exception as exc:
                logger.exception("Transacción revertida")
                raise TransactionError(str(getattr(exc, "orig", None) or exc)) from exc


def dialect_insert(session: AsyncSession, model):
    """INSERT del dialecto activo, con soporte de ON CONFLICT (PostgreSQL y SQLite)."""
    if session.get_bind().dialect.name == "sqlite":
        return sqlite_insert(model)
    return pg_insert(model)


def setval_identidad(tabla: Table) -> Select:
    """SELECT que lleva la secuencia IDENTITY de ``tabla`` al mayor id existente (PostgreSQL)."""
    return select(
        func.setval(
            func.pg_get_serial_sequence(tabla.name, "id"),
            func.coalesce(func.max(tabla.c.id), 1),
        )
    )


async def sincronizar_identidad(session: AsyncSession, model) -> None:
    """Ajusta la secuencia tras insertar filas con id explícito; en SQLite no hace falta."""
    if session.get_bind().dialect.name != "postgresql":
        return
    await session.execute(setval_identidad(model.__table__))


def get_database(request: Request) -> Database:
    """Dependencia: devuelve el pool creado en el ciclo de vida de la aplicación."""
    return request.app.state.database
