"""Punto de entrada de la aplicación FastAPI."""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.api import router as api_router
from app.core.config import settings
from app.core.database import Database
from app.core.exceptions import register_exception_handlers

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Documentación Swagger: disponible en /docs (OpenAPI 3.0)
OPENAPI_TAGS = [
    {
        "name": "catalogo",
        "description": "Carreras, menciones, materias y materias aprobadas del estudiante.",
    },
    {
        "name": "inscripciones",
        "description": "Consulta y guardado atómico de la inscripción del periodo.",
    },
    {
        "name": "auth",
        "description": "Login con código de estudiante y contraseña; registro de cuentas.",
    },
    {
        "name": "onboarding",
        "description": "Primer ingreso: perfil del cadete y materias aprobadas previas.",
    },
    {
        "name": "aula",
        "description": "Aula virtual: compañeros, materiales, evaluaciones y entregas.",
    },
    {
        "name": "admin",
        "description": "Panel administrativo: usuarios y récord académico.",
    },
    {
        "name": "salud",
        "description": "Comprobación del estado del servicio.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gestiona el ciclo de vida: crea el pool al iniciar y lo cierra al terminar."""
    propio = app.state.database is None
    if propio:
        app.state.database = Database.from_settings(settings)
        await app.state.database.start(create_tables=settings.create_tables)
    try:
        yield
    finally:
        if propio:
            await app.state.database.dispose()
            app.state.database = None
            logger.info("Pool de conexiones cerrado")


def create_app(database: Database | None = None) -> FastAPI:
    """Construye la aplicación. Si se pasa ``database`` se usa ese pool (tests)."""
    app = FastAPI(
        title=settings.app_name,
        description="API REST del portal de inscripciones: catálogo, inscripción, onboarding, aula virtual y administración.",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.state.database = database

    # CORS: el frontend corre en otro puerto/dominio
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.get(
        "/health",
        tags=["salud"],
        summary="Estado del servicio",
        response_description="Indica que la API está en ejecución",
    )
    async def health_check(request: Request):
        """Comprueba que el servicio está activo e informa si el aula virtual está habilitada."""
        db: Database | None = request.app.state.database
        return {
            "status": "ok",
            "message": "Servicio en ejecución",
            "classroom": bool(db and db.classroom_available),
        }

    return app


app = create_app()


def run() -> None:
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
