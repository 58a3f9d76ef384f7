"""Errores de dominio y su traducción a respuestas HTTP."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Error base de la aplicación: lleva mensaje y código HTTP."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "server_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    """El código de estudiante, usuario o recurso referenciado no existe."""

    status_code = status.HTTP_404_NOT_FOUND
    error = "not_found"


class UnauthorizedError(AppError):
    """Credencial incorrecta."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error = "unauthorized"


class ConflictError(AppError):
    """Violación de unicidad (ej. código de estudiante ya registrado)."""

    status_code = status.HTTP_409_CONFLICT
    error = "conflict"


class TransactionError(AppError):
    """Fallo durante una escritura de varias sentencias; la transacción ya fue revertida."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error = "transaction_failed"


class ServiceUnavailableError(AppError):
    """No se pudo obtener una conexión del pool a tiempo."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    error = "service_unavailable"


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "message": message},
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    else:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return _error_response(exc.status_code, exc.error, exc.message)


async def pool_timeout_handler(request: Request, exc: PoolTimeoutError) -> JSONResponse:
    logger.error("Pool de conexiones agotado en %s %s", request.method, request.url.path)
    return _error_response(
        status.HTTP_503_SERVICE_UNAVAILABLE,
        ServiceUnavailableError.error,
        "Base de datos no disponible. Intente nuevamente.",
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Error de base de datos en %s %s", request.method, request.url.path)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        AppError.error,
        str(exc.orig) if getattr(exc, "orig", None) is not None else str(exc),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registra los manejadores de errores; el más específico primero."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(PoolTimeoutError, pool_timeout_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
