"""Routers de la API."""
from fastapi import APIRouter

from app.api.endpoints import admin, auth, aula, catalogo, inscripciones, onboarding

router = APIRouter()
router.include_router(catalogo.router)
router.include_router(inscripciones.router)
router.include_router(auth.router)
router.include_router(onboarding.router)
router.include_router(aula.router)
router.include_router(admin.router)
