"""
API router: aggregates the resource routers mounted under ``API_PREFIX``.
"""

from fastapi import APIRouter

from lapordesa.api.routes import admin, health, laporan, pengumuman

router = APIRouter(
    responses={
        400: {"description": "Bad Request"},
        401: {"description": "Unauthorized"},
        404: {"description": "Not Found"},
        500: {"description": "Internal Server Error"},
    }
)

router.include_router(admin.router)
router.include_router(laporan.router)
router.include_router(pengumuman.router)
router.include_router(health.router)
