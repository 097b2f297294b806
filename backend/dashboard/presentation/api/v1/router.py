"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from dashboard.presentation.api.v1.endpoints.health import router as health_router
from dashboard.presentation.api.v1.endpoints.auth import router as auth_router
from dashboard.presentation.api.v1.endpoints.views import router as views_router
from dashboard.presentation.api.v1.endpoints.modal import router as modal_router
from dashboard.presentation.api.v1.endpoints.clients import router as clients_router
from dashboard.presentation.api.v1.endpoints.projects import router as projects_router
from dashboard.presentation.api.v1.endpoints.invoices import router as invoices_router
from dashboard.presentation.api.v1.endpoints.profile import router as profile_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(views_router)
router.include_router(modal_router)
router.include_router(clients_router)
router.include_router(projects_router)
router.include_router(invoices_router)
router.include_router(profile_router)
