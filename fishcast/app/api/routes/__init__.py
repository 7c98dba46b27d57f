# fishcast/app/api/routes/__init__.py
from fastapi import APIRouter

from fishcast.app.api.routes.alerts import router as alerts_router
from fishcast.app.api.routes.auth import router as auth_router
from fishcast.app.api.routes.catches import router as catches_router
from fishcast.app.api.routes.conditions import router as conditions_router
from fishcast.app.api.routes.hotspots import router as hotspots_router
from fishcast.app.api.routes.predictions import router as predictions_router
from fishcast.app.api.routes.stats import router as stats_router

api_router = APIRouter(prefix="/api")
api_router.include_router(auth_router)
api_router.include_router(conditions_router)
api_router.include_router(predictions_router)
api_router.include_router(catches_router)
api_router.include_router(hotspots_router)
api_router.include_router(alerts_router)
api_router.include_router(stats_router)

__all__ = ["api_router"]
