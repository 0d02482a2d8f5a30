from fraud_dashboard.routers.dashboard import router as dashboard_api_router
from fraud_dashboard.routers.health import router as health_router
from fraud_dashboard.routers.pages import router as pages_router
from fraud_dashboard.routers.readings import router as readings_api_router

__all__ = [
    "dashboard_api_router",
    "health_router",
    "pages_router",
    "readings_api_router",
]
