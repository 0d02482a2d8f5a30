from datetime import datetime, timezone

from fastapi import APIRouter

from fraud_dashboard.config import get_settings
from fraud_dashboard.database.engine import check_connection

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check():
    settings = get_settings()
    database_ok = check_connection()
    return {
        "status": "ok" if database_ok else "degraded",
        "app": settings.APP_NAME,
        "environment": settings.ENVIRONMENT,
        "database": database_ok,
        "time": datetime.now(timezone.utc).isoformat(),
    }
