import logging

from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from fraud_dashboard.core.errors import failure_payload
from fraud_dashboard.services.dashboard_service import (
    critical_cases,
    dashboard_metrics,
    risk_distribution,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Dashboard API"])


@router.get("/dashboard")
def get_dashboard_metrics():
    try:
        data = dashboard_metrics()
    except SQLAlchemyError as exc:
        logger.exception("Dashboard API error")
        return failure_payload(exc)
    return {"success": True, "data": data}


@router.get("/critical-cases")
def get_critical_cases():
    try:
        data = critical_cases()
    except SQLAlchemyError as exc:
        logger.exception("Critical cases API error")
        return failure_payload(exc)
    return {"success": True, "data": data}


@router.get("/risk-distribution")
def get_risk_distribution():
    try:
        data = risk_distribution()
    except SQLAlchemyError as exc:
        logger.exception("Risk distribution API error")
        return failure_payload(exc)
    return {"success": True, "data": data}


__all__ = ["router"]
