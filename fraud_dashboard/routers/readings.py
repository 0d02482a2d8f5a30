import logging

from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from fraud_dashboard.core.errors import CustomerNotFoundError, failure_payload
from fraud_dashboard.schemas.reading import AddReadingRequest
from fraud_dashboard.services.reading_service import (
    READING_ADDED_MESSAGE,
    add_reading,
    recent_readings,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Readings API"])


@router.post("/add-reading")
def post_reading(payload: AddReadingRequest):
    try:
        add_reading(
            customer_id=payload.customer_id,
            consumption=payload.consumption,
            reading_date=payload.reading_date,
        )
    except CustomerNotFoundError as exc:
        logger.warning("Rejected reading: %s", exc)
        return failure_payload(exc)
    except (SQLAlchemyError, ValueError) as exc:
        logger.exception("Add reading API error")
        return failure_payload(exc)
    return {"success": True, "message": READING_ADDED_MESSAGE}


@router.get("/recent-readings")
def get_recent_readings():
    try:
        data = recent_readings()
    except SQLAlchemyError as exc:
        logger.exception("Recent readings API error")
        return failure_payload(exc)
    return {"success": True, "data": data}


__all__ = ["router"]
