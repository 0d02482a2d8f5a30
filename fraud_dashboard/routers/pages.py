import logging
from urllib.parse import urlencode

from fastapi import APIRouter, Form, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

from fraud_dashboard.client.cases import TABLE_COLUMNS, case_rows, error_rows
from fraud_dashboard.client.charts import chart_bars, fallback_counts
from fraud_dashboard.client.metrics import error_display, metric_display
from fraud_dashboard.client.submission import DUPLICATE_ENTRY_ALERT, QUICK_FILL_PRESETS, is_duplicate_entry
from fraud_dashboard.client.view import METRIC_LABELS
from fraud_dashboard.core.constants import DEFAULT_DASHBOARD_PATH
from fraud_dashboard.core.dates import random_reading_date
from fraud_dashboard.core.errors import CustomerNotFoundError, describe_error
from fraud_dashboard.services.dashboard_service import (
    critical_cases,
    dashboard_metrics,
    risk_distribution,
)
from fraud_dashboard.services.reading_service import READING_ADDED_MESSAGE, add_reading

logger = logging.getLogger(__name__)

router = APIRouter(prefix=DEFAULT_DASHBOARD_PATH, tags=["Dashboard"])


def _page_context():
    try:
        metrics = metric_display(dashboard_metrics())
    except SQLAlchemyError:
        logger.exception("Dashboard page metrics error")
        metrics = error_display()

    try:
        bars = chart_bars(risk_distribution())
    except SQLAlchemyError:
        logger.exception("Dashboard page chart error")
        bars = chart_bars(fallback_counts())

    try:
        rows = case_rows(critical_cases())
    except SQLAlchemyError:
        logger.exception("Dashboard page critical cases error")
        rows = error_rows()

    return {
        "metrics": metrics,
        "metric_labels": METRIC_LABELS,
        "bars": bars,
        "rows": rows,
        "columns": TABLE_COLUMNS,
        "presets": QUICK_FILL_PRESETS,
        "reading_date": random_reading_date().isoformat(),
    }


@router.get("/", response_class=HTMLResponse)
def dashboard_page(
    request: Request,
    message: str | None = Query(None),
    error: str | None = Query(None),
):
    templates = request.app.state.templates
    context = _page_context()
    context.update({"message": message, "error": error})
    return templates.TemplateResponse(request, "dashboard.html", context)


@router.post("/readings")
def submit_reading(
    customer_id: int = Form(...),
    consumption: float = Form(...),
    reading_date: str = Form(...),
):
    try:
        add_reading(customer_id=customer_id, consumption=consumption, reading_date=reading_date)
    except CustomerNotFoundError as exc:
        outcome = {"error": str(exc)}
    except (SQLAlchemyError, ValueError) as exc:
        logger.exception("Dashboard page add reading error")
        detail = describe_error(exc)
        outcome = {"error": DUPLICATE_ENTRY_ALERT if is_duplicate_entry(detail) else detail}
    else:
        outcome = {"message": READING_ADDED_MESSAGE}
    return RedirectResponse(
        url="{}/?{}".format(DEFAULT_DASHBOARD_PATH, urlencode(outcome)),
        status_code=303,
    )


__all__ = ["router"]
