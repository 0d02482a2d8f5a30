from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import partial

from fraud_dashboard.client.api_client import DashboardApiError
from fraud_dashboard.client.cases import case_rows, error_rows
from fraud_dashboard.client.charts import bucket_counts, chart_bars, fallback_counts
from fraud_dashboard.client.metrics import error_display, metric_display
from fraud_dashboard.config import get_settings

logger = logging.getLogger(__name__)


def _outcome(future):
    try:
        return future.result(), None
    except DashboardApiError as exc:
        return None, exc


class DashboardController:
    """Loads metrics and critical cases together and renders them on a view.

    A failed load is retried after ``retry_delay`` seconds, at most
    ``max_retries`` times per call to :meth:`load_dashboard`; the attempt
    number travels with the retry so every fresh load starts from zero.
    """

    def __init__(self, api, view, scheduler, *, max_retries=None, retry_delay=None):
        settings = get_settings()
        self.api = api
        self.view = view
        self.scheduler = scheduler
        self.max_retries = settings.DASHBOARD_MAX_RETRIES if max_retries is None else max_retries
        self.retry_delay = (
            settings.DASHBOARD_RETRY_DELAY_SECONDS if retry_delay is None else retry_delay
        )

    def load_dashboard(self, attempt: int = 0) -> bool:
        logger.info("Loading dashboard data (attempt %d)", attempt + 1)
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="dashboard-fetch") as pool:
            metrics_future = pool.submit(self.api.get_dashboard_metrics)
            cases_future = pool.submit(self.api.get_critical_cases)
        metrics, metrics_error = _outcome(metrics_future)
        cases, cases_error = _outcome(cases_future)

        if metrics_error is None:
            self.view.show_metrics(metric_display(metrics))
            if cases_error is None:
                counts = bucket_counts(cases, metrics.get("totalCustomers", 0))
            else:
                counts = fallback_counts()
            logger.debug("Chart data calculated: %s", counts)
            self.view.show_chart(chart_bars(counts))
        else:
            logger.error("Metrics error: %s", metrics_error)
            self.view.show_metrics(error_display())

        if cases_error is None:
            self.view.show_cases(case_rows(cases))
        else:
            logger.error("Critical cases error: %s", cases_error)
            self.view.show_cases(error_rows())

        failure = metrics_error or cases_error
        if failure is None:
            logger.info("Dashboard loaded successfully")
            return True

        self._schedule_retry(attempt, failure)
        return False

    def _schedule_retry(self, attempt: int, failure: Exception) -> None:
        if attempt >= self.max_retries:
            logger.error(
                "Dashboard loading failed after %d retries: %s", self.max_retries, failure
            )
            return
        logger.warning(
            "Dashboard loading failed (%s); retrying in %.1fs (%d/%d)",
            failure,
            self.retry_delay,
            attempt + 1,
            self.max_retries,
        )
        self.scheduler.schedule(self.retry_delay, partial(self.load_dashboard, attempt + 1))


__all__ = ["DashboardController"]
