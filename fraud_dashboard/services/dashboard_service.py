from sqlalchemy import text

from fraud_dashboard.config import get_settings
from fraud_dashboard.core.constants import RISK_CRITICAL, RISK_HIGH
from fraud_dashboard.core.risk_rules import (
    anomaly_type,
    detection_rate,
    format_percent,
    risk_buckets,
    round_half_up,
)
from fraud_dashboard.database.engine import engine
from fraud_dashboard.schemas.dashboard import CriticalCase, DashboardMetrics, RiskDistribution

# noinspection SqlNoDataSourceInspection
_TOTAL_CUSTOMERS_SQL = text("SELECT COUNT(*) AS total FROM customers")
# noinspection SqlNoDataSourceInspection
_RISK_LEVEL_COUNT_SQL = text(
    "SELECT COUNT(*) AS count FROM fraud_risk_dashboard WHERE risk_level = :risk_level"
)
# noinspection SqlNoDataSourceInspection
_AVG_SCORE_SQL = text("SELECT AVG(fraud_score) AS avg_score FROM fraud_risk_dashboard")


def _count_customers(conn):
    return int(conn.execute(_TOTAL_CUSTOMERS_SQL).scalar() or 0)


def dashboard_metrics(bind=None):
    with (bind or engine).connect() as conn:
        total_customers = _count_customers(conn)
        critical_cases = int(
            conn.execute(_RISK_LEVEL_COUNT_SQL, {"risk_level": RISK_CRITICAL}).scalar() or 0
        )
        high_risk_cases = int(
            conn.execute(_RISK_LEVEL_COUNT_SQL, {"risk_level": RISK_HIGH}).scalar() or 0
        )
        avg_score = conn.execute(_AVG_SCORE_SQL).scalar()

    rate = detection_rate(critical_cases, high_risk_cases, total_customers)
    metrics = DashboardMetrics(
        totalCustomers=total_customers,
        criticalCases=critical_cases,
        highRiskCases=high_risk_cases,
        avgFraudScore=round_half_up(avg_score) if avg_score else 0,
        detectionRate=format_percent(rate),
    )
    return metrics.model_dump()


def critical_cases(limit=None, bind=None):
    if limit is None:
        limit = get_settings().CRITICAL_CASES_LIMIT

    # noinspection SqlNoDataSourceInspection
    sql = text(
        """
        SELECT
            frd.customer_id,
            frd.name,
            frd.city,
            frd.fraud_score,
            frd.risk_level,
            frd.reading_month AS last_reading_date,
            frd.units_consumed,
            frd.meter_type
        FROM fraud_risk_dashboard frd
        WHERE frd.risk_level IN (:critical, :high)
        ORDER BY frd.fraud_score DESC
        LIMIT :limit
        """
    )
    params = {"critical": RISK_CRITICAL, "high": RISK_HIGH, "limit": limit}

    with (bind or engine).connect() as conn:
        rows = conn.execute(sql, params).mappings().all()

    return [
        CriticalCase(**row, anomaly_types=anomaly_type(row["fraud_score"])).model_dump()
        for row in rows
    ]


def risk_distribution(bind=None):
    """Chart buckets over the whole view, not just the top critical cases."""
    # noinspection SqlNoDataSourceInspection
    sql = text("SELECT risk_level, fraud_score FROM fraud_risk_dashboard")

    with (bind or engine).connect() as conn:
        total_customers = _count_customers(conn)
        rows = conn.execute(sql).mappings().all()

    return RiskDistribution(**risk_buckets(rows, total_customers)).model_dump()


__all__ = ["critical_cases", "dashboard_metrics", "risk_distribution"]
