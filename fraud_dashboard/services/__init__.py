from fraud_dashboard.services.dashboard_service import (
    critical_cases,
    dashboard_metrics,
    risk_distribution,
)
from fraud_dashboard.services.meter_service import MeterReadingSource, SimulatedMeterReadingSource
from fraud_dashboard.services.reading_service import add_reading, recent_readings

__all__ = [
    "MeterReadingSource",
    "SimulatedMeterReadingSource",
    "add_reading",
    "critical_cases",
    "dashboard_metrics",
    "recent_readings",
    "risk_distribution",
]
