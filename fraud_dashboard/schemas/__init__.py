from fraud_dashboard.schemas.dashboard import CriticalCase, DashboardMetrics, RiskDistribution
from fraud_dashboard.schemas.reading import AddReadingRequest, RecentReading

__all__ = [
    "AddReadingRequest",
    "CriticalCase",
    "DashboardMetrics",
    "RecentReading",
    "RiskDistribution",
]
