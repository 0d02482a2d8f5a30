from datetime import date
from typing import Optional, Union

from pydantic import BaseModel


class DashboardMetrics(BaseModel):
    totalCustomers: int
    criticalCases: int
    highRiskCases: int
    avgFraudScore: float
    detectionRate: str


class CriticalCase(BaseModel):
    customer_id: int
    name: Optional[str] = None
    city: Optional[str] = None
    fraud_score: Optional[float] = None
    risk_level: Optional[str] = None
    last_reading_date: Optional[Union[date, str]] = None
    units_consumed: Optional[float] = None
    meter_type: Optional[str] = None
    anomaly_types: str


class RiskDistribution(BaseModel):
    critical: int
    high: int
    medium: int
    low: int
    total: int
