from sqlalchemy import Column, Date, Float, Integer, String, Table

from fraud_dashboard.database.base import reporting_metadata

# Read-only view maintained by the store; scores and levels are computed there.
fraud_risk_dashboard = Table(
    "fraud_risk_dashboard",
    reporting_metadata,
    Column("customer_id", Integer, primary_key=True),
    Column("name", String),
    Column("city", String),
    Column("fraud_score", Float),
    Column("risk_level", String),
    Column("reading_month", Date),
    Column("units_consumed", Float),
    Column("meter_type", String),
)


__all__ = ["fraud_risk_dashboard"]
