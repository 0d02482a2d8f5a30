from fraud_dashboard.database.base import Base, reporting_metadata
from fraud_dashboard.database.engine import check_connection, engine, ensure_schema
from fraud_dashboard.database.session import SessionLocal

__all__ = [
    "Base",
    "SessionLocal",
    "check_connection",
    "engine",
    "ensure_schema",
    "reporting_metadata",
]
