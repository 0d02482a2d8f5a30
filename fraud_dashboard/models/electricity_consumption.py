from datetime import datetime, timezone

from sqlalchemy import Column, Date, DateTime, Float, ForeignKey, Index, Integer

from fraud_dashboard.database.base import Base


class ElectricityConsumption(Base):
    __tablename__ = "electricity_consumption"

    consumption_id = Column(Integer, primary_key=True)
    customer_id = Column(Integer, ForeignKey("customers.customer_id"), nullable=False)

    consumption_kwh = Column(Float, nullable=False)
    reading_date = Column(Date, nullable=False)
    meter_reading = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        Index("idx_electricity_consumption_created", "created_at"),
    )


__all__ = ["ElectricityConsumption"]
