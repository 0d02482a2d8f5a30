from sqlalchemy import Column, Date, Float, ForeignKey, Integer, UniqueConstraint

from fraud_dashboard.database.base import Base


class Consumption(Base):
    __tablename__ = "consumption"

    id = Column(Integer, primary_key=True)
    customer_id = Column(Integer, ForeignKey("customers.customer_id"), nullable=False)

    reading_month = Column(Date, nullable=False)
    units_consumed = Column(Float, nullable=False)
    previous_units = Column(Float, nullable=False, default=0)
    bill_amount = Column(Float, nullable=False)

    # One reading per customer per date; duplicates surface as store errors.
    __table_args__ = (
        UniqueConstraint("customer_id", "reading_month", name="uq_consumption_customer_month"),
    )


__all__ = ["Consumption"]
