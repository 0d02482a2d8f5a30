from sqlalchemy import Column, Integer, String

from fraud_dashboard.database.base import Base


class Customer(Base):
    __tablename__ = "customers"

    customer_id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    city = Column(String, nullable=False)
    meter_type = Column(String)


__all__ = ["Customer"]
