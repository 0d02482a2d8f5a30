import logging

from sqlalchemy import insert, select

from fraud_dashboard.config import get_settings
from fraud_dashboard.core.dates import normalize_date
from fraud_dashboard.core.errors import CustomerNotFoundError
from fraud_dashboard.database.engine import engine
from fraud_dashboard.models.consumption import Consumption
from fraud_dashboard.models.customer import Customer
from fraud_dashboard.models.electricity_consumption import ElectricityConsumption
from fraud_dashboard.schemas.reading import RecentReading
from fraud_dashboard.services.meter_service import MeterReadingSource, default_meter_source

logger = logging.getLogger(__name__)

READING_ADDED_MESSAGE = "Reading added successfully! Fraud analysis updated."


def customer_exists(conn, customer_id) -> bool:
    stmt = select(Customer.customer_id).where(Customer.customer_id == customer_id).limit(1)
    return conn.execute(stmt).first() is not None


def latest_units_consumed(conn, customer_id) -> float:
    stmt = (
        select(Consumption.units_consumed)
        .where(Consumption.customer_id == customer_id)
        .order_by(Consumption.reading_month.desc())
        .limit(1)
    )
    value = conn.execute(stmt).scalar()
    return float(value) if value is not None else 0.0


def add_reading(
    customer_id: int,
    consumption: float,
    reading_date,
    *,
    meter_source: MeterReadingSource | None = None,
    bind=None,
) -> dict:
    """Record one submitted reading in both consumption logs.

    Both inserts share one transaction: a failure in either (including a
    duplicate customer/date reading) leaves neither table changed.
    Raises ``CustomerNotFoundError`` before any write for unknown customers.
    """
    settings = get_settings()
    meter_source = meter_source or default_meter_source()
    consumption = float(consumption)
    reading_date_value = normalize_date(reading_date)
    if reading_date_value is None:
        raise ValueError("readingDate must be a date in YYYY-MM-DD format")
    reading_date = reading_date_value

    with (bind or engine).begin() as conn:
        if not customer_exists(conn, customer_id):
            raise CustomerNotFoundError(customer_id, settings.CUSTOMER_ID_RANGE_HINT)

        meter_reading = meter_source.read(customer_id, reading_date)
        result = conn.execute(
            insert(ElectricityConsumption).values(
                customer_id=customer_id,
                consumption_kwh=consumption,
                reading_date=reading_date,
                meter_reading=meter_reading,
            )
        )
        entry_id = result.inserted_primary_key[0]

        previous_units = latest_units_consumed(conn, customer_id)
        bill_amount = consumption * settings.BILLING_RATE_PER_UNIT
        conn.execute(
            insert(Consumption).values(
                customer_id=customer_id,
                reading_month=reading_date,
                units_consumed=consumption,
                previous_units=previous_units,
                bill_amount=bill_amount,
            )
        )

    logger.info(
        "Reading added for customer %s on %s (%.2f kWh, previous %.2f)",
        customer_id,
        reading_date,
        consumption,
        previous_units,
    )
    return {
        "consumption_id": entry_id,
        "customer_id": customer_id,
        "meter_reading": meter_reading,
        "previous_units": previous_units,
        "bill_amount": bill_amount,
    }


def recent_readings(limit=None, bind=None):
    if limit is None:
        limit = get_settings().RECENT_READINGS_LIMIT

    stmt = (
        select(
            ElectricityConsumption.consumption_id,
            ElectricityConsumption.customer_id,
            Customer.name,
            ElectricityConsumption.consumption_kwh,
            ElectricityConsumption.reading_date,
            ElectricityConsumption.meter_reading,
            ElectricityConsumption.created_at,
        )
        .join(Customer, ElectricityConsumption.customer_id == Customer.customer_id)
        .order_by(
            ElectricityConsumption.created_at.desc(),
            ElectricityConsumption.consumption_id.desc(),
        )
        .limit(limit)
    )

    with (bind or engine).connect() as conn:
        rows = conn.execute(stmt).mappings().all()

    return [RecentReading.model_validate(dict(row)).model_dump() for row in rows]


__all__ = [
    "READING_ADDED_MESSAGE",
    "add_reading",
    "customer_exists",
    "latest_units_consumed",
    "recent_readings",
]
