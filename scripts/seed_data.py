import argparse
from datetime import date

from sqlalchemy import delete, insert, select

from fraud_dashboard.core.logging import setup_logging
from fraud_dashboard.database import SessionLocal, engine, ensure_schema, reporting_metadata
from fraud_dashboard.database.engine import is_sqlite
from fraud_dashboard.models import Consumption, Customer, ElectricityConsumption, fraud_risk_dashboard

CITIES = ("Mumbai", "Delhi", "Pune", "Chennai", "Kolkata")
METER_TYPES = ("SMART", "DIGITAL", "ANALOG")

# Static scores for local development only; production reads the store's view.
SAMPLE_RISK_ROWS = (
    (7, 97.5, "CRITICAL"),
    (3, 91.0, "CRITICAL"),
    (8, 86.0, "HIGH"),
    (12, 78.5, "HIGH"),
    (15, 72.0, "MEDIUM"),
    (4, 64.0, "MEDIUM"),
    (1, 22.0, "LOW"),
)


def parse_args():
    parser = argparse.ArgumentParser(description="Seed sample customers and readings.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing data before seeding.",
    )
    parser.add_argument(
        "--sample-risk-view",
        action="store_true",
        help="Create a static fraud_risk_dashboard table (SQLite only).",
    )
    return parser.parse_args()


def _customers():
    return [
        Customer(
            customer_id=customer_id,
            name="Customer {:02d}".format(customer_id),
            city=CITIES[customer_id % len(CITIES)],
            meter_type=METER_TYPES[customer_id % len(METER_TYPES)],
        )
        for customer_id in range(1, 21)
    ]


def _consumption_history(customers):
    rows = []
    for customer in customers:
        previous = 0.0
        for month in (9, 10, 11):
            units = 120.0 + customer.customer_id * 5 + month
            rows.append(
                Consumption(
                    customer_id=customer.customer_id,
                    reading_month=date(2024, month, 1),
                    units_consumed=units,
                    previous_units=previous,
                    bill_amount=units * 6,
                )
            )
            previous = units
    return rows


def seed_sample_risk_view():
    if not is_sqlite:
        print("Sample risk view skipped: only created on SQLite.")
        return
    reporting_metadata.create_all(bind=engine)
    with engine.begin() as conn:
        conn.execute(delete(fraud_risk_dashboard))
        names = dict(conn.execute(select(Customer.customer_id, Customer.name)).all())
        cities = dict(conn.execute(select(Customer.customer_id, Customer.city)).all())
        for customer_id, score, level in SAMPLE_RISK_ROWS:
            conn.execute(
                insert(fraud_risk_dashboard).values(
                    customer_id=customer_id,
                    name=names.get(customer_id),
                    city=cities.get(customer_id),
                    fraud_score=score,
                    risk_level=level,
                    reading_month=date(2024, 11, 1),
                    units_consumed=0.0,
                    meter_type="SMART",
                )
            )
    print("Sample fraud_risk_dashboard rows created.")


def main():
    setup_logging()
    args = parse_args()

    ensure_schema()

    db = SessionLocal()
    try:
        if args.reset:
            db.execute(delete(ElectricityConsumption))
            db.execute(delete(Consumption))
            db.execute(delete(Customer))
            db.commit()

        has_customer = db.execute(select(Customer.customer_id).limit(1)).first()
        if has_customer:
            print("Seed skipped: customers already exist.")
        else:
            customers = _customers()
            db.add_all(customers)
            db.flush()
            db.add_all(_consumption_history(customers))
            db.commit()
            print("Seed data created.")
    finally:
        db.close()

    if args.sample_risk_view:
        seed_sample_risk_view()


if __name__ == "__main__":
    main()
