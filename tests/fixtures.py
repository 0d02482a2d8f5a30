from datetime import date

from sqlalchemy import create_engine, insert
from sqlalchemy.pool import StaticPool

from fraud_dashboard.database.base import Base, reporting_metadata
from fraud_dashboard.models import Customer, fraud_risk_dashboard, import_all_models


def memory_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


def reset_schema(bind, with_view=True):
    import_all_models()
    reporting_metadata.drop_all(bind=bind)
    Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)
    if with_view:
        reporting_metadata.create_all(bind=bind)


def add_customers(bind, customer_ids):
    with bind.begin() as conn:
        for customer_id in customer_ids:
            conn.execute(
                insert(Customer).values(
                    customer_id=customer_id,
                    name="Customer {}".format(customer_id),
                    city="Pune",
                    meter_type="SMART",
                )
            )


def add_risk_rows(bind, rows):
    """rows: iterable of (customer_id, fraud_score, risk_level)."""
    with bind.begin() as conn:
        for customer_id, score, level in rows:
            conn.execute(
                insert(fraud_risk_dashboard).values(
                    customer_id=customer_id,
                    name="Customer {}".format(customer_id),
                    city="Pune",
                    fraud_score=score,
                    risk_level=level,
                    reading_month=date(2025, 1, 1),
                    units_consumed=100.0,
                    meter_type="SMART",
                )
            )


class ManualScheduler:
    """Collects delayed callbacks so tests can fire them explicitly."""

    def __init__(self):
        self.calls = []

    def schedule(self, delay_seconds, callback):
        self.calls.append((delay_seconds, callback))

    def run_next(self):
        _delay, callback = self.calls.pop(0)
        return callback()


class RecordingView:
    def __init__(self):
        self.metrics = []
        self.charts = []
        self.tables = []
        self.buttons = []
        self.dates = []
        self.alerts = []
        self.cleared = 0

    def show_metrics(self, display):
        self.metrics.append(display)

    def show_chart(self, bars):
        self.charts.append(bars)

    def show_cases(self, rows):
        self.tables.append(rows)

    def set_button(self, state):
        self.buttons.append(state)

    def set_reading_date(self, value):
        self.dates.append(value)

    def clear_consumption(self):
        self.cleared += 1

    def alert(self, message):
        self.alerts.append(message)
