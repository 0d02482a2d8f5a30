import random
from datetime import date, datetime, timedelta

from fraud_dashboard.core.constants import RANDOM_DATE_END, RANDOM_DATE_START


def normalize_date(value):
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        value_text = value.strip()
        if not value_text:
            return None
        try:
            return date.fromisoformat(value_text)
        except ValueError:
            return None
    return None


def random_reading_date(start=RANDOM_DATE_START, end=RANDOM_DATE_END, rng=None):
    """Uniform random date in [start, end], for seeding the reading form."""
    rng = rng or random
    span_days = (end - start).days
    return start + timedelta(days=rng.randint(0, span_days))
