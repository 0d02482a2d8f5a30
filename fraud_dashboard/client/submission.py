from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from fraud_dashboard.client.api_client import DashboardApiError
from fraud_dashboard.core.dates import random_reading_date

logger = logging.getLogger(__name__)

SUCCESS_RESET_SECONDS = 1.5
FAILURE_RESET_SECONDS = 3.0

# MySQL and SQLite wording for the customer/date uniqueness violation.
DUPLICATE_ENTRY_MARKERS = ("Duplicate entry", "UNIQUE constraint failed")
DUPLICATE_ENTRY_ALERT = (
    "This customer already has a reading for this date. Try a different date or customer."
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

QUICK_FILL_PRESETS = {
    "normal": (5, 150),
    "suspicious": (3, 1200),
    "critical": (7, -50),
    "high": (8, 800),
}


class ButtonState(Enum):
    IDLE = "Add Reading"
    SUBMITTING = "Adding..."
    SUCCESS = "Added Successfully!"
    FAILURE = "Error!"

    @property
    def label(self) -> str:
        return self.value

    @property
    def disabled(self) -> bool:
        return self is not ButtonState.IDLE


@dataclass
class ReadingForm:
    customer_id: str = ""
    consumption: str = ""
    reading_date: str = ""


def _leading_number(pattern, text):
    match = pattern.match(str(text))
    return match.group(1) if match else None


def parse_form(form: ReadingForm) -> dict:
    """Read the form the way a browser's parseInt/parseFloat would.

    Only the leading numeric prefix counts, so "5.0" is customer 5 and
    "150kWh" is 150; a field with no leading number is rejected.
    """
    customer_text = _leading_number(_LEADING_INT, form.customer_id)
    if customer_text is None:
        raise ValueError("Customer ID must be a whole number")
    consumption_text = _leading_number(_LEADING_FLOAT, form.consumption)
    if consumption_text is None:
        raise ValueError("Consumption must be a number")
    customer_id = int(customer_text)
    consumption = float(consumption_text)
    reading_date = str(form.reading_date).strip()
    if not reading_date:
        raise ValueError("Reading date is required")
    return {"customer_id": customer_id, "consumption": consumption, "reading_date": reading_date}


def is_duplicate_entry(message: str) -> bool:
    return any(marker in message for marker in DUPLICATE_ENTRY_MARKERS)


class SubmissionController:
    """Submit button flow: Idle -> Submitting -> Success | Failure -> Idle."""

    def __init__(
        self,
        api,
        view,
        scheduler,
        reload_dashboard,
        *,
        rng=None,
        success_reset_seconds=SUCCESS_RESET_SECONDS,
        failure_reset_seconds=FAILURE_RESET_SECONDS,
    ):
        self.api = api
        self.view = view
        self.scheduler = scheduler
        self.reload_dashboard = reload_dashboard
        self.rng = rng
        self.success_reset_seconds = success_reset_seconds
        self.failure_reset_seconds = failure_reset_seconds
        self.state = ButtonState.IDLE

    def _set_state(self, state: ButtonState) -> None:
        self.state = state
        self.view.set_button(state)

    def seed_date(self, form: ReadingForm) -> str:
        form.reading_date = random_reading_date(rng=self.rng).isoformat()
        self.view.set_reading_date(form.reading_date)
        logger.debug("Set random date: %s", form.reading_date)
        return form.reading_date

    def fill_preset(self, form: ReadingForm, name: str) -> ReadingForm:
        try:
            customer_id, consumption = QUICK_FILL_PRESETS[name]
        except KeyError as exc:
            raise ValueError("Unknown preset: {}".format(name)) from exc
        form.customer_id = str(customer_id)
        form.consumption = str(consumption)
        self.seed_date(form)
        return form

    def submit(self, form: ReadingForm) -> bool:
        if self.state.disabled:
            logger.info("Submission ignored while button is %s", self.state.name)
            return False

        self._set_state(ButtonState.SUBMITTING)
        try:
            payload = parse_form(form)
            self.api.add_reading(**payload)
        except (ValueError, DashboardApiError) as exc:
            logger.error("Add reading error: %s", exc)
            self._fail(form, str(exc))
            return False

        self._set_state(ButtonState.SUCCESS)
        form.consumption = ""
        self.view.clear_consumption()
        self.seed_date(form)
        self.scheduler.schedule(self.success_reset_seconds, self._after_success)
        return True

    def _after_success(self) -> None:
        # Reset first; the reload may block on the network or raise.
        self._set_state(ButtonState.IDLE)
        self.reload_dashboard()

    def _fail(self, form: ReadingForm, message: str) -> None:
        self._set_state(ButtonState.FAILURE)
        self.scheduler.schedule(self.failure_reset_seconds, self._reset)
        if is_duplicate_entry(message):
            self.view.alert(DUPLICATE_ENTRY_ALERT)
            self.seed_date(form)
        else:
            self.view.alert("Error: " + message)

    def _reset(self) -> None:
        self._set_state(ButtonState.IDLE)


__all__ = [
    "ButtonState",
    "DUPLICATE_ENTRY_ALERT",
    "QUICK_FILL_PRESETS",
    "ReadingForm",
    "SubmissionController",
    "is_duplicate_entry",
    "parse_form",
]
