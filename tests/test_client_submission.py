import random
import unittest

from fraud_dashboard.client.api_client import DashboardApiError
from fraud_dashboard.client.submission import (
    DUPLICATE_ENTRY_ALERT,
    ButtonState,
    ReadingForm,
    SubmissionController,
    is_duplicate_entry,
    parse_form,
)
from tests.fixtures import ManualScheduler, RecordingView


class FakeApi:
    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def add_reading(self, customer_id, consumption, reading_date):
        self.calls.append((customer_id, consumption, reading_date))
        if self.error:
            raise DashboardApiError(self.error)
        return "Reading added successfully! Fraud analysis updated."


class SubmissionControllerTest(unittest.TestCase):
    def setUp(self):
        self.view = RecordingView()
        self.scheduler = ManualScheduler()
        self.reloads = 0

    def _reload(self):
        self.reloads += 1

    def _controller(self, api):
        return SubmissionController(
            api, self.view, self.scheduler, self._reload, rng=random.Random(3)
        )

    def test_success_clears_consumption_and_reloads_later(self):
        api = FakeApi()
        controller = self._controller(api)
        form = ReadingForm(customer_id="5", consumption="150", reading_date="2025-03-01")

        self.assertTrue(controller.submit(form))

        self.assertEqual(api.calls, [(5, 150.0, "2025-03-01")])
        self.assertEqual(self.view.buttons, [ButtonState.SUBMITTING, ButtonState.SUCCESS])
        self.assertEqual(form.consumption, "")
        self.assertEqual(self.view.cleared, 1)
        self.assertNotEqual(form.reading_date, "")
        self.assertEqual(self.reloads, 0)

        delay, _callback = self.scheduler.calls[0]
        self.assertEqual(delay, 1.5)
        self.scheduler.run_next()
        self.assertEqual(self.reloads, 1)
        self.assertEqual(controller.state, ButtonState.IDLE)

    def test_duplicate_date_alerts_and_picks_new_date(self):
        api = FakeApi(error="UNIQUE constraint failed: consumption.customer_id, consumption.reading_month")
        controller = self._controller(api)
        form = ReadingForm(customer_id="5", consumption="150", reading_date="2025-03-01")

        self.assertFalse(controller.submit(form))

        self.assertEqual(self.view.alerts, [DUPLICATE_ENTRY_ALERT])
        self.assertEqual(len(self.view.dates), 1)
        self.assertEqual(form.consumption, "150")
        self.assertEqual(controller.state, ButtonState.FAILURE)
        self.assertEqual(self.scheduler.calls[0][0], 3.0)
        self.scheduler.run_next()
        self.assertEqual(controller.state, ButtonState.IDLE)
        self.assertEqual(self.reloads, 0)

    def test_other_errors_are_prefixed(self):
        controller = self._controller(FakeApi(error="Customer ID 9999 not found. Available customers: 1-20"))
        form = ReadingForm(customer_id="9999", consumption="10", reading_date="2025-03-01")

        controller.submit(form)

        self.assertEqual(
            self.view.alerts, ["Error: Customer ID 9999 not found. Available customers: 1-20"]
        )
        self.assertEqual(form.reading_date, "2025-03-01")

    def test_button_is_disabled_until_reset(self):
        api = FakeApi(error="boom")
        controller = self._controller(api)
        form = ReadingForm(customer_id="1", consumption="10", reading_date="2025-03-01")
        controller.submit(form)

        self.assertFalse(controller.submit(form))
        self.assertEqual(len(api.calls), 1)

        self.scheduler.run_next()
        api.error = None
        self.assertTrue(controller.submit(form))
        self.assertEqual(len(api.calls), 2)

    def test_unparseable_form_never_reaches_api(self):
        api = FakeApi()
        controller = self._controller(api)

        controller.submit(ReadingForm(customer_id="abc", consumption="10", reading_date="2025-03-01"))

        self.assertEqual(api.calls, [])
        self.assertEqual(self.view.alerts, ["Error: Customer ID must be a whole number"])
        self.assertEqual(self.view.buttons, [ButtonState.SUBMITTING, ButtonState.FAILURE])

    def test_button_is_idle_while_dashboard_reloads(self):
        seen = []
        controller = SubmissionController(
            FakeApi(),
            self.view,
            self.scheduler,
            lambda: seen.append(controller.state),
            rng=random.Random(3),
        )
        controller.submit(ReadingForm(customer_id="5", consumption="150", reading_date="2025-03-01"))

        self.scheduler.run_next()

        self.assertEqual(seen, [ButtonState.IDLE])

    def test_failed_reload_leaves_button_idle(self):
        def reload():
            raise RuntimeError("reload failed")

        controller = SubmissionController(FakeApi(), self.view, self.scheduler, reload)
        controller.submit(ReadingForm(customer_id="5", consumption="150", reading_date="2025-03-01"))

        with self.assertRaises(RuntimeError):
            self.scheduler.run_next()
        self.assertEqual(controller.state, ButtonState.IDLE)

    def test_fill_preset(self):
        controller = self._controller(FakeApi())
        form = controller.fill_preset(ReadingForm(), "critical")
        self.assertEqual(form.customer_id, "7")
        self.assertEqual(form.consumption, "-50")
        self.assertTrue(form.reading_date)
        with self.assertRaises(ValueError):
            controller.fill_preset(ReadingForm(), "unknown")


class FormHelpersTest(unittest.TestCase):
    def test_parse_form_accepts_negative_consumption(self):
        parsed = parse_form(ReadingForm(customer_id=" 7 ", consumption="-50", reading_date="2025-02-10"))
        self.assertEqual(parsed, {"customer_id": 7, "consumption": -50.0, "reading_date": "2025-02-10"})

    def test_parse_form_reads_leading_numbers(self):
        cases = [
            ("5.0", "150", 5, 150.0),
            ("12abc", "1.5e2kWh", 12, 150.0),
            ("+8", " -.5", 8, -0.5),
        ]
        for customer_text, consumption_text, customer_id, consumption in cases:
            with self.subTest(customer=customer_text, consumption=consumption_text):
                parsed = parse_form(
                    ReadingForm(
                        customer_id=customer_text,
                        consumption=consumption_text,
                        reading_date="2025-02-10",
                    )
                )
                self.assertEqual(parsed["customer_id"], customer_id)
                self.assertEqual(parsed["consumption"], consumption)

    def test_parse_form_rejects_fields_without_leading_number(self):
        with self.assertRaises(ValueError):
            parse_form(ReadingForm(customer_id="abc5", consumption="5", reading_date="2025-02-10"))
        with self.assertRaises(ValueError):
            parse_form(ReadingForm(customer_id="5", consumption="kWh", reading_date="2025-02-10"))

    def test_parse_form_requires_date(self):
        with self.assertRaises(ValueError):
            parse_form(ReadingForm(customer_id="7", consumption="5", reading_date=" "))

    def test_duplicate_markers(self):
        self.assertTrue(is_duplicate_entry("Duplicate entry '5-2025-03-01' for key 'uq'"))
        self.assertTrue(is_duplicate_entry("UNIQUE constraint failed: consumption.customer_id"))
        self.assertFalse(is_duplicate_entry("HTTP 500"))


if __name__ == "__main__":
    unittest.main()
