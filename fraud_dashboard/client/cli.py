import argparse
import logging
import time

from fraud_dashboard.client.api_client import DashboardApiClient
from fraud_dashboard.client.charts import SAMPLE_CHART_COUNTS, chart_bars
from fraud_dashboard.client.controller import DashboardController
from fraud_dashboard.client.submission import QUICK_FILL_PRESETS, ReadingForm, SubmissionController
from fraud_dashboard.client.timers import TimerScheduler
from fraud_dashboard.client.view import ConsoleDashboardView
from fraud_dashboard.core.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Terminal fraud risk dashboard.")
    parser.add_argument("--api-base", help="API base URL (defaults to DASHBOARD_API_BASE).")
    parser.add_argument("--animate", action="store_true", help="Animate metric counters.")
    parser.add_argument(
        "--watch",
        type=float,
        default=0,
        metavar="SECONDS",
        help="Reload the dashboard every SECONDS until interrupted.",
    )
    parser.add_argument("--test-chart", action="store_true", help="Render the sample chart and exit.")

    reading = parser.add_argument_group("add reading")
    reading.add_argument("--customer-id", help="Customer ID for a new reading.")
    reading.add_argument("--consumption", help="Consumption in kWh (may be negative).")
    reading.add_argument("--date", help="Reading date YYYY-MM-DD (random when omitted).")
    reading.add_argument(
        "--fill",
        choices=sorted(QUICK_FILL_PRESETS),
        help="Submit one of the quick test cases.",
    )
    return parser.parse_args(argv)


def main(argv=None):
    setup_logging()
    args = parse_args(argv)

    view = ConsoleDashboardView(animate=args.animate)
    if args.test_chart:
        view.show_chart(chart_bars(SAMPLE_CHART_COUNTS))
        return 0

    api = DashboardApiClient(base_url=args.api_base)
    scheduler = TimerScheduler()
    dashboard = DashboardController(api, view, scheduler)
    submission = SubmissionController(api, view, scheduler, reload_dashboard=dashboard.load_dashboard)

    dashboard.load_dashboard()

    form = ReadingForm()
    submission.seed_date(form)
    if args.fill:
        submission.fill_preset(form, args.fill)
    if args.customer_id is not None:
        form.customer_id = args.customer_id
    if args.consumption is not None:
        form.consumption = args.consumption
    if args.date:
        form.reading_date = args.date
    if args.fill or args.customer_id is not None:
        submission.submit(form)

    try:
        scheduler.wait()
        while args.watch > 0:
            time.sleep(args.watch)
            dashboard.load_dashboard()
            scheduler.wait()
    except KeyboardInterrupt:
        logger.info("Dashboard stopped.")
    finally:
        scheduler.cancel_all()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
