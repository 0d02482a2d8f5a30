import sys
import time

from fraud_dashboard.client.cases import TABLE_COLUMNS, PlaceholderRow
from fraud_dashboard.client.metrics import (
    ANIMATED_METRICS,
    FRAME_INTERVAL_SECONDS,
    animation_frames,
)

METRIC_LABELS = {
    "totalCustomers": "Total customers",
    "criticalCases": "Critical cases",
    "highRiskCases": "High risk cases",
    "avgFraudScore": "Avg fraud score",
    "detectionRate": "Detection rate",
}

BAR_CHARACTER_WIDTH = 40


class DashboardView:
    """Rendering surface the dashboard controllers draw on."""

    def show_metrics(self, display):
        raise NotImplementedError

    def show_chart(self, bars):
        raise NotImplementedError

    def show_cases(self, rows):
        raise NotImplementedError

    def set_button(self, state):
        raise NotImplementedError

    def set_reading_date(self, value):
        raise NotImplementedError

    def clear_consumption(self):
        raise NotImplementedError

    def alert(self, message):
        raise NotImplementedError


class ConsoleDashboardView(DashboardView):
    def __init__(self, stream=None, animate=False):
        self.stream = stream or sys.stdout
        self.animate = animate

    def _write(self, line=""):
        self.stream.write(line + "\n")
        self.stream.flush()

    def _animate_metric(self, label, target):
        for value in animation_frames(target):
            self.stream.write("\r  {:<18} {}".format(label, value))
            self.stream.flush()
            time.sleep(FRAME_INTERVAL_SECONDS)
        self.stream.write("\n")

    def show_metrics(self, display):
        self._write("Metrics")
        for name, label in METRIC_LABELS.items():
            value = display.get(name)
            if self.animate and name in ANIMATED_METRICS and isinstance(value, (int, float)):
                self._animate_metric(label, value)
            else:
                self._write("  {:<18} {}".format(label, value))

    def show_chart(self, bars):
        self._write("Risk distribution")
        for bar in bars:
            filled = max(1, round(bar.width_percent / 100 * BAR_CHARACTER_WIDTH))
            self._write("  {:<9} {:<{width}} {}".format(
                bar.bucket, "#" * filled, bar.count, width=BAR_CHARACTER_WIDTH
            ))

    def show_cases(self, rows):
        self._write("Critical cases")
        self._write("  " + " | ".join(TABLE_COLUMNS))
        for row in rows:
            if isinstance(row, PlaceholderRow):
                self._write("  " + row.message)
                continue
            self._write("  {} | {} | {} | {} | {} | {}".format(
                row.customer_id,
                row.name,
                row.city,
                row.fraud_score,
                row.risk_level,
                row.last_reading,
            ))

    def set_button(self, state):
        self._write("[{}]".format(state.label))

    def set_reading_date(self, value):
        self._write("Reading date: {}".format(value))

    def clear_consumption(self):
        pass

    def alert(self, message):
        self._write("! " + message)


__all__ = ["ConsoleDashboardView", "DashboardView", "METRIC_LABELS"]
