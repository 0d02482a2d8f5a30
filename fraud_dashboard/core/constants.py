from datetime import date
from pathlib import Path


PACKAGE_DIR = Path(__file__).resolve().parents[1]

TEMPLATES_DIR = PACKAGE_DIR / "templates"

RISK_CRITICAL = "CRITICAL"
RISK_HIGH = "HIGH"

# (lower bound inclusive, label), highest first.
ANOMALY_TIERS = (
    (95, "Consumption spike, Meter tampering"),
    (85, "Usage pattern anomaly"),
    (75, "Consumption irregularity"),
)
DEFAULT_ANOMALY_TYPE = "Minor deviation detected"

MEDIUM_SCORE_RANGE = (60, 75)
CHART_BUCKETS = ("critical", "high", "medium", "low")
CHART_DEFAULT_DENOMINATOR = 20
CHART_MIN_WIDTH_PERCENT = {"critical": 2, "high": 2, "medium": 2, "low": 10}
CHART_FALLBACK_COUNTS = {"critical": 2, "high": 3, "medium": 5, "low": 10, "total": 20}

RANDOM_DATE_START = date(2024, 12, 1)
RANDOM_DATE_END = date(2025, 12, 31)

DEFAULT_DASHBOARD_PATH = "/dashboard"
