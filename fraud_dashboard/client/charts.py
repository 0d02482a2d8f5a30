from dataclasses import dataclass

from fraud_dashboard.core.constants import (
    CHART_BUCKETS,
    CHART_DEFAULT_DENOMINATOR,
    CHART_FALLBACK_COUNTS,
    CHART_MIN_WIDTH_PERCENT,
)
from fraud_dashboard.core.risk_rules import risk_buckets

BAR_STAGGER_MS = 200

# Manual chart check used by the CLI.
SAMPLE_CHART_COUNTS = {"critical": 5, "high": 8, "medium": 3, "low": 4, "total": 20}


@dataclass(frozen=True)
class ChartBar:
    bucket: str
    count: int
    width_percent: float
    delay_ms: int


def bucket_counts(cases, total_customers):
    return risk_buckets(cases, total_customers)


def fallback_counts():
    return dict(CHART_FALLBACK_COUNTS)


def chart_bars(counts):
    total = counts.get("total") or 0
    denominator = total if total > 0 else CHART_DEFAULT_DENOMINATOR

    bars = []
    for index, bucket in enumerate(CHART_BUCKETS, start=1):
        count = int(counts.get(bucket) or 0)
        percent = count / denominator * 100
        bars.append(
            ChartBar(
                bucket=bucket,
                count=count,
                width_percent=max(percent, CHART_MIN_WIDTH_PERCENT[bucket]),
                delay_ms=index * BAR_STAGGER_MS,
            )
        )
    return bars


__all__ = [
    "BAR_STAGGER_MS",
    "ChartBar",
    "SAMPLE_CHART_COUNTS",
    "bucket_counts",
    "chart_bars",
    "fallback_counts",
]
