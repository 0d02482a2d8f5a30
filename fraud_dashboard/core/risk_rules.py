import math

from fraud_dashboard.core.constants import (
    ANOMALY_TIERS,
    DEFAULT_ANOMALY_TYPE,
    MEDIUM_SCORE_RANGE,
    RISK_CRITICAL,
    RISK_HIGH,
)


def round_half_up(value, digits=2):
    if value is None:
        return 0
    factor = 10 ** digits
    return math.floor(float(value) * factor + 0.5) / factor


def format_percent(value):
    if value == int(value):
        return "{}%".format(int(value))
    return "{}%".format(value)


def detection_rate(critical_cases, high_risk_cases, total_customers):
    if not total_customers or total_customers <= 0:
        return 0
    return round_half_up((critical_cases + high_risk_cases) / total_customers * 100)


def anomaly_type(fraud_score):
    if fraud_score is None:
        return DEFAULT_ANOMALY_TYPE
    score = float(fraud_score)
    for lower_bound, label in ANOMALY_TIERS:
        if score >= lower_bound:
            return label
    return DEFAULT_ANOMALY_TYPE


def normalize_risk_level(value):
    return str(value or "").strip().upper()


def risk_buckets(cases, total_customers):
    """Count chart buckets for a list of case rows (dicts with risk_level/fraud_score).

    ``low`` absorbs every customer not otherwise accounted for and is clamped
    at zero when the rows outnumber ``total_customers``.
    """
    critical = 0
    high = 0
    medium = 0
    low_bound, high_bound = MEDIUM_SCORE_RANGE
    for case in cases:
        level = normalize_risk_level(case.get("risk_level"))
        if level == RISK_CRITICAL:
            critical += 1
        elif level == RISK_HIGH:
            high += 1
        else:
            score = case.get("fraud_score")
            if score is not None and low_bound <= float(score) < high_bound:
                medium += 1

    total = int(total_customers or 0)
    accounted_for = critical + high + medium
    return {
        "critical": critical,
        "high": high,
        "medium": medium,
        "low": max(0, total - accounted_for),
        "total": total,
    }
