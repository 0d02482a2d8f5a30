from dataclasses import dataclass

ROW_STAGGER_MS = 100
HIGH_SCORE_THRESHOLD = 80
HIGH_SCORE_COLOR = "#dc3545"
MODERATE_SCORE_COLOR = "#ffc107"

NO_CASES_MESSAGE = "No critical cases found"
LOAD_ERROR_MESSAGE = "Failed to load critical cases"
TABLE_COLUMNS = ("Customer ID", "Name", "City", "Fraud Score", "Risk Level", "Last Reading")


@dataclass(frozen=True)
class CaseRow:
    customer_id: object
    name: str
    city: str
    fraud_score: object
    score_color: str
    risk_level: str
    risk_class: str
    last_reading: str
    delay_ms: int


@dataclass(frozen=True)
class PlaceholderRow:
    message: str
    css_class: str
    colspan: int = len(TABLE_COLUMNS)


def score_color(fraud_score):
    if fraud_score is not None and float(fraud_score) >= HIGH_SCORE_THRESHOLD:
        return HIGH_SCORE_COLOR
    return MODERATE_SCORE_COLOR


def case_row(case, index=0):
    risk_level = case.get("risk_level") or "LOW"
    last_reading = case.get("last_reading_date") or case.get("reading_month") or "N/A"
    return CaseRow(
        customer_id=case.get("customer_id"),
        name=case.get("name") or "N/A",
        city=case.get("city") or "N/A",
        fraud_score=case.get("fraud_score"),
        score_color=score_color(case.get("fraud_score")),
        risk_level=risk_level,
        risk_class="risk-{}".format(str(risk_level).lower()),
        last_reading=str(last_reading),
        delay_ms=index * ROW_STAGGER_MS,
    )


def case_rows(cases):
    """Table rows for a case list; an empty list yields the placeholder row."""
    if not cases:
        return [PlaceholderRow(NO_CASES_MESSAGE, "loading")]
    return [case_row(case, index) for index, case in enumerate(cases)]


def error_rows():
    return [PlaceholderRow(LOAD_ERROR_MESSAGE, "error")]


__all__ = [
    "CaseRow",
    "LOAD_ERROR_MESSAGE",
    "NO_CASES_MESSAGE",
    "PlaceholderRow",
    "TABLE_COLUMNS",
    "case_row",
    "case_rows",
    "error_rows",
    "score_color",
]
