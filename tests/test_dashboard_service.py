import unittest

from sqlalchemy.exc import SQLAlchemyError

from fraud_dashboard.services.dashboard_service import (
    critical_cases,
    dashboard_metrics,
    risk_distribution,
)
from tests.fixtures import add_customers, add_risk_rows, memory_engine, reset_schema


class DashboardMetricsTest(unittest.TestCase):
    def setUp(self):
        self.engine = memory_engine()
        reset_schema(self.engine)
        add_customers(self.engine, range(1, 21))

    def tearDown(self):
        self.engine.dispose()

    def test_empty_view_reports_zeroes(self):
        metrics = dashboard_metrics(bind=self.engine)
        self.assertEqual(metrics["totalCustomers"], 20)
        self.assertEqual(metrics["criticalCases"], 0)
        self.assertEqual(metrics["highRiskCases"], 0)
        self.assertEqual(metrics["avgFraudScore"], 0)
        self.assertEqual(metrics["detectionRate"], "0%")

    def test_counts_and_rates(self):
        add_risk_rows(
            self.engine,
            [(1, 96.0, "CRITICAL"), (2, 88.0, "HIGH"), (3, 80.0, "HIGH"), (4, 10.333, "LOW")],
        )
        metrics = dashboard_metrics(bind=self.engine)
        self.assertEqual(metrics["criticalCases"], 1)
        self.assertEqual(metrics["highRiskCases"], 2)
        self.assertEqual(metrics["avgFraudScore"], 68.58)
        self.assertEqual(metrics["detectionRate"], "15%")

    def test_no_customers_means_zero_rate(self):
        empty = memory_engine()
        reset_schema(empty)
        add_risk_rows(empty, [(1, 99.0, "CRITICAL")])
        metrics = dashboard_metrics(bind=empty)
        self.assertEqual(metrics["totalCustomers"], 0)
        self.assertEqual(metrics["criticalCases"], 1)
        self.assertEqual(metrics["detectionRate"], "0%")
        empty.dispose()

    def test_missing_view_raises_store_error(self):
        bare = memory_engine()
        reset_schema(bare, with_view=False)
        with self.assertRaises(SQLAlchemyError):
            dashboard_metrics(bind=bare)
        bare.dispose()


class CriticalCasesTest(unittest.TestCase):
    def setUp(self):
        self.engine = memory_engine()
        reset_schema(self.engine)

    def tearDown(self):
        self.engine.dispose()

    def test_only_flagged_rows_sorted_by_score(self):
        add_risk_rows(
            self.engine,
            [
                (1, 76.0, "HIGH"),
                (2, 99.0, "CRITICAL"),
                (3, 70.0, "MEDIUM"),
                (4, 86.5, "HIGH"),
            ],
        )
        cases = critical_cases(bind=self.engine)
        self.assertEqual([case["customer_id"] for case in cases], [2, 4, 1])
        self.assertEqual(
            [case["anomaly_types"] for case in cases],
            [
                "Consumption spike, Meter tampering",
                "Usage pattern anomaly",
                "Consumption irregularity",
            ],
        )
        self.assertEqual(str(cases[0]["last_reading_date"]), "2025-01-01")
        self.assertEqual(cases[0]["meter_type"], "SMART")

    def test_limited_to_twenty_rows(self):
        add_risk_rows(
            self.engine,
            [(customer_id, 50.0 + customer_id, "HIGH") for customer_id in range(1, 31)],
        )
        cases = critical_cases(bind=self.engine)
        self.assertEqual(len(cases), 20)
        scores = [case["fraud_score"] for case in cases]
        self.assertEqual(scores, sorted(scores, reverse=True))
        self.assertEqual(scores[0], 80.0)


class RiskDistributionTest(unittest.TestCase):
    def test_buckets_cover_whole_view(self):
        engine = memory_engine()
        reset_schema(engine)
        add_customers(engine, range(1, 31))
        rows = [(customer_id, 90.0, "CRITICAL") for customer_id in range(1, 23)]
        rows += [(23, 80.0, "HIGH"), (24, 65.0, "MEDIUM"), (25, 30.0, "LOW")]
        add_risk_rows(engine, rows)

        distribution = risk_distribution(bind=engine)

        self.assertEqual(
            distribution,
            {"critical": 22, "high": 1, "medium": 1, "low": 6, "total": 30},
        )
        engine.dispose()


if __name__ == "__main__":
    unittest.main()
