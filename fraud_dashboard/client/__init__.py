from fraud_dashboard.client.api_client import DashboardApiClient, DashboardApiError
from fraud_dashboard.client.controller import DashboardController
from fraud_dashboard.client.submission import ButtonState, ReadingForm, SubmissionController
from fraud_dashboard.client.timers import TimerScheduler
from fraud_dashboard.client.view import ConsoleDashboardView, DashboardView

__all__ = [
    "ButtonState",
    "ConsoleDashboardView",
    "DashboardApiClient",
    "DashboardApiError",
    "DashboardController",
    "DashboardView",
    "ReadingForm",
    "SubmissionController",
    "TimerScheduler",
]
