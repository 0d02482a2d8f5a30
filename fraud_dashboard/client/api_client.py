import http.client
import json
import logging
from urllib import error, request
from urllib.parse import urlparse

from fraud_dashboard.config import get_settings

logger = logging.getLogger(__name__)

_ALLOWED_HTTP_SCHEMES = {"http", "https"}


class DashboardApiError(RuntimeError):
    """Transport failure, non-2xx status, or a ``success: false`` payload."""


def _validate_base_url(base_url):
    parsed = urlparse(base_url)
    if parsed.scheme.lower() not in _ALLOWED_HTTP_SCHEMES or not parsed.netloc:
        raise ValueError("DASHBOARD_API_BASE must be an absolute HTTP(S) URL")
    return base_url.rstrip("/")


class DashboardApiClient:
    """Calls the fraud dashboard REST API and unwraps its success envelope."""

    def __init__(self, base_url=None, timeout=None, urlopen=None):
        settings = get_settings()
        self.base_url = _validate_base_url(base_url or settings.DASHBOARD_API_BASE)
        self.timeout = timeout if timeout is not None else settings.DASHBOARD_REQUEST_TIMEOUT
        self._urlopen = urlopen or request.urlopen

    def _request(self, method, endpoint, payload=None):
        url = "{}{}".format(self.base_url, endpoint)
        data = None
        headers = {"Accept": "application/json"}
        if payload is not None:
            data = json.dumps(payload).encode("utf-8")
            headers["Content-Type"] = "application/json"

        req = request.Request(url, data=data, method=method, headers=headers)
        try:
            with self._urlopen(req, timeout=self.timeout) as response:  # nosec B310
                status_code = response.getcode()
                if status_code < 200 or status_code >= 300:
                    raise DashboardApiError("HTTP {}".format(status_code))
                body = response.read()
        except error.HTTPError as exc:
            raise DashboardApiError("HTTP {}".format(exc.code)) from exc
        except error.URLError as exc:
            raise DashboardApiError("Could not reach {}: {}".format(url, exc.reason)) from exc
        except http.client.HTTPException as exc:
            raise DashboardApiError("Malformed response from {}: {!r}".format(url, exc)) from exc
        except OSError as exc:
            raise DashboardApiError("Could not reach {}: {}".format(url, exc)) from exc

        try:
            result = json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as exc:
            raise DashboardApiError("Invalid JSON from {}".format(endpoint)) from exc

        if not isinstance(result, dict) or not result.get("success"):
            message = result.get("error") if isinstance(result, dict) else None
            if not message and endpoint == "/add-reading":
                message = "Failed to add reading"
            raise DashboardApiError(message or "Request to {} failed".format(endpoint))
        return result

    def _data(self, endpoint):
        result = self._request("GET", endpoint)
        if "data" not in result:
            raise DashboardApiError("Response from {} has no data".format(endpoint))
        return result["data"]

    def get_dashboard_metrics(self):
        return self._data("/dashboard")

    def get_critical_cases(self):
        return self._data("/critical-cases")

    def get_risk_distribution(self):
        return self._data("/risk-distribution")

    def get_recent_readings(self):
        return self._data("/recent-readings")

    def add_reading(self, customer_id, consumption, reading_date):
        payload = {
            "customerId": customer_id,
            "consumption": consumption,
            "readingDate": str(reading_date),
        }
        logger.info("Adding reading: %s", payload)
        result = self._request("POST", "/add-reading", payload)
        return result.get("message", "")


__all__ = ["DashboardApiClient", "DashboardApiError"]
