import random

from fraud_dashboard.config import get_settings


class MeterReadingSource:
    """Supplies the meter register value stored with each submitted reading."""

    def read(self, customer_id: int, reading_date) -> int:
        raise NotImplementedError


class SimulatedMeterReadingSource(MeterReadingSource):
    """Stand-in for hardware telemetry: a uniform integer in [low, high]."""

    def __init__(self, low: int | None = None, high: int | None = None, rng: random.Random | None = None):
        settings = get_settings()
        self.low = settings.METER_READING_MIN if low is None else int(low)
        self.high = settings.METER_READING_MAX if high is None else int(high)
        if self.low > self.high:
            raise ValueError("meter reading range is empty")
        self._rng = rng or random.Random()

    def read(self, customer_id: int, reading_date) -> int:
        return self._rng.randint(self.low, self.high)


def default_meter_source() -> MeterReadingSource:
    return SimulatedMeterReadingSource()


__all__ = ["MeterReadingSource", "SimulatedMeterReadingSource", "default_meter_source"]
