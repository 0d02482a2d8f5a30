import importlib

from fraud_dashboard.models.consumption import Consumption
from fraud_dashboard.models.customer import Customer
from fraud_dashboard.models.electricity_consumption import ElectricityConsumption
from fraud_dashboard.models.fraud_risk import fraud_risk_dashboard


def import_all_models() -> None:
    for module_name in (
        "fraud_dashboard.models.consumption",
        "fraud_dashboard.models.customer",
        "fraud_dashboard.models.electricity_consumption",
        "fraud_dashboard.models.fraud_risk",
    ):
        importlib.import_module(module_name)


__all__ = [
    "Consumption",
    "Customer",
    "ElectricityConsumption",
    "fraud_risk_dashboard",
    "import_all_models",
]
