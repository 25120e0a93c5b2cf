import pytest

from core import config
from core.models import FreightCostInput, RouteCostInput


@pytest.fixture
def freight_form():
    """Form values of the Cotação de Frete PRO screen, as text."""
    return {
        "assetValue": "500000",
        "distanceKm": "500",
        "flatFreightFee": "1200",
        "driverReturnFee": "400",
        "tollCost": "189",
        "vehicleFuelEfficiencyKmPerLiter": "2.5",
        "fuelPricePerLiter": "6.00",
    }


@pytest.fixture
def freight_input(freight_form):
    return FreightCostInput.model_validate(freight_form)


@pytest.fixture
def route_form():
    return {
        "distanceKm": "300",
        "dieselPricePerLiter": "6.50",
        "fuelConsumptionKmPerLiter": "3.5",
        "tollCost": "120",
        "driverDailyCost": "250",
        "returnTicketCost": "180",
        "extraExpenses": "40",
        "adValoremPercent": "0.10",
        "vehicleValue": "200000",
        "profitMarginPercent": "15",
        "adminFee": "50",
    }


@pytest.fixture
def route_input(route_form):
    return RouteCostInput.model_validate(route_form)


@pytest.fixture
def history_dir(tmp_path, monkeypatch):
    """Redirect saved quotes to a temp directory."""
    path = tmp_path / "history"
    monkeypatch.setattr(config, "HISTORY_DIR", path)
    return path
