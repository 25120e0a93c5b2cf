"""Quick runtime checks for the quote calculators.
Run: python scripts/quickcheck.py
Exits with code 0 on success, non-zero on failure.
"""
from core.calculator import compute_freight_cost, compute_route_cost
from core.models import FreightCostInput, RouteCostInput


def approx(a, b, tol=1e-6):
    return abs(a - b) <= tol


def main():
    inp = FreightCostInput.model_validate({
        "assetValue": "500000",
        "distanceKm": "500",
        "flatFreightFee": "1200",
        "driverReturnFee": "400",
        "tollCost": "189",
        "vehicleFuelEfficiencyKmPerLiter": "2.5",
        "fuelPricePerLiter": "6.00",
    })

    res = compute_freight_cost(inp)

    assert approx(res.driver_commission, 250.0)
    assert approx(res.fuel_cost, 1200.0)
    assert approx(res.insurance_cost, 150.0)
    assert approx(res.base_cost, 3389.0)
    assert approx(res.gross_total, 3389.0 / 0.7875)
    assert approx(res.margin_percent, 21.25)

    route = compute_route_cost(RouteCostInput(distance_km="100", fuel_consumption_km_per_liter="0"))

    assert route.fuel_cost == 0.0
    assert route.arla32_cost == 0.0

    print("Quickcheck OK")


if __name__ == '__main__':
    main()
