"""
HTTP API tests (FastAPI TestClient).
"""

import pytest
from fastapi.testclient import TestClient

from web.api import app


@pytest.fixture
def client():
    return TestClient(app)


class TestCalculatorEndpoints:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_presets(self, client):
        data = client.get("/presets").json()
        assert data["freight"]["flatFreightFee"] == "1200"
        assert data["route"]["adminFee"] == "50"

    def test_freight_quote_camel_case(self, client, freight_form):
        resp = client.post("/freight-quote", json=freight_form)
        assert resp.status_code == 200
        data = resp.json()
        assert data["driverCommission"] == pytest.approx(250.0)
        assert data["baseCost"] == pytest.approx(3389.0)
        assert data["grossTotal"] == pytest.approx(3389.0 / 0.7875)
        assert data["marginPercent"] == pytest.approx(21.25)

    def test_freight_quote_garbage_is_defaulted(self, client):
        resp = client.post("/freight-quote", json={
            "distanceKm": "100",
            "vehicleFuelEfficiencyKmPerLiter": "abc",
            "fuelPricePerLiter": "",
            "tollCost": None,
        })
        assert resp.status_code == 200
        assert resp.json()["fuelCost"] == pytest.approx(600.0)
        assert resp.json()["tollCost"] == 0.0

    def test_freight_quote_huge_integer_is_defaulted(self, client):
        resp = client.post("/freight-quote", json={"assetValue": 10**400, "distanceKm": "100"})
        assert resp.status_code == 200
        assert resp.json()["insuranceCost"] == 0.0

    def test_composition(self, client):
        resp = client.post("/freight-quote/composition", json={"flatFreightFee": "1200"})
        assert resp.status_code == 200
        assert [s["label"] for s in resp.json()] == ["Frete OTD", "Impostos (21,25%)"]

    def test_route_cost(self, client):
        resp = client.post("/route-cost", json={"distanceKm": "100", "fuelConsumptionKmPerLiter": "0"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["fuelCost"] == 0.0
        assert data["arla32Cost"] == 0.0
        assert data["suggestedPrice"] == 0.0


class TestQuoteHistoryEndpoints:

    def test_save_and_list(self, client, history_dir, freight_form, route_form):
        resp = client.post("/quotes", json={
            "kind": "freight",
            "input": freight_form,
            "clientName": "Concessionária Norte",
            "reference": "OTD00007",
        })
        assert resp.status_code == 200
        saved = resp.json()
        assert saved["output"]["grossTotal"] == 4303.49
        assert saved["meta"]["reference"] == "OTD00007"

        client.post("/quotes", json={"kind": "route", "input": route_form})

        assert len(client.get("/quotes").json()) == 2
        routes = client.get("/quotes", params={"kind": "route"}).json()
        assert [q["meta"]["kind"] for q in routes] == ["route"]
        assert len(list(history_dir.glob("*.json"))) == 2

    def test_unknown_kind_is_rejected(self, client, history_dir):
        resp = client.post("/quotes", json={"kind": "invoice", "input": {}})
        assert resp.status_code == 422
        assert not history_dir.exists()

    def test_write_failure_is_500(self, client, history_dir, monkeypatch):
        def boom(payload, history_dir=None):
            raise OSError("disk full")

        monkeypatch.setattr("web.api.save_quote_json", boom)
        resp = client.post("/quotes", json={"kind": "freight", "input": {}})
        assert resp.status_code == 500
