# cli/app.py
# CLI = interface provisória. Pode ser trocada por Web/app sem mexer no core.

from __future__ import annotations

from typing import Callable

from pydantic import BaseModel

from core.calculator import (
    compute_freight_cost,
    compute_route_cost,
    cost_composition,
    margin_below_threshold,
)
from core.config import configure_logging
from core.history import save_quote_json, snapshot_quote
from core.models import FreightCostInput, RouteCostInput
from core.presets import load_presets
from core.rules import MARGIN_ALERT_THRESHOLD


FREIGHT_FIELDS: list[tuple[str, str]] = [
    ("assetValue", "Valor do bem (R$)"),
    ("distanceKm", "Distância (km)"),
    ("flatFreightFee", "Frete OTD (R$)"),
    ("driverReturnFee", "Retorno motorista (R$)"),
    ("tollCost", "Pedágio (R$)"),
    ("vehicleFuelEfficiencyKmPerLiter", "Consumo do veículo (km/l)"),
    ("fuelPricePerLiter", "Preço do diesel (R$/l)"),
]

ROUTE_FIELDS: list[tuple[str, str]] = [
    ("distanceKm", "Distância (km)"),
    ("dieselPricePerLiter", "Preço do diesel (R$/l)"),
    ("fuelConsumptionKmPerLiter", "Consumo (km/l)"),
    ("tollCost", "Pedágio (R$)"),
    ("driverDailyCost", "Diária motorista (R$)"),
    ("returnTicketCost", "Passagem de retorno (R$)"),
    ("extraExpenses", "Despesas extras (R$)"),
    ("adValoremPercent", "Ad valorem (%)"),
    ("vehicleValue", "Valor do veículo (R$)"),
    ("profitMarginPercent", "Margem de lucro (%)"),
    ("adminFee", "Taxa administrativa (R$)"),
]


# ---------- FUNÇÕES DE ENTRADA ----------

def ask_text_default(prompt: str, default: str) -> str:
    """Enter -> default. O texto é validado pelo core, não aqui."""
    raw = input(f"{prompt} [{default}]: ").strip()
    return raw if raw else default


def ask_yes_no(prompt: str) -> bool:
    """Entrada sim/não segura: devolve True ou False."""
    while True:
        raw = input(prompt + " (s/n): ").strip().lower()
        if raw in ("s", "sim", "y", "yes"):
            return True
        if raw in ("n", "nao", "não", "no"):
            return False
        print("❌ Digite s ou n")


def ask_choice(prompt: str, options: list[str]) -> str:
    while True:
        raw = input(prompt).strip().lower()
        if raw in options:
            return raw
        print(f"❌ Opções: {', '.join(options)}")


def money(x: float) -> str:
    """Formato BRL: R$ 1.234,56"""
    s = f"{x:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"R$ {s}"


def _collect(fields: list[tuple[str, str]], defaults: dict[str, str]) -> dict[str, str]:
    return {key: ask_text_default(label, defaults.get(key, "")) for key, label in fields}


# ---------- CENÁRIOS ----------

def run_freight(defaults: dict[str, str]) -> tuple[BaseModel, BaseModel]:
    inp = FreightCostInput.model_validate(_collect(FREIGHT_FIELDS, defaults))
    res = compute_freight_cost(inp)

    print("\n--- Cotação de Frete PRO ---")
    print(f"Frete OTD:             {money(res.flat_freight_fee)}")
    print(f"Comissão motorista:    {money(res.driver_commission)}")
    print(f"Diesel:                {money(res.fuel_cost)}")
    print(f"Retorno motorista:     {money(res.driver_return_fee)}")
    print(f"Seguro:                {money(res.insurance_cost)}")
    print(f"Pedágio:               {money(res.toll_cost)}")
    print(f"Valor base:            {money(res.base_cost)}")
    print(f"Impostos (21,25%):     {money(res.tax_amount)}")
    print(f"VALOR TOTAL CTe:       {money(res.gross_total)}")
    print(f"Margem:                {res.margin_percent:.2f}%")

    slices = cost_composition(res)
    if slices and res.gross_total > 0:
        print("\nComposição:")
        for s in slices:
            print(f" - {s.label:<20} {s.value / res.gross_total * 100:6.2f}%")

    if margin_below_threshold(res):
        print(f"\n⚠️  Margem abaixo de {MARGIN_ALERT_THRESHOLD:.0f}%")

    print("----------------------------\n")
    return inp, res


def run_route(defaults: dict[str, str]) -> tuple[BaseModel, BaseModel]:
    inp = RouteCostInput.model_validate(_collect(ROUTE_FIELDS, defaults))
    res = compute_route_cost(inp)

    print("\n--- Gestão de Rotas ---")
    print(f"Combustível:           {money(res.fuel_cost)}")
    print(f"Arla 32 (5%):          {money(res.arla32_cost)}")
    print(f"Pedágio:               {money(res.toll_cost)}")
    print(f"Diária motorista:      {money(res.driver_daily_cost)}")
    print(f"Passagem retorno:      {money(res.return_ticket_cost)}")
    print(f"Despesas extras:       {money(res.extra_expenses)}")
    print(f"Ad valorem:            {money(res.ad_valorem_cost)}")
    print(f"Taxa administrativa:   {money(res.admin_fee)}")
    print(f"Custo total:           {money(res.total_cost)}")
    print(f"PREÇO SUGERIDO:        {money(res.suggested_price)}")
    print(f"Lucro líquido:         {money(res.net_profit)}")
    print("-----------------------\n")
    return inp, res


SCENARIOS: dict[str, Callable[[dict[str, str]], tuple[BaseModel, BaseModel]]] = {
    "frete": run_freight,
    "rota": run_route,
}
KIND_BY_SCENARIO = {"frete": "freight", "rota": "route"}


# ---------- CLI PRINCIPAL ----------

def run_cli() -> None:
    print("\n=== OTD Cotações (CLI) ===\n")

    presets = load_presets()

    client_name = input("Cliente (opcional): ").strip()
    reference = input("Referência / nº OTD (opcional): ").strip()

    scenario = ask_choice("\nCalculadora (frete/rota): ", list(SCENARIOS))
    kind = KIND_BY_SCENARIO[scenario]

    inp, res = SCENARIOS[scenario](presets[kind])

    if ask_yes_no("Salvar cotação no histórico (JSON)?"):
        payload = snapshot_quote(kind, inp, res, client_name=client_name, reference=reference)
        path = save_quote_json(payload)
        print(f"✅ Salvo: {path}\n")


def main() -> None:
    configure_logging()
    run_cli()


if __name__ == "__main__":
    main()
