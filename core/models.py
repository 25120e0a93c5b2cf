from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .rules import DEFAULT_FUEL_EFFICIENCY, DEFAULT_FUEL_PRICE, parse_number

QuoteKind = Literal["freight", "route"]


class _CamelModel(BaseModel):
    # JSON sempre em camelCase (assetValue, grossTotal, ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------- Cotação de Frete PRO ----------

class FreightCostInput(_CamelModel):
    asset_value: float = 0.0
    distance_km: float = 0.0
    flat_freight_fee: float = 0.0  # frete OTD
    driver_return_fee: float = 0.0
    toll_cost: float = 0.0

    vehicle_fuel_efficiency_km_per_liter: float = DEFAULT_FUEL_EFFICIENCY
    fuel_price_per_liter: float = DEFAULT_FUEL_PRICE

    @field_validator(
        "asset_value",
        "distance_km",
        "flat_freight_fee",
        "driver_return_fee",
        "toll_cost",
        mode="before",
    )
    @classmethod
    def _parse_additive(cls, v: Any) -> float:
        return parse_number(v, 0.0)

    @field_validator("vehicle_fuel_efficiency_km_per_liter", mode="before")
    @classmethod
    def _parse_efficiency(cls, v: Any) -> float:
        # consumo 0 -> 1 (evita divisão por zero)
        return parse_number(v, DEFAULT_FUEL_EFFICIENCY, zero_is_default=True)

    @field_validator("fuel_price_per_liter", mode="before")
    @classmethod
    def _parse_fuel_price(cls, v: Any) -> float:
        return parse_number(v, DEFAULT_FUEL_PRICE, zero_is_default=True)


class FreightCostBreakdown(_CamelModel):
    driver_commission: float
    fuel_cost: float
    insurance_cost: float
    base_cost: float
    gross_total: float  # valor total do CTe
    tax_amount: float
    # é a fatia de impostos sobre o total, não margem de lucro
    margin_percent: float

    flat_freight_fee: float
    driver_return_fee: float
    toll_cost: float


class CostSlice(BaseModel):
    label: str
    value: float


# ---------- Gestão de Rotas ----------

class RouteCostInput(_CamelModel):
    distance_km: float = 0.0
    diesel_price_per_liter: float = 0.0
    fuel_consumption_km_per_liter: float = 0.0
    toll_cost: float = 0.0
    driver_daily_cost: float = 0.0
    return_ticket_cost: float = 0.0
    extra_expenses: float = 0.0
    ad_valorem_percent: float = 0.0
    vehicle_value: float = 0.0
    profit_margin_percent: float = 0.0
    admin_fee: float = 0.0

    @field_validator("*", mode="before")
    @classmethod
    def _parse_any(cls, v: Any) -> float:
        return parse_number(v, 0.0)


class RouteCostBreakdown(_CamelModel):
    fuel_cost: float
    arla32_cost: float
    ad_valorem_cost: float
    total_cost: float
    suggested_price: float
    net_profit: float

    toll_cost: float
    driver_daily_cost: float
    return_ticket_cost: float
    extra_expenses: float
    admin_fee: float


# ---------- Histórico ----------

class SaveQuoteRequest(_CamelModel):
    kind: QuoteKind
    input: dict[str, Any] = Field(default_factory=dict)
    client_name: str = ""
    reference: str = ""
