from __future__ import annotations

from .models import (
    CostSlice,
    FreightCostBreakdown,
    FreightCostInput,
    RouteCostBreakdown,
    RouteCostInput,
)
from .rules import (
    ARLA32_RATE,
    DRIVER_COMMISSION_PER_KM,
    INSURANCE_RATE,
    MARGIN_ALERT_THRESHOLD,
    TAX_RATE,
    gross_up,
)


def compute_freight_cost(inp: FreightCostInput) -> FreightCostBreakdown:
    """Cotação de Frete PRO: custo base + gross-up de 21,25% de impostos."""
    driver_commission = DRIVER_COMMISSION_PER_KM * inp.distance_km
    fuel_cost = (inp.distance_km / inp.vehicle_fuel_efficiency_km_per_liter) * inp.fuel_price_per_liter
    insurance_cost = inp.asset_value * INSURANCE_RATE

    base_cost = (
        driver_commission
        + fuel_cost
        + inp.driver_return_fee
        + insurance_cost
        + inp.toll_cost
        + inp.flat_freight_fee
    )
    gross_total = gross_up(base_cost, TAX_RATE)
    tax_amount = gross_total - base_cost
    margin_percent = (tax_amount / gross_total) * 100 if gross_total > 0 else 0.0

    return FreightCostBreakdown(
        driver_commission=driver_commission,
        fuel_cost=fuel_cost,
        insurance_cost=insurance_cost,
        base_cost=base_cost,
        gross_total=gross_total,
        tax_amount=tax_amount,
        margin_percent=margin_percent,
        flat_freight_fee=inp.flat_freight_fee,
        driver_return_fee=inp.driver_return_fee,
        toll_cost=inp.toll_cost,
    )


def compute_route_cost(inp: RouteCostInput) -> RouteCostBreakdown:
    """Gestão de Rotas: custo total + margem de lucro sobre o custo."""
    # consumo <= 0 -> combustível zero (sem default, ao contrário do frete)
    if inp.fuel_consumption_km_per_liter > 0:
        fuel_cost = (inp.distance_km / inp.fuel_consumption_km_per_liter) * inp.diesel_price_per_liter
    else:
        fuel_cost = 0.0

    arla32_cost = fuel_cost * ARLA32_RATE
    ad_valorem_cost = (inp.vehicle_value * inp.ad_valorem_percent) / 100

    total_cost = (
        fuel_cost
        + arla32_cost
        + inp.toll_cost
        + inp.driver_daily_cost
        + inp.return_ticket_cost
        + inp.extra_expenses
        + ad_valorem_cost
        + inp.admin_fee
    )
    suggested_price = total_cost * (1 + inp.profit_margin_percent / 100)
    net_profit = suggested_price - total_cost

    return RouteCostBreakdown(
        fuel_cost=fuel_cost,
        arla32_cost=arla32_cost,
        ad_valorem_cost=ad_valorem_cost,
        total_cost=total_cost,
        suggested_price=suggested_price,
        net_profit=net_profit,
        toll_cost=inp.toll_cost,
        driver_daily_cost=inp.driver_daily_cost,
        return_ticket_cost=inp.return_ticket_cost,
        extra_expenses=inp.extra_expenses,
        admin_fee=inp.admin_fee,
    )


def cost_composition(breakdown: FreightCostBreakdown) -> list[CostSlice]:
    """Fatias para o gráfico de composição (só valores positivos)."""
    items = [
        CostSlice(label="Frete OTD", value=breakdown.flat_freight_fee),
        CostSlice(label="Comissão Motorista", value=breakdown.driver_commission),
        CostSlice(label="Diesel", value=breakdown.fuel_cost),
        CostSlice(label="Retorno Motorista", value=breakdown.driver_return_fee),
        CostSlice(label="Seguro", value=breakdown.insurance_cost),
        CostSlice(label="Pedágio", value=breakdown.toll_cost),
        CostSlice(label="Impostos (21,25%)", value=breakdown.tax_amount),
    ]
    return [s for s in items if s.value > 0]


def margin_below_threshold(
    breakdown: FreightCostBreakdown, threshold: float = MARGIN_ALERT_THRESHOLD
) -> bool:
    return breakdown.margin_percent < threshold
