from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from core.calculator import compute_freight_cost, compute_route_cost, cost_composition
from core.history import load_quote_history, save_quote_json, snapshot_quote
from core.models import (
    CostSlice,
    FreightCostBreakdown,
    FreightCostInput,
    QuoteKind,
    RouteCostBreakdown,
    RouteCostInput,
    SaveQuoteRequest,
)
from core.presets import load_presets

logger = logging.getLogger(__name__)

app = FastAPI(title="OTD Freight Quote API", version="1.0.0")

# o painel roda em outra origem
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/presets")
def presets() -> dict[str, dict[str, str]]:
    try:
        return load_presets()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/freight-quote", response_model=FreightCostBreakdown)
def freight_quote(inp: FreightCostInput = Body(...)) -> FreightCostBreakdown:
    """
    Cotação de Frete PRO. Campos chegam como texto ou número;
    valores inválidos viram o default do campo, nunca erro.
    """
    return compute_freight_cost(inp)


@app.post("/freight-quote/composition", response_model=list[CostSlice])
def freight_composition(inp: FreightCostInput = Body(...)) -> list[CostSlice]:
    return cost_composition(compute_freight_cost(inp))


@app.post("/route-cost", response_model=RouteCostBreakdown)
def route_cost(inp: RouteCostInput = Body(...)) -> RouteCostBreakdown:
    return compute_route_cost(inp)


@app.post("/quotes")
def save_quote(req: SaveQuoteRequest = Body(...)) -> dict[str, Any]:
    """Recalcula a partir da entrada e grava o snapshot no histórico."""
    if req.kind == "freight":
        inp: FreightCostInput | RouteCostInput = FreightCostInput.model_validate(req.input)
        breakdown: FreightCostBreakdown | RouteCostBreakdown = compute_freight_cost(inp)
    else:
        inp = RouteCostInput.model_validate(req.input)
        breakdown = compute_route_cost(inp)

    payload = snapshot_quote(
        req.kind,
        inp,
        breakdown,
        client_name=req.client_name,
        reference=req.reference,
    )
    try:
        save_quote_json(payload)
    except OSError as e:
        logger.error("Failed to save quote: %s", e)
        raise HTTPException(status_code=500, detail="Could not save quote")

    return payload


@app.get("/quotes")
def list_quotes(kind: Optional[QuoteKind] = None) -> list[dict[str, Any]]:
    return load_quote_history(kind=kind)
