# core/rules.py
# Constantes de negócio e parsing dos campos de texto dos formulários.

from __future__ import annotations

import logging
import math
from typing import Any

logger = logging.getLogger(__name__)

# --- Cotação de Frete PRO ---
DRIVER_COMMISSION_PER_KM = 0.50
INSURANCE_RATE = 0.0003  # 0,03% do valor do bem
TAX_RATE = 0.2125  # carga tributária embutida no CTe
DEFAULT_FUEL_EFFICIENCY = 1.0
DEFAULT_FUEL_PRICE = 6.00
MARGIN_ALERT_THRESHOLD = 15.0

# --- Gestão de Rotas ---
ARLA32_RATE = 0.05


def parse_number(raw: Any, default: float = 0.0, *, zero_is_default: bool = False) -> float:
    """Texto do formulário -> float. Nunca levanta exceção e nunca devolve NaN."""
    if isinstance(raw, bool) or raw is None:
        value = None
    elif isinstance(raw, (int, float, str)):
        text = raw.strip().replace(",", ".") if isinstance(raw, str) else raw
        try:
            value = float(text)
        except (ValueError, OverflowError):
            # inteiros gigantes não cabem em float
            value = None
    else:
        value = None

    if value is None or not math.isfinite(value):
        logger.debug("Invalid numeric input %r, using default %s", raw, default)
        return float(default)
    if zero_is_default and value == 0:
        return float(default)
    return value


def gross_up(base: float, tax_rate: float) -> float:
    """Valor total tal que tax_rate do total = impostos embutidos."""
    return base / (1 - tax_rate)
