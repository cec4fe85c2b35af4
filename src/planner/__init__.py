"""Planner — сборка и отображение плана сделки поверх чистого ядра.

- Полный пересчёт плана из TradePlanInput (pipeline)
- Ориентация лестниц по направлению сделки
- Отображение с фиксированной точностью для цен и процентов (rendering)
"""

from .pipeline import build_trade_plan, build_trade_plan_from_dict, orient_entry_prices
from .rendering import (
    PERCENT_DECIMALS,
    PRICE_DECIMALS,
    format_decimal,
    format_signed_decimal,
    render_trade_plan,
)

__all__ = [
    "build_trade_plan",
    "build_trade_plan_from_dict",
    "orient_entry_prices",
    "PRICE_DECIMALS",
    "PERCENT_DECIMALS",
    "format_decimal",
    "format_signed_decimal",
    "render_trade_plan",
]
