"""
Domain models and value objects.

Contains the trade plan input/result models and the trade side enum.
"""

from src.core.domain.trade_plan import Side, TradePlanInput, TradePlanResult

__all__ = [
    # Trade plan models
    "Side",
    "TradePlanInput",
    "TradePlanResult",
]
