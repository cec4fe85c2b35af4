"""
Contract Validation Module

Модуль для валидации JSON контрактов планировщика.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    TradePlanInputValidator,
    TradePlanResultValidator,
    validate_trade_plan_input,
    validate_trade_plan_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TradePlanInputValidator",
    "TradePlanResultValidator",
    # Functions
    "validate_trade_plan_input",
    "validate_trade_plan_result",
]
