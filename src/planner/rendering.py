"""Rendering — отображение плана с фиксированным числом знаков.

Цены и проценты округляются независимо (round half up) и выводятся строками,
чтобы JSON-представление не теряло десятичную точность.
Отклонения от DCA выводятся со знаком: "+" для неотрицательных значений.
"""

from decimal import Decimal
from typing import Any, Callable, Final, Sequence

from src.core.domain.trade_plan import TradePlanResult
from src.core.math.numerical_safeguards import quantize_decimal

# Знаков после запятой для цен
PRICE_DECIMALS: Final[int] = 3

# Знаков после запятой для процентов
PERCENT_DECIMALS: Final[int] = 2


def format_decimal(value: Decimal, decimals: int) -> str:
    """Строка с ровно `decimals` знаками после запятой.

    Отрицательный ноль после округления выводится без знака.

    Examples:
        >>> format_decimal(Decimal("234.6410161"), 3)
        '234.641'
        >>> format_decimal(Decimal("-0.001"), 2)
        '0.00'
    """
    rounded = quantize_decimal(value, decimals)
    if rounded.is_zero():
        rounded = rounded.copy_abs()
    return f"{rounded:f}"


def format_signed_decimal(value: Decimal, decimals: int) -> str:
    """Как format_decimal, но неотрицательные значения получают знак "+".

    Examples:
        >>> format_signed_decimal(Decimal("17.3205"), 2)
        '+17.32'
        >>> format_signed_decimal(Decimal("-0.001"), 2)
        '+0.00'
    """
    formatted = format_decimal(value, decimals)
    if formatted.startswith("-"):
        return formatted
    return f"+{formatted}"


def _format_all(
    values: Sequence[Decimal],
    decimals: int,
    formatter: Callable[[Decimal, int], str] = format_decimal,
) -> list[str]:
    return [formatter(v, decimals) for v in values]


def render_trade_plan(
    result: TradePlanResult,
    price_decimals: int = PRICE_DECIMALS,
    percent_decimals: int = PERCENT_DECIMALS,
) -> dict[str, Any]:
    """JSON-совместимое представление плана.

    Args:
        result: Рассчитанный план
        price_decimals: Знаков после запятой для цен
        percent_decimals: Знаков после запятой для процентов

    Returns:
        Словарь, соответствующий контракту trade_plan_result
    """
    return {
        "side": result.side.value,
        "tp_algorithm": result.tp_algorithm.value,
        "num_orders": result.num_orders,
        "entry_prices": _format_all(result.entry_prices, price_decimals),
        "entry_percentage_diffs": _format_all(
            result.entry_percentage_diffs, percent_decimals, format_signed_decimal
        ),
        "dca_price": format_decimal(result.dca_price, price_decimals),
        "sl_price": format_decimal(result.sl_price, price_decimals),
        "tp_prices": _format_all(result.tp_prices, price_decimals),
        "tp_percentage_diffs": _format_all(
            result.tp_percentage_diffs, percent_decimals, format_signed_decimal
        ),
        "average_tp": format_decimal(result.average_tp, price_decimals),
        "average_tp_diff": format_signed_decimal(result.average_tp_diff, percent_decimals),
    }
