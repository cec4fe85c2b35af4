"""
RiskLevels — Stop-Loss & Take-Profit Prices from DCA

Модуль переводит проценты от средней цены входа (DCA) в ценовые уровни.

ФОРМУЛЫ:
    BUY:
        sl = dca × (1 - sl_pct / 100)
        tp = dca × (1 + tp_pct / 100)

    SELL:
        sl = dca × (1 + sl_pct / 100)
        tp = dca × (1 - tp_pct / 100)

Stop loss всегда на стороне убытка, take profit на стороне прибыли.
Верхняя граница процентов не ограничивается: sl_pct = 100 для BUY даёт 0.
"""

from decimal import Decimal

from src.core.math.numerical_safeguards import (
    DecimalLike,
    decimal_context,
    percent_to_fraction,
    to_decimal,
)
from src.core.math.tp_algorithms import (
    DEFAULT_TP_ALGORITHM,
    TpAlgorithm,
    calculate_tp_percentages,
)


def _offset_price(base_price: Decimal, percentage: DecimalLike, upward: bool) -> Decimal:
    fraction = percent_to_fraction(percentage)
    with decimal_context():
        if upward:
            return base_price * (1 + fraction)
        return base_price * (1 - fraction)


def calculate_sl_price(
    dca_price: DecimalLike,
    sl_percentage: DecimalLike,
    is_buy: bool,
) -> Decimal:
    """
    Цена stop loss от средней цены входа.

    Args:
        dca_price: Средняя цена входа
        sl_percentage: Процент stop loss (>= 0)
        is_buy: True для покупки, False для продажи

    Returns:
        Ниже DCA для покупки, выше DCA для продажи

    Examples:
        >>> calculate_sl_price(200, 10, is_buy=True)
        Decimal('180.0')
        >>> calculate_sl_price(200, 10, is_buy=False)
        Decimal('220.0')
    """
    return _offset_price(to_decimal(dca_price), sl_percentage, upward=not is_buy)


def calculate_tp_prices(
    dca_price: DecimalLike,
    num_orders: int,
    min_tp_percentage: DecimalLike,
    max_tp_percentage: DecimalLike,
    is_buy: bool,
    algorithm: TpAlgorithm | str = DEFAULT_TP_ALGORITHM,
) -> list[Decimal]:
    """
    Лестница цен take profit.

    Проценты распределяются между min и max выбранным алгоритмом
    (см. tp_algorithms), затем переводятся в цены на стороне прибыли.
    Порядок не разворачивается: индекс 0 соответствует min_tp_percentage.

    Args:
        dca_price: Средняя цена входа
        num_orders: Количество ордеров (>= 1)
        min_tp_percentage: Минимальный процент TP
        max_tp_percentage: Максимальный процент TP
        is_buy: True для покупки (TP выше DCA), False для продажи (TP ниже DCA)
        algorithm: Алгоритм интерполяции (неизвестный → linear)

    Returns:
        Список из num_orders цен TP

    Raises:
        TpDomainViolation: Если входы вне domain выбранного алгоритма

    Examples:
        >>> calculate_tp_prices(200, 3, 10, 30, True, TpAlgorithm.LINEAR)
        [Decimal('220.0'), Decimal('240.0'), Decimal('260.0')]
        >>> calculate_tp_prices(200, 1, 10, 30, True, TpAlgorithm.LINEAR)
        [Decimal('240.0')]
    """
    dca = to_decimal(dca_price)
    percentages = calculate_tp_percentages(
        num_orders, min_tp_percentage, max_tp_percentage, algorithm
    )
    return [_offset_price(dca, pct, upward=is_buy) for pct in percentages]
