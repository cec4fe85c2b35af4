"""
PriceLadder — Entry Ladder, DCA Averaging & Percentage Deviations

Модуль строит лестницу цен входа между верхней и нижней границей
и вычисляет производные метрики:
- generate_entry_prices: равномерная лестница от upper до lower
- calculate_dca_price: средняя цена входа (Dollar-Cost Average)
- calculate_average_tp: средняя цена take profit
- calculate_percentage_diffs: отклонение каждой цены от средней в %

ФОРМУЛЫ:
    n == 1:  entry = [(upper + lower) / 2]
    n >= 2:  entry_i = upper - (upper - lower) * i / (n - 1),  i = 0..n-1

    dca = Σ price_i / n
    diff_i = (price_i - avg) × 100 / avg

Лестница всегда возвращается в каноническом порядке (по убыванию).
Ориентация для отображения (buy/sell) — ответственность вызывающего кода.
"""

from decimal import Decimal
from typing import Sequence

from src.core.math.numerical_safeguards import (
    PERCENT_BASE,
    DecimalLike,
    decimal_context,
    to_decimal,
)


# =============================================================================
# ЛЕСТНИЦА ЦЕН ВХОДА
# =============================================================================


def generate_entry_prices(
    upper_price: DecimalLike,
    lower_price: DecimalLike,
    num_orders: int,
) -> list[Decimal]:
    """
    Генерация лестницы цен входа между верхней и нижней границей.

    Функция не валидирует и не ограничивает входы: upper_price >= lower_price
    и num_orders >= 1 гарантирует вызывающий код.

    Args:
        upper_price: Верхняя граница диапазона
        lower_price: Нижняя граница диапазона
        num_orders: Количество ордеров

    Returns:
        Список из num_orders цен: от upper_price до lower_price включительно,
        с равным шагом. Для num_orders == 1 — середина диапазона.

    Examples:
        >>> generate_entry_prices(300, 100, 3)
        [Decimal('300'), Decimal('200'), Decimal('100')]
        >>> generate_entry_prices(300, 100, 1)
        [Decimal('200')]
    """
    upper = to_decimal(upper_price)
    lower = to_decimal(lower_price)

    with decimal_context():
        if num_orders == 1:
            return [(upper + lower) / 2]

        span = upper - lower
        intervals = num_orders - 1

        # Умножение до деления: крайние точки совпадают с границами точно
        return [upper - span * i / intervals for i in range(num_orders)]


# =============================================================================
# УСРЕДНЕНИЕ
# =============================================================================


def _mean(prices: Sequence[DecimalLike], name: str) -> Decimal:
    if not prices:
        raise ValueError(f"{name} cannot be empty")

    values = [to_decimal(p) for p in prices]

    with decimal_context():
        return sum(values, Decimal(0)) / len(values)


def calculate_dca_price(entry_prices: Sequence[DecimalLike]) -> Decimal:
    """
    Средняя цена входа (DCA).

    Args:
        entry_prices: Цены входа (хотя бы одна)

    Returns:
        Среднее арифметическое цен входа

    Raises:
        ValueError: Если entry_prices пустой

    Examples:
        >>> calculate_dca_price([100, 200, 300])
        Decimal('200')
    """
    return _mean(entry_prices, "entry_prices")


def calculate_average_tp(tp_prices: Sequence[DecimalLike]) -> Decimal:
    """
    Средняя цена take profit.

    Args:
        tp_prices: Цены take profit (хотя бы одна)

    Returns:
        Среднее арифметическое цен TP

    Raises:
        ValueError: Если tp_prices пустой
    """
    return _mean(tp_prices, "tp_prices")


# =============================================================================
# ПРОЦЕНТНЫЕ ОТКЛОНЕНИЯ
# =============================================================================


def calculate_percentage_diffs(
    prices: Sequence[DecimalLike],
    average_price: DecimalLike,
) -> list[Decimal]:
    """
    Отклонение каждой цены от средней в процентах.

    diff_i = (price_i - average_price) × 100 / average_price

    Args:
        prices: Цены (лестница входа или TP)
        average_price: Опорная средняя цена

    Returns:
        Список отклонений той же длины. Пустой вход → пустой список.

    Raises:
        ValueError: Если average_price == 0 при непустом входе

    Examples:
        >>> calculate_percentage_diffs([100, 200, 300], 200)
        [Decimal('-50'), Decimal('0'), Decimal('50')]
        >>> calculate_percentage_diffs([], 200)
        []
    """
    if not prices:
        return []

    average = to_decimal(average_price)
    if average == 0:
        raise ValueError("average_price must be non-zero for percentage diffs")

    values = [to_decimal(p) for p in prices]

    with decimal_context():
        return [(p - average) * PERCENT_BASE / average for p in values]
