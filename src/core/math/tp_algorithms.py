"""
TpAlgorithms — Take-Profit Percentage Interpolation

Модуль распределяет проценты take profit между min_tp_pct и max_tp_pct
по n ордерам одним из четырёх алгоритмов:

    linear:       tp(i) = min + (max - min) · i / (n - 1)
    exponential:  tp(i) = min · (max / min) ^ (i / (n - 1))
    fibonacci:    tp(i) = min + (max - min) · fib[i] / fib[n - 1]
    logarithmic:  tp(i) = min + ln(i + 1) / ln(n) · (max - min)

Индексы 0-based. Для всех алгоритмов tp(0) = min и tp(n - 1) = max.
Для n == 1 используется единственный процент (min + max) / 2.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Domain violation (exponential с min ≤ 0, интерполяция при n < 2)
   → TpDomainViolation, NaN/Inf никогда не возвращаются
2. Неизвестный алгоритм → linear (с предупреждением в лог)
3. Все вычисления в Decimal, детерминированы и воспроизводимы
"""

import logging
from decimal import Decimal
from enum import Enum
from functools import partial
from typing import Callable, Final, Sequence

from src.core.math.numerical_safeguards import (
    DecimalLike,
    decimal_context,
    to_decimal,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ТИПЫ
# =============================================================================


class TpAlgorithm(str, Enum):
    """Алгоритм распределения процентов take profit"""

    LINEAR = "linear"  # Равномерный шаг
    EXPONENTIAL = "exponential"  # Геометрический рост
    FIBONACCI = "fibonacci"  # Шаги по числам Фибоначчи
    LOGARITHMIC = "logarithmic"  # Быстрый рост в начале, замедление к max


DEFAULT_TP_ALGORITHM: Final[TpAlgorithm] = TpAlgorithm.LINEAR


# =============================================================================
# EXCEPTIONS
# =============================================================================


class TpDomainViolation(ValueError):
    """
    Нарушение domain алгоритма интерполяции.

    Возникает, когда формула не определена для входов:
    - exponential: min_tp_pct ≤ 0 или max_tp_pct ≤ 0 (деление и степень
      отношения вне области определения)
    - любая интерполяция при num_orders < 2 (деление на n - 1 и ln(n))
    """

    pass


# =============================================================================
# ВЫБОР АЛГОРИТМА
# =============================================================================


def resolve_tp_algorithm(algorithm: TpAlgorithm | str) -> TpAlgorithm:
    """
    Приведение селектора алгоритма к TpAlgorithm.

    Неизвестное значение не является ошибкой: используется linear.

    Args:
        algorithm: TpAlgorithm или его строковое значение (регистр не важен)

    Returns:
        Распознанный алгоритм или DEFAULT_TP_ALGORITHM

    Examples:
        >>> resolve_tp_algorithm("fibonacci")
        <TpAlgorithm.FIBONACCI: 'fibonacci'>
        >>> resolve_tp_algorithm("quadratic")
        <TpAlgorithm.LINEAR: 'linear'>
    """
    if isinstance(algorithm, TpAlgorithm):
        return algorithm

    try:
        return TpAlgorithm(str(algorithm).strip().lower())
    except ValueError:
        logger.warning(
            "Unknown TP algorithm %r, falling back to %s",
            algorithm,
            DEFAULT_TP_ALGORITHM.value,
        )
        return DEFAULT_TP_ALGORITHM


# =============================================================================
# АЛГОРИТМЫ ИНТЕРПОЛЯЦИИ
# =============================================================================


def fibonacci_sequence(length: int) -> list[int]:
    """
    Последовательность Фибоначчи fib[0] = 0, fib[1] = 1, ...

    Args:
        length: Количество членов (>= 2)

    Returns:
        Первые `length` чисел Фибоначчи

    Examples:
        >>> fibonacci_sequence(6)
        [0, 1, 1, 2, 3, 5]
    """
    fib = [0, 1]
    for j in range(2, length):
        fib.append(fib[j - 1] + fib[j - 2])
    return fib[:length]


def _linear(index: int, num_orders: int, min_pct: Decimal, max_pct: Decimal) -> Decimal:
    return min_pct + (max_pct - min_pct) * index / (num_orders - 1)


def _exponential(
    index: int, num_orders: int, min_pct: Decimal, max_pct: Decimal
) -> Decimal:
    if min_pct <= 0 or max_pct <= 0:
        raise TpDomainViolation(
            f"Exponential TP requires positive percentages, "
            f"got min_tp_pct={min_pct}, max_tp_pct={max_pct}"
        )

    # max / min может быть неточным, последняя точка фиксируется на max
    if index == num_orders - 1:
        return max_pct

    exponent = Decimal(index) / Decimal(num_orders - 1)
    return min_pct * (max_pct / min_pct) ** exponent


def _fibonacci(
    index: int,
    num_orders: int,
    min_pct: Decimal,
    max_pct: Decimal,
    fib: Sequence[int] | None = None,
) -> Decimal:
    if fib is None:
        fib = fibonacci_sequence(num_orders)
    # Доля считается первой: fib[n - 1] / fib[n - 1] == 1 точно при любом n
    weight = Decimal(fib[index]) / fib[num_orders - 1]
    return min_pct + (max_pct - min_pct) * weight


def _logarithmic(
    index: int, num_orders: int, min_pct: Decimal, max_pct: Decimal
) -> Decimal:
    weight = Decimal(index + 1).ln() / Decimal(num_orders).ln()
    return min_pct + weight * (max_pct - min_pct)


_INTERPOLATORS: Final[dict[TpAlgorithm, Callable[[int, int, Decimal, Decimal], Decimal]]] = {
    TpAlgorithm.LINEAR: _linear,
    TpAlgorithm.EXPONENTIAL: _exponential,
    TpAlgorithm.FIBONACCI: _fibonacci,
    TpAlgorithm.LOGARITHMIC: _logarithmic,
}


def _ladder_interpolator(
    algorithm: TpAlgorithm, num_orders: int
) -> Callable[[int, int, Decimal, Decimal], Decimal]:
    """Интерполятор для всей лестницы: таблица Фибоначчи строится один раз."""
    if algorithm is TpAlgorithm.FIBONACCI:
        return partial(_fibonacci, fib=fibonacci_sequence(num_orders))
    return _INTERPOLATORS[algorithm]


def interpolate_tp_percentage(
    index: int,
    num_orders: int,
    min_tp_pct: DecimalLike,
    max_tp_pct: DecimalLike,
    algorithm: TpAlgorithm | str = DEFAULT_TP_ALGORITHM,
) -> Decimal:
    """
    Процент take profit для ордера с индексом `index`.

    Args:
        index: Индекс ордера (0-based, 0 <= index < num_orders)
        num_orders: Количество ордеров (>= 2)
        min_tp_pct: Минимальный процент TP
        max_tp_pct: Максимальный процент TP
        algorithm: Алгоритм интерполяции

    Returns:
        Процент TP между min_tp_pct и max_tp_pct

    Raises:
        TpDomainViolation: Если num_orders < 2 или входы вне domain алгоритма
        IndexError: Если index вне диапазона [0, num_orders)

    Examples:
        >>> interpolate_tp_percentage(1, 3, 10, 30, TpAlgorithm.LINEAR)
        Decimal('20')
    """
    if num_orders < 2:
        raise TpDomainViolation(
            f"TP interpolation requires num_orders >= 2, got {num_orders}"
        )

    if not 0 <= index < num_orders:
        raise IndexError(f"index {index} out of range for num_orders={num_orders}")

    min_pct = to_decimal(min_tp_pct)
    max_pct = to_decimal(max_tp_pct)
    interpolator = _INTERPOLATORS[resolve_tp_algorithm(algorithm)]

    with decimal_context():
        return interpolator(index, num_orders, min_pct, max_pct)


def calculate_tp_percentages(
    num_orders: int,
    min_tp_pct: DecimalLike,
    max_tp_pct: DecimalLike,
    algorithm: TpAlgorithm | str = DEFAULT_TP_ALGORITHM,
) -> list[Decimal]:
    """
    Лестница процентов take profit для всех ордеров.

    Args:
        num_orders: Количество ордеров (>= 1)
        min_tp_pct: Минимальный процент TP
        max_tp_pct: Максимальный процент TP
        algorithm: Алгоритм интерполяции

    Returns:
        Список из num_orders процентов. Для num_orders == 1 — [(min + max) / 2].

    Raises:
        TpDomainViolation: Если num_orders < 1 или входы вне domain алгоритма
    """
    if num_orders < 1:
        raise TpDomainViolation(f"num_orders must be >= 1, got {num_orders}")

    min_pct = to_decimal(min_tp_pct)
    max_pct = to_decimal(max_tp_pct)

    if num_orders == 1:
        with decimal_context():
            return [(min_pct + max_pct) / 2]

    interpolator = _ladder_interpolator(resolve_tp_algorithm(algorithm), num_orders)

    with decimal_context():
        return [
            interpolator(i, num_orders, min_pct, max_pct) for i in range(num_orders)
        ]
