"""
Numerical Safeguards — Decimal Math Primitives

Модуль обеспечивает точную десятичную арифметику для всех расчётов плана:
- Конверсия входных значений в Decimal (float никогда не попадает в расчёт)
- Отбраковка NaN/Inf до начала вычислений
- Конверсия процентов в доли
- Квантование (фиксированное число знаков после запятой) для отображения
- Локальный decimal-контекст, не изменяющий глобальный контекст вызывающего

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Binary float не участвует в арифметике (float → str → Decimal)
2. NaN/Inf никогда не пропагируют (ValueError на входе)
3. Все операции детерминированы и воспроизводимы
"""

from contextlib import contextmanager
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Context, Decimal, localcontext
from typing import Final, Iterator, Union

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Количество значащих цифр decimal-контекста ядра
DECIMAL_PRECISION: Final[int] = 28

# Делитель процентов ("parts per hundred")
PERCENT_BASE: Final[Decimal] = Decimal(100)

DecimalLike = Union[Decimal, int, float, str]


# =============================================================================
# DECIMAL-КОНТЕКСТ
# =============================================================================


@contextmanager
def decimal_context(prec: int = DECIMAL_PRECISION) -> Iterator[Context]:
    """
    Локальный decimal-контекст для расчётов ядра.

    Глобальный контекст вызывающего кода не изменяется.

    Args:
        prec: Количество значащих цифр (default: DECIMAL_PRECISION)

    Yields:
        Активный decimal.Context
    """
    with localcontext() as ctx:
        ctx.prec = prec
        ctx.rounding = ROUND_HALF_EVEN
        yield ctx


# =============================================================================
# КОНВЕРСИЯ И ПРОВЕРКИ
# =============================================================================


def is_valid_decimal(value: Decimal) -> bool:
    """
    Проверка, является ли Decimal конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return value.is_finite()


def to_decimal(value: DecimalLike) -> Decimal:
    """
    Конверсия входного значения в Decimal.

    float конвертируется через кратчайшее строковое представление,
    поэтому 0.1 становится Decimal('0.1'), а не двоичным приближением.

    Args:
        value: Decimal, int, float или строка с числом

    Returns:
        Конечный Decimal

    Raises:
        TypeError: Если тип не поддерживается (в том числе bool)
        ValueError: Если значение NaN/Inf или строка не является числом

    Examples:
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal("12.50")
        Decimal('12.50')
        >>> to_decimal(3)
        Decimal('3')
    """
    if isinstance(value, bool):
        raise TypeError(f"Unsupported numeric type: {type(value).__name__}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except ArithmeticError:
            raise ValueError(f"Not a decimal number: {value!r}")
    else:
        raise TypeError(f"Unsupported numeric type: {type(value).__name__}")

    if not is_valid_decimal(result):
        raise ValueError(f"Value contains NaN/Inf: {value}")

    return result


def percent_to_fraction(percentage: DecimalLike) -> Decimal:
    """
    Конверсия процента в долю.

    Args:
        percentage: Процент ("parts per hundred", например 10 = 10%)

    Returns:
        Доля (например, 10 → 0.1)

    Examples:
        >>> percent_to_fraction(10)
        Decimal('0.1')
    """
    return to_decimal(percentage) / PERCENT_BASE


# =============================================================================
# КВАНТОВАНИЕ И ОГРАНИЧЕНИЯ
# =============================================================================


def quantize_decimal(value: DecimalLike, decimals: int) -> Decimal:
    """
    Округление до фиксированного числа знаков после запятой.

    Использует round half up (поведение toFixed в форме ввода).

    Args:
        value: Значение для округления
        decimals: Число знаков после запятой (>= 0)

    Returns:
        Округлённое значение с ровно `decimals` знаками

    Raises:
        ValueError: Если decimals < 0

    Examples:
        >>> quantize_decimal(Decimal("234.64101615"), 3)
        Decimal('234.641')
        >>> quantize_decimal(Decimal("0.125"), 2)
        Decimal('0.13')
        >>> quantize_decimal(200, 2)
        Decimal('200.00')
    """
    validate_non_negative(decimals, "decimals")

    exponent = Decimal(1).scaleb(-decimals)
    return to_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def clamp(
    value: Decimal,
    min_value: Decimal | None = None,
    max_value: Decimal | None = None,
) -> Decimal:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(Decimal(5), Decimal(0), Decimal(10))
        Decimal('5')
        >>> clamp(Decimal(15), max_value=Decimal(10))
        Decimal('10')
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: DecimalLike, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if to_decimal(value) < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
