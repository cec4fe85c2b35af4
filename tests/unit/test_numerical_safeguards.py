"""
Тесты для модуля Numerical Safeguards (Decimal)

Проверяет:
1. Конверсию входов в Decimal без двоичного шума float
2. Отбраковку NaN/Inf и неподдерживаемых типов
3. Конверсию процентов в доли
4. Квантование (round half up) для отображения
5. Ограничение (clamp) и валидацию
6. Изоляцию локального decimal-контекста
"""

from decimal import Decimal, getcontext

import pytest

from src.core.math.numerical_safeguards import (
    DECIMAL_PRECISION,
    clamp,
    decimal_context,
    is_valid_decimal,
    percent_to_fraction,
    quantize_decimal,
    to_decimal,
    validate_non_negative,
)

# =============================================================================
# ТЕСТЫ КОНВЕРСИИ
# =============================================================================


class TestToDecimal:
    """Тесты для to_decimal"""

    def test_decimal_passes_through(self) -> None:
        """Decimal возвращается без изменений"""
        value = Decimal("12.345")
        assert to_decimal(value) is value

    def test_int_converted(self) -> None:
        """int конвертируется точно"""
        assert to_decimal(200) == Decimal("200")

    def test_float_uses_shortest_repr(self) -> None:
        """float конвертируется через str, без двоичного приближения"""
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(0.1) != Decimal(0.1)
        assert to_decimal(1.5) == Decimal("1.5")

    def test_string_converted(self) -> None:
        """Строки с числом конвертируются, пробелы по краям допустимы"""
        assert to_decimal("8.5") == Decimal("8.5")
        assert to_decimal(" 42 ") == Decimal("42")

    def test_nan_inf_rejected(self) -> None:
        """NaN/Inf отвергаются для любого входного типа"""
        with pytest.raises(ValueError, match="NaN/Inf"):
            to_decimal(float("nan"))

        with pytest.raises(ValueError, match="NaN/Inf"):
            to_decimal(float("inf"))

        with pytest.raises(ValueError, match="NaN/Inf"):
            to_decimal(Decimal("-Infinity"))

        with pytest.raises(ValueError, match="NaN/Inf"):
            to_decimal("nan")

    def test_garbage_string_rejected(self) -> None:
        """Строка, не являющаяся числом, отвергается"""
        with pytest.raises(ValueError, match="Not a decimal number"):
            to_decimal("abc")

    def test_unsupported_types_rejected(self) -> None:
        """bool, None и прочие типы не поддерживаются"""
        with pytest.raises(TypeError):
            to_decimal(True)

        with pytest.raises(TypeError):
            to_decimal(None)  # type: ignore[arg-type]

        with pytest.raises(TypeError):
            to_decimal([1])  # type: ignore[arg-type]


class TestIsValidDecimal:
    """Тесты для is_valid_decimal"""

    def test_finite_values(self) -> None:
        assert is_valid_decimal(Decimal("0"))
        assert is_valid_decimal(Decimal("-1.5"))

    def test_non_finite_values(self) -> None:
        assert not is_valid_decimal(Decimal("NaN"))
        assert not is_valid_decimal(Decimal("Infinity"))


class TestPercentToFraction:
    """Тесты для percent_to_fraction"""

    def test_basic(self) -> None:
        """Проценты делятся на 100"""
        assert percent_to_fraction(10) == Decimal("0.1")
        assert percent_to_fraction(Decimal("1.5")) == Decimal("0.015")
        assert percent_to_fraction(100) == Decimal("1")

    def test_zero(self) -> None:
        assert percent_to_fraction(0) == Decimal("0")


# =============================================================================
# ТЕСТЫ КВАНТОВАНИЯ
# =============================================================================


class TestQuantizeDecimal:
    """Тесты для quantize_decimal"""

    def test_round_half_up(self) -> None:
        """Половина округляется вверх (как toFixed)"""
        assert str(quantize_decimal(Decimal("0.125"), 2)) == "0.13"
        assert str(quantize_decimal(Decimal("2.675"), 2)) == "2.68"
        assert str(quantize_decimal(Decimal("-0.125"), 2)) == "-0.13"

    def test_pads_trailing_zeros(self) -> None:
        """Результат всегда имеет ровно `decimals` знаков"""
        assert str(quantize_decimal(200, 3)) == "200.000"
        assert str(quantize_decimal(Decimal("1.5"), 2)) == "1.50"

    def test_zero_decimals(self) -> None:
        assert str(quantize_decimal(Decimal("239.5"), 0)) == "240"

    def test_negative_decimals_rejected(self) -> None:
        with pytest.raises(ValueError, match="decimals must be non-negative"):
            quantize_decimal(Decimal("1.0"), -1)


# =============================================================================
# ТЕСТЫ ОГРАНИЧЕНИЙ И ВАЛИДАЦИИ
# =============================================================================


class TestClamp:
    """Тесты для clamp"""

    def test_inside_range(self) -> None:
        assert clamp(Decimal(5), Decimal(0), Decimal(10)) == Decimal(5)

    def test_below_min(self) -> None:
        assert clamp(Decimal(-1), Decimal(0), Decimal(10)) == Decimal(0)

    def test_above_max(self) -> None:
        assert clamp(Decimal(15), Decimal(0), Decimal(10)) == Decimal(10)

    def test_one_sided(self) -> None:
        """Границы опциональны"""
        assert clamp(Decimal(15), max_value=Decimal(10)) == Decimal(10)
        assert clamp(Decimal(-5), min_value=Decimal(0)) == Decimal(0)
        assert clamp(Decimal(7)) == Decimal(7)


class TestValidateNonNegative:
    """Тесты для validate_non_negative"""

    def test_valid(self) -> None:
        validate_non_negative(Decimal(0), "value")
        validate_non_negative(3, "value")

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="sl_percentage must be non-negative"):
            validate_non_negative(Decimal("-0.01"), "sl_percentage")

    def test_nan_rejected(self) -> None:
        with pytest.raises(ValueError):
            validate_non_negative(float("nan"), "value")


# =============================================================================
# ТЕСТЫ DECIMAL-КОНТЕКСТА
# =============================================================================


class TestDecimalContext:
    """Тесты для decimal_context"""

    def test_sets_precision(self) -> None:
        with decimal_context() as ctx:
            assert ctx.prec == DECIMAL_PRECISION
            assert getcontext().prec == DECIMAL_PRECISION

    def test_global_context_restored(self) -> None:
        """Глобальный контекст вызывающего кода не изменяется"""
        before = getcontext().prec

        with decimal_context(prec=6):
            assert getcontext().prec == 6
            assert Decimal(1) / Decimal(3) == Decimal("0.333333")

        assert getcontext().prec == before
