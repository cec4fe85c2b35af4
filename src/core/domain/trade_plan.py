"""
TradePlan — Модели входа и результата расчёта плана

Immutable Pydantic модели:
- TradePlanInput: все параметры плана (границы, количество ордеров, проценты,
  направление, алгоритм TP). Входы ограничиваются (clamp) при создании:
  lower_price ≤ upper_price, min_tp_percentage ≤ max_tp_percentage.
- TradePlanResult: полный результат пересчёта плана.

Значения по умолчанию совпадают с начальным состоянием формы ввода.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from src.core.math.numerical_safeguards import clamp, to_decimal
from src.core.math.tp_algorithms import TpAlgorithm


# =============================================================================
# ENUMS
# =============================================================================


class Side(str, Enum):
    """Направление сделки"""

    BUY = "buy"
    SELL = "sell"


# =============================================================================
# INPUT MODEL
# =============================================================================


class TradePlanInput(BaseModel):
    """
    Параметры плана сделки.

    Порядок полей важен: upper_price объявлен до lower_price,
    max_tp_percentage до min_tp_percentage (clamp читает уже
    провалидированное значение из info.data).

    upper_price строго положительна: при нулевом диапазоне DCA = 0 и
    отклонения в % не определены. Отрицательные и пустые значения
    отклоняются (ValidationError), а не подтягиваются к минимуму.

    Immutable модель (frozen=True).
    """

    # Диапазон входа
    upper_price: Decimal = Field(
        Decimal("1"),
        gt=0,
        description="Верхняя граница цен входа (> 0)",
    )
    lower_price: Decimal = Field(
        Decimal("1"),
        ge=0,
        validate_default=True,
        description="Нижняя граница цен входа (не выше upper_price)",
    )
    num_orders: int = Field(5, ge=1, description="Количество ордеров")

    # Риск
    sl_percentage: Decimal = Field(
        Decimal("5"), ge=0, description="Stop loss в % от DCA"
    )
    max_tp_percentage: Decimal = Field(
        Decimal("8.5"), ge=0, description="Максимальный take profit в % от DCA"
    )
    min_tp_percentage: Decimal = Field(
        Decimal("1.5"),
        ge=0,
        validate_default=True,
        description="Минимальный take profit в % от DCA (не выше max_tp_percentage)",
    )

    # Режим
    side: Side = Field(Side.BUY, description="Направление сделки (buy/sell)")
    tp_algorithm: TpAlgorithm = Field(
        TpAlgorithm.EXPONENTIAL, description="Алгоритм распределения take profit"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator(
        "upper_price",
        "lower_price",
        "sl_percentage",
        "max_tp_percentage",
        "min_tp_percentage",
        mode="before",
    )
    @classmethod
    def convert_float_exactly(cls, v):
        """float → Decimal через строковое представление (без двоичного шума)"""
        if isinstance(v, float):
            return to_decimal(v)
        return v

    @field_validator("lower_price")
    @classmethod
    def clamp_lower_to_upper(cls, v: Decimal, info) -> Decimal:
        """Нижняя граница не может превышать верхнюю"""
        if "upper_price" in info.data:
            return clamp(v, max_value=info.data["upper_price"])
        return v

    @field_validator("min_tp_percentage")
    @classmethod
    def clamp_min_tp_to_max(cls, v: Decimal, info) -> Decimal:
        """Минимальный TP не может превышать максимальный"""
        if "max_tp_percentage" in info.data:
            return clamp(v, max_value=info.data["max_tp_percentage"])
        return v

    @property
    def is_buy(self) -> bool:
        """True для покупки"""
        return self.side == Side.BUY


# =============================================================================
# RESULT MODEL
# =============================================================================


class TradePlanResult(BaseModel):
    """
    Результат расчёта плана сделки.

    Лестницы ориентированы в порядке исполнения:
    - entry_prices: BUY — от upper к lower, SELL — от lower к upper
    - tp_prices: ближайшая к DCA цель первой (для обоих направлений)

    Immutable модель (frozen=True).
    """

    side: Side = Field(..., description="Направление сделки")
    tp_algorithm: TpAlgorithm = Field(..., description="Использованный алгоритм TP")

    # Вход
    entry_prices: list[Decimal] = Field(..., min_length=1, description="Лестница цен входа")
    dca_price: Decimal = Field(..., description="Средняя цена входа (DCA)")
    entry_percentage_diffs: list[Decimal] = Field(
        ..., description="Отклонение цен входа от DCA (%)"
    )

    # Выход
    sl_price: Decimal = Field(..., description="Цена stop loss")
    tp_prices: list[Decimal] = Field(..., min_length=1, description="Лестница цен take profit")
    tp_percentage_diffs: list[Decimal] = Field(
        ..., description="Отклонение цен TP от DCA (%)"
    )
    average_tp: Decimal = Field(..., description="Средняя цена take profit")
    average_tp_diff: Decimal = Field(..., description="Отклонение средней TP от DCA (%)")

    model_config = {"frozen": True}  # Immutable

    @property
    def num_orders(self) -> int:
        """Количество ордеров"""
        return len(self.entry_prices)
