"""Trade plan pipeline — полный пересчёт плана из входных параметров.

Порядок расчёта:
1. Лестница входа (generate_entry_prices), ориентированная по направлению
2. DCA → stop loss и лестница take profit
3. Процентные отклонения от DCA, средняя TP и её отклонение

Каждый вызов независим: результат строится с нуля, состояние не хранится.
"""

import logging
from decimal import Decimal
from typing import Any, Mapping, Sequence

from src.core.contracts import validate_trade_plan_input
from src.core.domain.trade_plan import Side, TradePlanInput, TradePlanResult
from src.core.math.price_ladder import (
    calculate_average_tp,
    calculate_dca_price,
    calculate_percentage_diffs,
    generate_entry_prices,
)
from src.core.math.risk_levels import calculate_sl_price, calculate_tp_prices

logger = logging.getLogger(__name__)


def orient_entry_prices(entry_prices: Sequence[Decimal], side: Side) -> list[Decimal]:
    """Порядок исполнения: BUY — сверху вниз, SELL — снизу вверх.

    Каноническая лестница идёт по убыванию, поэтому для SELL она разворачивается.
    """
    prices = list(entry_prices)
    if side == Side.SELL:
        prices.reverse()
    return prices


def build_trade_plan(plan: TradePlanInput) -> TradePlanResult:
    """Расчёт полного плана сделки.

    Args:
        plan: Провалидированные параметры плана (границы и проценты уже clamp-нуты)

    Returns:
        TradePlanResult с лестницами входа и TP, DCA, SL и метриками отклонений

    Raises:
        TpDomainViolation: Если параметры TP вне domain выбранного алгоритма
        ValueError: Если DCA равна нулю (отклонения в % не определены)
    """
    entry_prices = orient_entry_prices(
        generate_entry_prices(plan.upper_price, plan.lower_price, plan.num_orders),
        plan.side,
    )
    dca_price = calculate_dca_price(entry_prices)
    sl_price = calculate_sl_price(dca_price, plan.sl_percentage, plan.is_buy)
    tp_prices = calculate_tp_prices(
        dca_price,
        plan.num_orders,
        plan.min_tp_percentage,
        plan.max_tp_percentage,
        plan.is_buy,
        plan.tp_algorithm,
    )
    average_tp = calculate_average_tp(tp_prices)

    entry_diffs = calculate_percentage_diffs(entry_prices, dca_price)
    tp_diffs = calculate_percentage_diffs(tp_prices, dca_price)
    (average_tp_diff,) = calculate_percentage_diffs([average_tp], dca_price)

    result = TradePlanResult(
        side=plan.side,
        tp_algorithm=plan.tp_algorithm,
        entry_prices=entry_prices,
        dca_price=dca_price,
        entry_percentage_diffs=entry_diffs,
        sl_price=sl_price,
        tp_prices=tp_prices,
        tp_percentage_diffs=tp_diffs,
        average_tp=average_tp,
        average_tp_diff=average_tp_diff,
    )

    logger.debug(
        "Trade plan built: side=%s algorithm=%s orders=%d dca=%s sl=%s avg_tp=%s",
        plan.side.value,
        plan.tp_algorithm.value,
        plan.num_orders,
        dca_price,
        sl_price,
        average_tp,
    )
    return result


def build_trade_plan_from_dict(data: Mapping[str, Any]) -> TradePlanResult:
    """Расчёт плана из JSON-подобного словаря.

    Сначала данные проверяются JSON Schema контрактом trade_plan_input,
    затем валидируются (и clamp-ятся) моделью TradePlanInput.

    Raises:
        jsonschema.ValidationError: Если данные нарушают контракт
        pydantic.ValidationError: Если данные не проходят валидацию модели
    """
    validate_trade_plan_input(dict(data))
    return build_trade_plan(TradePlanInput.model_validate(data))
