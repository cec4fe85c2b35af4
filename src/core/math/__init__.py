"""
Core math modules для DCA-планировщика

Чистые функции над Decimal: лестница входа, DCA, SL/TP уровни,
алгоритмы распределения take profit.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    DECIMAL_PRECISION,
    PERCENT_BASE,
    DecimalLike,
    clamp,
    decimal_context,
    is_valid_decimal,
    percent_to_fraction,
    quantize_decimal,
    to_decimal,
    validate_non_negative,
)

# Price Ladder
from src.core.math.price_ladder import (
    calculate_average_tp,
    calculate_dca_price,
    calculate_percentage_diffs,
    generate_entry_prices,
)

# TP Algorithms
from src.core.math.tp_algorithms import (
    DEFAULT_TP_ALGORITHM,
    TpAlgorithm,
    TpDomainViolation,
    calculate_tp_percentages,
    fibonacci_sequence,
    interpolate_tp_percentage,
    resolve_tp_algorithm,
)

# Risk Levels
from src.core.math.risk_levels import (
    calculate_sl_price,
    calculate_tp_prices,
)

__all__ = [
    # Numerical Safeguards: Constants
    "DECIMAL_PRECISION",
    "PERCENT_BASE",
    "DecimalLike",
    # Numerical Safeguards: Functions
    "clamp",
    "decimal_context",
    "is_valid_decimal",
    "percent_to_fraction",
    "quantize_decimal",
    "to_decimal",
    "validate_non_negative",
    # Price Ladder
    "calculate_average_tp",
    "calculate_dca_price",
    "calculate_percentage_diffs",
    "generate_entry_prices",
    # TP Algorithms: Constants
    "DEFAULT_TP_ALGORITHM",
    # TP Algorithms: Types
    "TpAlgorithm",
    # TP Algorithms: Exceptions
    "TpDomainViolation",
    # TP Algorithms: Functions
    "calculate_tp_percentages",
    "fibonacci_sequence",
    "interpolate_tp_percentage",
    "resolve_tp_algorithm",
    # Risk Levels
    "calculate_sl_price",
    "calculate_tp_prices",
]
