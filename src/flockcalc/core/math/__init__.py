"""
Core math modules for flockcalc

Numeric safeguards and the KPI formulas built on them. Nothing in this
package raises on invalid numeric input.
"""

# Numerical Safeguards
from flockcalc.core.math.numerical_safeguards import (
    # Tolerances
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # NaN/Inf sanitization
    is_valid_float,
    sanitize_array,
    sanitize_float,
    to_finite,
    # Safe division and summation
    safe_divide,
    safe_percentage,
    safe_sum,
    # Comparison and ranges
    clamp,
    is_close,
)

# Zootechnical KPIs
from flockcalc.core.math.zootechnical import (
    calculate_avg_weight_per_bird,
    calculate_birds_alive,
    calculate_fcr,
    calculate_mortality_rate,
)

# Financial KPIs
from flockcalc.core.math.financial import (
    calculate_cost_per_bird,
    calculate_cost_per_lb,
    calculate_margin,
    calculate_percentage_change,
    calculate_profit,
    calculate_roi,
)

__all__ = [
    # Numerical Safeguards — Tolerances
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — NaN/Inf sanitization
    "is_valid_float",
    "sanitize_array",
    "sanitize_float",
    "to_finite",
    # Numerical Safeguards — Safe division and summation
    "safe_divide",
    "safe_percentage",
    "safe_sum",
    # Numerical Safeguards — Comparison and ranges
    "clamp",
    "is_close",
    # Zootechnical KPIs
    "calculate_avg_weight_per_bird",
    "calculate_birds_alive",
    "calculate_fcr",
    "calculate_mortality_rate",
    # Financial KPIs
    "calculate_cost_per_bird",
    "calculate_cost_per_lb",
    "calculate_margin",
    "calculate_percentage_change",
    "calculate_profit",
    "calculate_roi",
]
