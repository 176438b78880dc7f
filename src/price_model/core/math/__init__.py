"""
Core math modules для price model

Математические примитивы, конверсия шкал и пропагация неизвестных значений.
"""

# Numerical Safeguards
from price_model.core.math.numerical_safeguards import (
    clamp,
    clamp01,
    ieee_divide,
    is_valid_float,
    validate_in_range,
    validate_positive,
)

# Log Scale
from price_model.core.math.log_scale import (
    DEFAULT_GROWTH_PROFILE_CONVERTER,
    DEFAULT_GROWTH_PROFILE_DOMAIN,
    GROWTH_PROFILE_MAX_RATIO,
    GROWTH_PROFILE_MIN_RATIO,
    LogScaleConverter,
    LogScaleDomain,
    ScaleDomainViolation,
    linear_to_ratio,
    ratio_to_linear,
)

# Optional propagation
from price_model.core.math.optional import all_defined, lift_optional

__all__ = [
    # Numerical Safeguards — Functions
    "clamp",
    "clamp01",
    "ieee_divide",
    "is_valid_float",
    "validate_in_range",
    "validate_positive",
    # Log Scale — Constants
    "DEFAULT_GROWTH_PROFILE_CONVERTER",
    "DEFAULT_GROWTH_PROFILE_DOMAIN",
    "GROWTH_PROFILE_MAX_RATIO",
    "GROWTH_PROFILE_MIN_RATIO",
    # Log Scale — Exceptions
    "ScaleDomainViolation",
    # Log Scale — Types
    "LogScaleConverter",
    "LogScaleDomain",
    # Log Scale — Functions
    "linear_to_ratio",
    "ratio_to_linear",
    # Optional propagation
    "all_defined",
    "lift_optional",
]
