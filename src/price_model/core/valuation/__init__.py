"""
Valuation — расчёт прибыли сети и итоговой оценки цены.
"""

from price_model.core.valuation.earnings import (
    MINUTES_PER_YEAR,
    EarningsCalculator,
    annualized_costs,
    annualized_earnings,
    annualized_revenue,
    earnings_per_unit,
)
from price_model.core.valuation.projection import implied_pe_ratio, projected_price

__all__ = [
    # Earnings
    "MINUTES_PER_YEAR",
    "EarningsCalculator",
    "annualized_costs",
    "annualized_earnings",
    "annualized_revenue",
    "earnings_per_unit",
    # Projection
    "implied_pe_ratio",
    "projected_price",
]
