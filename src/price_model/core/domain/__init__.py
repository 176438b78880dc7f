"""
Domain models and value objects.

Contains market input snapshots, benchmark P/E ratios, earnings figures,
ETH unit conversions and static network data.
"""

from price_model.core.domain.market_inputs import (
    BenchmarkPeRatios,
    EarningsFigures,
    MarketInputs,
)
from price_model.core.domain.static_data import POS_ISSUANCE_DAY, POS_ISSUANCE_YEAR
from price_model.core.domain.units import (
    WEI_PER_ETH,
    eth_from_wei,
)

__all__ = [
    # Units module
    "WEI_PER_ETH",
    "eth_from_wei",
    # Static data
    "POS_ISSUANCE_DAY",
    "POS_ISSUANCE_YEAR",
    # Models
    "BenchmarkPeRatios",
    "EarningsFigures",
    "MarketInputs",
]
