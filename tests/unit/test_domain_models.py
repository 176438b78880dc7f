"""
Тесты для Pydantic моделей домена

Проверяет:
1. MarketInputs: все поля опциональны, неизменяемость, supply в wei
2. BenchmarkPeRatios: обязательные поля
3. EarningsFigures
"""

import pytest
from pydantic import ValidationError

from price_model.core.domain.market_inputs import (
    BenchmarkPeRatios,
    EarningsFigures,
    MarketInputs,
)


class TestMarketInputs:
    """Тесты для MarketInputs"""

    def test_empty_snapshot(self) -> None:
        """До загрузки все метрики неизвестны"""
        inputs = MarketInputs()
        assert inputs.burn_rate_all is None
        assert inputs.average_eth_price is None
        assert inputs.eth_supply is None
        assert inputs.eth_price is None

    def test_frozen(self) -> None:
        inputs = MarketInputs(eth_price=1500.0)
        with pytest.raises(ValidationError):
            inputs.eth_price = 2000.0

    def test_negative_values_accepted(self) -> None:
        """Диапазоны рыночных данных не проверяются"""
        assert MarketInputs(burn_rate_all=-1.0).burn_rate_all == -1.0

    def test_non_numeric_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MarketInputs(eth_price="not a number")

    def test_from_wei_supply(self) -> None:
        inputs = MarketInputs.from_wei_supply(
            eth_supply_wei=120_000_000 * 10**18, eth_price=1500.0
        )
        assert inputs.eth_supply == pytest.approx(120_000_000.0)
        assert inputs.eth_price == 1500.0

    def test_from_wei_supply_missing(self) -> None:
        assert MarketInputs.from_wei_supply().eth_supply is None


class TestBenchmarkPeRatios:
    """Тесты для BenchmarkPeRatios"""

    def test_valid(self) -> None:
        ratios = BenchmarkPeRatios(AMZN=60, DIS=30, GOOGL=25, INTC=10, NFLX=40, TSLA=100)
        assert ratios.GOOGL == 25.0

    def test_missing_field(self) -> None:
        with pytest.raises(ValidationError):
            BenchmarkPeRatios(AMZN=60, DIS=30, GOOGL=25, INTC=10, NFLX=40)


class TestEarningsFigures:
    def test_defaults_unknown(self) -> None:
        figures = EarningsFigures()
        assert (figures.revenue, figures.costs, figures.earnings) == (None, None, None)
