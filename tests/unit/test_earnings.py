"""
Тесты для модуля Earnings

Проверяет:
1. Константу MINUTES_PER_YEAR (365.25 дней)
2. Годовые revenue / costs / earnings
3. Earnings per unit, включая нулевой supply
4. Пропагацию None через всю цепочку
"""

import math

import pytest

from price_model.core.domain.market_inputs import EarningsFigures, MarketInputs
from price_model.core.domain.static_data import POS_ISSUANCE_YEAR
from price_model.core.valuation.earnings import (
    MINUTES_PER_YEAR,
    EarningsCalculator,
    annualized_costs,
    annualized_earnings,
    annualized_revenue,
    earnings_per_unit,
)


class TestMinutesPerYear:
    def test_constant(self) -> None:
        """60 * 24 * 365.25 учитывает високосные годы"""
        assert MINUTES_PER_YEAR == 60 * 24 * 365.25
        assert MINUTES_PER_YEAR == 525_960.0


class TestAnnualizedRevenue:
    """Тесты для annualized_revenue"""

    def test_basic(self) -> None:
        assert annualized_revenue(1000, 1800) == 1000 * 1800 * 60 * 24 * 365.25

    def test_missing_rate(self) -> None:
        assert annualized_revenue(None, 1800) is None

    def test_missing_price(self) -> None:
        assert annualized_revenue(1000, None) is None

    def test_zero_rate_is_zero_not_none(self) -> None:
        assert annualized_revenue(0.0, 1800) == 0.0


class TestAnnualizedCosts:
    """Тесты для annualized_costs"""

    def test_basic(self) -> None:
        assert annualized_costs(500_000, 2000.0) == 1_000_000_000.0

    def test_missing_price(self) -> None:
        assert annualized_costs(500_000, None) is None


class TestAnnualizedEarnings:
    """Тесты для annualized_earnings"""

    def test_positive(self) -> None:
        assert annualized_earnings(3e9, 1e9) == 2e9

    def test_negative_is_valid(self) -> None:
        """Расходы больше выручки → отрицательная прибыль, не ошибка"""
        assert annualized_earnings(1e9, 3e9) == -2e9

    @pytest.mark.parametrize("revenue,costs", [(None, 1e9), (1e9, None), (None, None)])
    def test_missing(self, revenue, costs) -> None:
        assert annualized_earnings(revenue, costs) is None


class TestEarningsPerUnit:
    """Тесты для earnings_per_unit"""

    def test_basic(self) -> None:
        assert earnings_per_unit(2e9, 120e6) == pytest.approx(16.666666666666668)

    def test_missing_supply(self) -> None:
        assert earnings_per_unit(2e9, None) is None

    def test_missing_earnings(self) -> None:
        assert earnings_per_unit(None, 120e6) is None

    def test_zero_supply_is_infinite(self) -> None:
        """Нулевой supply не защищён: бесконечность пропагирует дальше"""
        assert earnings_per_unit(2e9, 0.0) == math.inf
        assert earnings_per_unit(-2e9, 0.0) == -math.inf

    def test_zero_over_zero_is_nan(self) -> None:
        assert math.isnan(earnings_per_unit(0.0, 0.0))


class TestEarningsCalculator:
    """Тесты для EarningsCalculator.figures"""

    def test_default_issuance(self) -> None:
        assert EarningsCalculator().fixed_annual_issuance == POS_ISSUANCE_YEAR

    def test_full_inputs(self) -> None:
        calculator = EarningsCalculator(fixed_annual_issuance=500_000)
        inputs = MarketInputs(
            burn_rate_all=2.0, average_eth_price=2000.0, eth_supply=120e6, eth_price=1500.0
        )

        figures = calculator.figures(inputs)

        assert figures.revenue == pytest.approx(2.0 * 2000.0 * MINUTES_PER_YEAR)
        assert figures.costs == pytest.approx(1e9)
        assert figures.earnings == pytest.approx(2.0 * 2000.0 * MINUTES_PER_YEAR - 1e9)
        assert calculator.earnings_per_unit(inputs) == pytest.approx(figures.earnings / 120e6)

    def test_missing_average_price_blanks_everything(self) -> None:
        calculator = EarningsCalculator(fixed_annual_issuance=500_000)
        figures = calculator.figures(MarketInputs(burn_rate_all=2.0))
        assert figures == EarningsFigures(revenue=None, costs=None, earnings=None)

    def test_missing_burn_rate_keeps_costs(self) -> None:
        """Costs зависят только от средней цены"""
        calculator = EarningsCalculator(fixed_annual_issuance=500_000)
        figures = calculator.figures(MarketInputs(average_eth_price=2000.0))
        assert figures.revenue is None
        assert figures.costs == pytest.approx(1e9)
        assert figures.earnings is None

    def test_missing_supply(self) -> None:
        calculator = EarningsCalculator()
        inputs = MarketInputs(burn_rate_all=2.0, average_eth_price=2000.0)
        assert calculator.earnings_per_unit(inputs) is None
