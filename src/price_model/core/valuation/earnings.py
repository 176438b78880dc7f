"""
Earnings — Годовая прибыль сети из burn / issuance

Модель рассматривает сеть как компанию:
- revenue: ETH, сжигаемые комиссиями (burn), в USD за год
- costs: ETH, выпускаемые валидаторам (issuance), в USD за год
- earnings: revenue - costs

ФОРМУЛЫ:
    annualized_revenue = burn_rate_per_minute * average_price * MINUTES_PER_YEAR
    annualized_costs = fixed_annual_issuance * average_price
    annualized_earnings = annualized_revenue - annualized_costs
    earnings_per_unit = annualized_earnings / total_units_outstanding

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отсутствующий вход (None) → None на выходе, никогда не 0
2. Отрицательная прибыль — валидный результат, не ошибка
3. Нулевой supply даёт ±inf / NaN (IEEE), а не exception
"""

from dataclasses import dataclass
from typing import Final

from price_model.core.domain.market_inputs import EarningsFigures, MarketInputs
from price_model.core.domain.static_data import POS_ISSUANCE_YEAR
from price_model.core.math.numerical_safeguards import ieee_divide
from price_model.core.math.optional import lift_optional

# 365.25 дней учитывает високосные годы
MINUTES_PER_YEAR: Final[float] = 60 * 24 * 365.25


@lift_optional
def annualized_revenue(per_minute_rate: float, average_price: float) -> float:
    """
    Годовая выручка из поминутной скорости сжигания.

    Args:
        per_minute_rate: Сжигание в единицах актива за минуту
        average_price: Средняя цена актива (USD)

    Returns:
        per_minute_rate * average_price * MINUTES_PER_YEAR, None если вход неизвестен
    """
    return per_minute_rate * average_price * MINUTES_PER_YEAR


def annualized_costs(
    fixed_annual_issuance: float, average_price: float | None
) -> float | None:
    """
    Годовые расходы: фиксированная эмиссия по средней цене.

    fixed_annual_issuance — статическая константа, поэтому неизвестной
    может быть только цена.
    """
    if average_price is None:
        return None
    return fixed_annual_issuance * average_price


@lift_optional
def annualized_earnings(revenue: float, costs: float) -> float:
    """Годовая прибыль revenue - costs (может быть отрицательной)."""
    return revenue - costs


@lift_optional
def earnings_per_unit(
    annualized_earnings: float, total_units_outstanding: float
) -> float:
    """
    Прибыль на единицу supply (аналог EPS).

    Нулевой supply не защищён: результат ±inf или NaN пропагирует дальше.

    Args:
        annualized_earnings: Годовая прибыль (USD)
        total_units_outstanding: Текущий supply (ETH)

    Returns:
        annualized_earnings / total_units_outstanding
    """
    return ieee_divide(annualized_earnings, total_units_outstanding)


@dataclass(frozen=True)
class EarningsCalculator:
    """Расчёт полной цепочки earnings из снимка MarketInputs.

    fixed_annual_issuance: годовая эмиссия (по умолчанию PoS issuance)
    """

    fixed_annual_issuance: float = POS_ISSUANCE_YEAR

    def figures(self, inputs: MarketInputs) -> EarningsFigures:
        """Revenue, costs и earnings для текущего снимка метрик."""
        revenue = annualized_revenue(inputs.burn_rate_all, inputs.average_eth_price)
        costs = annualized_costs(self.fixed_annual_issuance, inputs.average_eth_price)
        earnings = annualized_earnings(revenue, costs)
        return EarningsFigures(revenue=revenue, costs=costs, earnings=earnings)

    def earnings_per_unit(self, inputs: MarketInputs) -> float | None:
        """Earnings per unit для текущего снимка метрик."""
        return earnings_per_unit(self.figures(inputs).earnings, inputs.eth_supply)
