"""
Projection — Итоговая оценка цены

ФОРМУЛА:
    projected_price = earnings_per_unit * pe_ratio * monetary_premium

pe_ratio приходит со слайдера growth profile (через LogScaleConverter),
monetary_premium — со слайдера премии. Это единственный результат ядра,
который потребляет presentation-слой.

КРИТИЧЕСКИЙ ИНВАРИАНТ:
Результат определён только если определены все четыре входа. Никаких
подстановок по умолчанию.
"""

from price_model.core.math.numerical_safeguards import ieee_divide
from price_model.core.math.optional import lift_optional
from price_model.core.valuation.earnings import earnings_per_unit


@lift_optional
def projected_price(
    annualized_earnings: float,
    total_units_outstanding: float,
    premium: float,
    ratio: float,
) -> float | None:
    """
    Оценка цены из прибыли, supply, премии и P/E.

    Args:
        annualized_earnings: Годовая прибыль (USD), может быть отрицательной
        total_units_outstanding: Текущий supply (ETH)
        premium: Monetary premium (множитель, 1x..20x)
        ratio: P/E ratio

    Returns:
        earnings_per_unit * ratio * premium, либо None
    """
    eps = earnings_per_unit(annualized_earnings, total_units_outstanding)
    if eps is None:
        return None

    return eps * ratio * premium


@lift_optional
def implied_pe_ratio(price: float, earnings_per_unit: float) -> float:
    """
    Рыночный P/E: текущая цена / прибыль на единицу.

    При отрицательной прибыли результат отрицательный и не может быть
    размещён на логарифмической шкале.
    """
    return ieee_divide(price, earnings_per_unit)
