"""Строки отображения для presentation-слоя.

None на входе → None на выходе: неизвестное значение рендерится
placeholder-ом, а не нулём.
"""

from typing import Final

BILLION: Final[float] = 1e9
THOUSAND: Final[float] = 1e3


def format_one_digit(value: float) -> str:
    """
    Число с одним знаком после запятой и разделителем тысяч.

    Examples:
        >>> format_one_digit(1234.56)
        '1,234.6'
        >>> format_one_digit(-0.04)
        '-0.0'
    """
    return f"{value:,.1f}"


def format_billions_usd(value: float | None) -> str | None:
    """Годовая прибыль в миллиардах: 12.3B."""
    if value is None:
        return None
    return f"{format_one_digit(value / BILLION)}B"


def format_thousands_usd(value: float | None) -> str | None:
    """Оценка цены в тысячах: 8.3K."""
    if value is None:
        return None
    return f"{format_one_digit(value / THOUSAND)}K"


def format_pe_ratio(value: float | None) -> str | None:
    """P/E слайдера: 25.0 P/E."""
    if value is None:
        return None
    return f"{format_one_digit(value)} P/E"


def format_multiplier(value: float) -> str:
    """Monetary premium: 2.0x (всегда известен)."""
    return f"{format_one_digit(value)}x"
