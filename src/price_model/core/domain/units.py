"""
Units — Конверсия единиц ETH

Единственный допустимый способ преобразований между:
- wei (целое, как отдают on-chain источники)
- ETH (float, как используется в расчётах модели)

Конверсия wei → ETH «небезопасна»: float теряет точность за пределами 2^53 wei.
Для оценки цены (порядок 1e8 ETH) потеря младших разрядов несущественна.
"""

from typing import Final

# 1 ETH = 10^18 wei
WEI_PER_ETH: Final[int] = 10**18


def eth_from_wei(amount_wei: int) -> float:
    """
    Конверсия: wei → ETH (с потерей точности float).

    Args:
        amount_wei: Количество в wei

    Returns:
        Количество в ETH

    Examples:
        >>> eth_from_wei(10**18)
        1.0
        >>> eth_from_wei(120_000_000 * 10**18)
        120000000.0
    """
    return amount_wei / WEI_PER_ETH
