"""
Static Ether Data — Константы сети, не требующие загрузки

POS_ISSUANCE_YEAR — годовая эмиссия ETH после перехода на proof-of-stake.
Используется как «расходы» сети в модели цены: costs = issuance * avg_price.
"""

from typing import Final

# Эмиссия PoS в сутки (ETH), оценка для ~14M ETH в стейкинге
POS_ISSUANCE_DAY: Final[float] = 1_594.5

# Годовая эмиссия PoS (ETH), 365.25 дней с учётом високосных лет
POS_ISSUANCE_YEAR: Final[float] = POS_ISSUANCE_DAY * 365.25
