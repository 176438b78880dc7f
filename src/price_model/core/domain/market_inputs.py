"""
Market Inputs — Внешние метрики и производные значения модели цены

Immutable Pydantic модели:
- MarketInputs: живые метрики от data-fetching слоя (каждая может отсутствовать)
- BenchmarkPeRatios: P/E эталонных компаний для маркеров слайдера
- EarningsFigures: годовые revenue / costs / earnings

Модели не проверяют диапазоны рыночных данных: None означает «ещё не
загружено», любое число принимается как есть.
"""

from pydantic import BaseModel, Field

from price_model.core.domain.units import eth_from_wei


class MarketInputs(BaseModel):
    """
    Снимок внешних метрик, используемых моделью цены.

    Все поля опциональны: None означает, что метрика ещё не доступна.
    """

    burn_rate_all: float | None = Field(
        None, description="Средняя скорость сжигания ETH за всё время (ETH/мин)"
    )
    average_eth_price: float | None = Field(
        None, description="Средняя цена ETH за всё время (USD)"
    )
    eth_supply: float | None = Field(None, description="Текущий supply ETH (ETH)")
    eth_price: float | None = Field(None, description="Текущая цена ETH (USD)")

    model_config = {"frozen": True}

    @classmethod
    def from_wei_supply(
        cls,
        burn_rate_all: float | None = None,
        average_eth_price: float | None = None,
        eth_supply_wei: int | None = None,
        eth_price: float | None = None,
    ) -> "MarketInputs":
        """Конструктор для supply в wei (формат on-chain источников)."""
        return cls(
            burn_rate_all=burn_rate_all,
            average_eth_price=average_eth_price,
            eth_supply=None if eth_supply_wei is None else eth_from_wei(eth_supply_wei),
            eth_price=eth_price,
        )


class BenchmarkPeRatios(BaseModel):
    """P/E эталонных компаний (для маркеров на слайдере growth profile)."""

    AMZN: float = Field(..., description="Amazon P/E")
    DIS: float = Field(..., description="Disney P/E")
    GOOGL: float = Field(..., description="Alphabet P/E")
    INTC: float = Field(..., description="Intel P/E")
    NFLX: float = Field(..., description="Netflix P/E")
    TSLA: float = Field(..., description="Tesla P/E")

    model_config = {"frozen": True}


class EarningsFigures(BaseModel):
    """
    Годовые финансовые показатели сети.

    revenue: сожжённые ETH в USD за год
    costs: эмиссия ETH в USD за год
    earnings: revenue - costs (может быть отрицательным)
    """

    revenue: float | None = Field(None, description="Annualized revenue (USD)")
    costs: float | None = Field(None, description="Annualized costs (USD)")
    earnings: float | None = Field(None, description="Annualized earnings (USD)")

    model_config = {"frozen": True}
