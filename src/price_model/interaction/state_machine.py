"""Price Model State Machine — оркестрация слайдеров и производных значений.

Два независимых слайдера:
- Growth profile: UNINITIALIZED → INITIALIZED (однократно), позиция на log-шкале P/E
- Monetary premium: без авто-инициализации, стартует с 1x

Авто-инициализация growth profile срабатывает ровно один раз — когда впервые
одновременно известны annualized earnings и текущая цена ETH. Слайдер
ставится на рыночный P/E ETH. До перехода P/E слайдера не показывается.

Все записи сериализованы блокировкой; чтения возвращают неизменяемые снимки.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from price_model.core.domain.market_inputs import BenchmarkPeRatios, MarketInputs
from price_model.core.math.log_scale import LogScaleConverter
from price_model.core.math.optional import all_defined
from price_model.core.valuation.earnings import EarningsCalculator, earnings_per_unit
from price_model.core.valuation.projection import implied_pe_ratio, projected_price
from price_model.interaction.config import PriceModelConfig
from price_model.interaction.formatting import (
    format_billions_usd,
    format_multiplier,
    format_pe_ratio,
    format_thousands_usd,
)
from price_model.interaction.markers import (
    SliderMarker,
    benchmark_markers,
    premium_markers,
)

logger = logging.getLogger(__name__)


class GrowthProfileState(str, Enum):
    """Состояние слайдера growth profile."""
    UNINITIALIZED = "UNINITIALIZED"
    INITIALIZED = "INITIALIZED"


@dataclass(frozen=True)
class AutoInitResult:
    """Результат оценки авто-инициализации growth profile."""

    new_state: GrowthProfileState
    previous_state: GrowthProfileState
    linear_position: float
    implied_ratio: Optional[float]

    # Диагностика
    transition_occurred: bool
    transition_reason: str
    details: str


class PriceModelDisplay(BaseModel):
    """Строки отображения (None → placeholder)."""

    annualized_profits: Optional[str] = Field(None, description="Годовая прибыль, 12.3B")
    growth_profile: Optional[str] = Field(None, description="P/E слайдера, 25.0 P/E")
    monetary_premium: str = Field(..., description="Множитель премии, 2.0x")
    implied_price: Optional[str] = Field(None, description="Оценка цены, 8.3K")

    model_config = {"frozen": True}


class PriceModelSnapshot(BaseModel):
    """Неизменяемый срез состояния модели цены."""

    growth_profile_state: GrowthProfileState
    linear_position: float = Field(..., description="Позиция слайдера growth profile")
    premium: float = Field(..., description="Monetary premium")
    annualized_earnings: Optional[float] = Field(None, description="Годовая прибыль (USD)")
    current_ratio: Optional[float] = Field(None, description="P/E слайдера (после инициализации)")
    implied_ratio: Optional[float] = Field(None, description="Рыночный P/E ETH")
    projected_price: Optional[float] = Field(None, description="Оценка цены (USD)")
    growth_profile_markers: list[SliderMarker] = Field(default_factory=list)
    premium_markers: list[SliderMarker] = Field(default_factory=list)
    display: PriceModelDisplay

    model_config = {"frozen": True}


class PriceModelState:
    """Состояние виджета модели цены.

    Владелец — один координирующий контекст (presentation-слой). Изменения
    только через update_inputs / set_linear_position / set_premium.

    Производные значения не кэшируются: каждое чтение пересчитывает их из
    текущих входов и позиций слайдеров.
    """

    def __init__(
        self,
        config: Optional[PriceModelConfig] = None,
        earnings_calculator: Optional[EarningsCalculator] = None,
    ):
        """
        Args:
            config: конфигурация слайдеров (default: [6, 250] P/E, [1, 20] premium)
            earnings_calculator: расчёт earnings (default: PoS issuance)
        """
        self.config = config or PriceModelConfig()
        self.earnings_calculator = earnings_calculator or EarningsCalculator()
        self.converter = LogScaleConverter(self.config.growth_profile.domain)

        self._lock = threading.RLock()
        self._inputs = MarketInputs()
        self._linear_position = self.config.growth_profile.default_position
        self._premium = self.config.premium.default
        self._growth_profile_state = GrowthProfileState.UNINITIALIZED
        self._implied_ratio: Optional[float] = None

    # -------------------------------------------------------------------------
    # Записи
    # -------------------------------------------------------------------------

    def update_inputs(self, inputs: MarketInputs) -> AutoInitResult:
        """Новый снимок внешних метрик + попытка авто-инициализации.

        Args:
            inputs: текущие метрики (любое поле может быть None)

        Returns:
            AutoInitResult с состоянием growth profile после оценки
        """
        with self._lock:
            self._inputs = inputs
            logger.debug("Market inputs updated: %s", inputs)
            return self._evaluate_auto_init()

    def set_linear_position(self, position: float) -> None:
        """Позиция слайдера growth profile (без валидации, границы задаёт контрол)."""
        with self._lock:
            self._linear_position = position
            logger.debug("Growth profile position set to %s", position)

    def set_premium(self, premium: float) -> None:
        """Множитель monetary premium (без валидации, границы задаёт контрол)."""
        with self._lock:
            self._premium = premium
            logger.debug("Monetary premium set to %s", premium)

    # -------------------------------------------------------------------------
    # Чтения
    # -------------------------------------------------------------------------

    @property
    def inputs(self) -> MarketInputs:
        return self._inputs

    @property
    def linear_position(self) -> float:
        return self._linear_position

    @property
    def premium(self) -> float:
        return self._premium

    @property
    def growth_profile_state(self) -> GrowthProfileState:
        return self._growth_profile_state

    @property
    def has_auto_initialized(self) -> bool:
        return self._growth_profile_state == GrowthProfileState.INITIALIZED

    @property
    def implied_ratio(self) -> Optional[float]:
        """Рыночный P/E ETH, вычисленный при авто-инициализации."""
        return self._implied_ratio

    @property
    def annualized_earnings(self) -> Optional[float]:
        return self.earnings_calculator.figures(self._inputs).earnings

    @property
    def slider_ratio(self) -> float:
        """P/E, соответствующий текущей позиции слайдера (всегда определён)."""
        return self.converter.linear_to_ratio(self._linear_position)

    @property
    def current_ratio(self) -> Optional[float]:
        """P/E слайдера; None до авто-инициализации (позиция ещё не осмысленна)."""
        with self._lock:
            if not self.has_auto_initialized:
                return None
            return self.slider_ratio

    @property
    def projected_price(self) -> Optional[float]:
        with self._lock:
            return projected_price(
                self.annualized_earnings,
                self._inputs.eth_supply,
                self._premium,
                self.slider_ratio,
            )

    def snapshot(self, pe_ratios: Optional[BenchmarkPeRatios] = None) -> PriceModelSnapshot:
        """Согласованный срез всех значений, меток и строк отображения.

        Args:
            pe_ratios: P/E эталонных компаний (без них метки growth profile не строятся)
        """
        with self._lock:
            annualized_earnings = self.annualized_earnings
            current_ratio = self.current_ratio
            price = self.projected_price

            growth_markers: list[SliderMarker] = []
            if pe_ratios is not None:
                growth_markers = benchmark_markers(
                    pe_ratios, self._implied_ratio, self.converter
                )

            return PriceModelSnapshot(
                growth_profile_state=self._growth_profile_state,
                linear_position=self._linear_position,
                premium=self._premium,
                annualized_earnings=annualized_earnings,
                current_ratio=current_ratio,
                implied_ratio=self._implied_ratio,
                projected_price=price,
                growth_profile_markers=growth_markers,
                premium_markers=premium_markers(self.config.premium),
                display=PriceModelDisplay(
                    annualized_profits=format_billions_usd(annualized_earnings),
                    growth_profile=format_pe_ratio(current_ratio),
                    monetary_premium=format_multiplier(self._premium),
                    implied_price=format_thousands_usd(price),
                ),
            )

    # -------------------------------------------------------------------------
    # Авто-инициализация
    # -------------------------------------------------------------------------

    def _evaluate_auto_init(self) -> AutoInitResult:
        """Однократный переход UNINITIALIZED → INITIALIZED.

        Условие: известны annualized earnings и цена ETH. Флаг ставится до
        расчёта P/E: даже если P/E не удалось вычислить, повторной попытки нет.
        """
        previous_state = self._growth_profile_state

        # 1. Уже инициализирован → no-op
        if previous_state == GrowthProfileState.INITIALIZED:
            return self._create_result(
                previous_state=previous_state,
                transition_occurred=False,
                transition_reason="already_initialized",
                details="Auto-initialization already fired, position untouched",
            )

        # 2. Ожидание входов
        earnings = self.annualized_earnings
        eth_price = self._inputs.eth_price
        if not all_defined(earnings, eth_price):
            return self._create_result(
                previous_state=previous_state,
                transition_occurred=False,
                transition_reason="awaiting_inputs",
                details=f"earnings={earnings}, eth_price={eth_price}",
            )

        self._growth_profile_state = GrowthProfileState.INITIALIZED

        # 3. EPS неизвестен (нет supply) → позиция остаётся по умолчанию
        eps = earnings_per_unit(earnings, self._inputs.eth_supply)
        if eps is None:
            logger.info("Growth profile initialized without supply, position kept")
            return self._create_result(
                previous_state=previous_state,
                transition_occurred=True,
                transition_reason="initialized_without_earnings_per_unit",
                details="eth_supply unknown, implied P/E not computed",
            )

        implied_ratio = implied_pe_ratio(eth_price, eps)
        self._implied_ratio = implied_ratio

        # 4. P/E вне домена логарифма (отрицательная прибыль, NaN)
        if not implied_ratio > 0:
            logger.warning(
                "Implied P/E %s cannot be placed on log scale, position kept at %s",
                implied_ratio,
                self._linear_position,
            )
            return self._create_result(
                previous_state=previous_state,
                transition_occurred=True,
                transition_reason="implied_ratio_outside_log_domain",
                details=f"implied_ratio={implied_ratio}",
            )

        # 5. Слайдер на рыночный P/E
        self._linear_position = self.converter.ratio_to_linear(implied_ratio)
        logger.info(
            "Growth profile auto-initialized: implied P/E %.2f → position %.4f",
            implied_ratio,
            self._linear_position,
        )
        return self._create_result(
            previous_state=previous_state,
            transition_occurred=True,
            transition_reason="auto_initialized",
            details=f"implied_ratio={implied_ratio:.3f}, position={self._linear_position:.4f}",
        )

    def _create_result(
        self,
        previous_state: GrowthProfileState,
        transition_occurred: bool,
        transition_reason: str,
        details: str,
    ) -> AutoInitResult:
        """Создание результата авто-инициализации."""
        return AutoInitResult(
            new_state=self._growth_profile_state,
            previous_state=previous_state,
            linear_position=self._linear_position,
            implied_ratio=self._implied_ratio,
            transition_occurred=transition_occurred,
            transition_reason=transition_reason,
            details=details,
        )
