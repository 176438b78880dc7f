"""Конфигурация слайдеров модели цены.

- GrowthSliderConfig: log-шкала P/E [6, 250], шаг позиции 0.001
- PremiumDomain: линейная шкала monetary premium [1x, 20x], шаг 0.01, default 1x
"""

from dataclasses import dataclass, field
from typing import Final

from price_model.core.math.log_scale import LogScaleDomain
from price_model.core.math.numerical_safeguards import validate_in_range, validate_positive

MONETARY_PREMIUM_MIN: Final[float] = 1.0
MONETARY_PREMIUM_MAX: Final[float] = 20.0
MONETARY_PREMIUM_STEP: Final[float] = 0.01
MONETARY_PREMIUM_DEFAULT: Final[float] = 1.0

GROWTH_PROFILE_POSITION_STEP: Final[float] = 0.001


@dataclass(frozen=True)
class PremiumDomain:
    """Линейная шкала monetary premium."""

    min_multiplier: float = MONETARY_PREMIUM_MIN
    max_multiplier: float = MONETARY_PREMIUM_MAX
    step: float = MONETARY_PREMIUM_STEP
    default: float = MONETARY_PREMIUM_DEFAULT

    def __post_init__(self) -> None:
        validate_positive(self.step, "step")
        if self.min_multiplier >= self.max_multiplier:
            raise ValueError(
                f"min_multiplier must be < max_multiplier, "
                f"got [{self.min_multiplier}, {self.max_multiplier}]"
            )
        validate_in_range(
            self.default, "default", self.min_multiplier, self.max_multiplier
        )

    @property
    def range(self) -> float:
        return self.max_multiplier - self.min_multiplier

    def position_of(self, multiplier: float) -> float:
        """Позиция множителя на слайдере: (m - min) / (max - min)."""
        return (multiplier - self.min_multiplier) / self.range


@dataclass(frozen=True)
class GrowthSliderConfig:
    """Слайдер growth profile: линейная позиция поверх log-шкалы P/E.

    default_position используется до авто-инициализации от рыночного P/E.
    """

    domain: LogScaleDomain = field(default_factory=LogScaleDomain)
    step: float = GROWTH_PROFILE_POSITION_STEP
    default_position: float = 0.0

    def __post_init__(self) -> None:
        validate_positive(self.step, "step")
        validate_in_range(self.default_position, "default_position", 0.0, 1.0)


@dataclass(frozen=True)
class PriceModelConfig:
    """Полная конфигурация виджета модели цены."""

    growth_profile: GrowthSliderConfig = field(default_factory=GrowthSliderConfig)
    premium: PremiumDomain = field(default_factory=PremiumDomain)
