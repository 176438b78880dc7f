"""Interaction — оркестрация слайдеров модели цены.

- PriceModelState: единственный stateful компонент (позиции слайдеров, авто-инициализация)
- Метки слайдеров и строки отображения для presentation-слоя
"""

from .config import GrowthSliderConfig, PremiumDomain, PriceModelConfig
from .markers import SliderMarker, benchmark_markers, premium_markers
from .state_machine import (
    AutoInitResult,
    GrowthProfileState,
    PriceModelDisplay,
    PriceModelSnapshot,
    PriceModelState,
)

__all__ = [
    "AutoInitResult",
    "GrowthProfileState",
    "GrowthSliderConfig",
    "PremiumDomain",
    "PriceModelConfig",
    "PriceModelDisplay",
    "PriceModelSnapshot",
    "PriceModelState",
    "SliderMarker",
    "benchmark_markers",
    "premium_markers",
]
