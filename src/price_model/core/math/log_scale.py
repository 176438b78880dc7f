"""
Log Scale — Конверсия линейной позиции слайдера в логарифмическую шкалу P/E

Слайдер growth profile работает в линейных координатах [0, 1], а P/E
отображается на логарифмическую шкалу [min_ratio, max_ratio] (по умолчанию
[6, 250]). Логарифм нужен, чтобы «дешёвые» компании (P/E 6–30) и growth-
компании (P/E 100+) занимали сопоставимую длину слайдера.

ФОРМУЛЫ:
    log_min = ln(min_ratio), log_max = ln(max_ratio)
    log_range = log_max - log_min

    ratio(position) = exp(position * log_range + log_min)
    position(ratio) = clamp01((ln(ratio) - log_min) / log_range)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0 < min_ratio < max_ratio (проверяется при создании LogScaleDomain)
2. linear_to_ratio не клампит вход: позиция ∈ [0, 1] гарантируется вызывающим
3. ratio_to_linear клампит результат: P/E вне домена «прилипает» к краю
4. ratio <= 0 или NaN → ScaleDomainViolation (логарифм не определён)
"""

import math
from dataclasses import dataclass, field
from typing import Final

from price_model.core.math.numerical_safeguards import clamp01, validate_positive

# =============================================================================
# ГРАНИЦЫ ДОМЕНА ПО УМОЛЧАНИЮ
# =============================================================================

GROWTH_PROFILE_MIN_RATIO: Final[float] = 6.0
GROWTH_PROFILE_MAX_RATIO: Final[float] = 250.0


class ScaleDomainViolation(ValueError):
    """
    Нарушение domain для ln(ratio): ratio <= 0 или NaN.

    Это нарушение предусловия, а не восстанавливаемая ситуация: вызывающий
    код обязан отфильтровать неположительные P/E (например, при
    отрицательной прибыли) до конверсии.
    """

    pass


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class LogScaleDomain:
    """Границы логарифмической шкалы ratio.

    По умолчанию: growth profile P/E ∈ [6, 250].
    """

    min_ratio: float = GROWTH_PROFILE_MIN_RATIO
    max_ratio: float = GROWTH_PROFILE_MAX_RATIO

    def __post_init__(self) -> None:
        validate_positive(self.min_ratio, "min_ratio")
        validate_positive(self.max_ratio, "max_ratio")
        if self.min_ratio >= self.max_ratio:
            raise ValueError(
                f"min_ratio must be < max_ratio, got [{self.min_ratio}, {self.max_ratio}]"
            )


# =============================================================================
# КОНВЕРТЕР
# =============================================================================


@dataclass(frozen=True)
class LogScaleConverter:
    """Биекция (с точностью до clamp) между позицией [0, 1] и ratio на log-шкале.

    Логарифмы границ вычисляются один раз при создании конвертера.
    """

    domain: LogScaleDomain = field(default_factory=LogScaleDomain)
    log_min: float = field(init=False)
    log_max: float = field(init=False)
    log_range: float = field(init=False)

    def __post_init__(self) -> None:
        log_min = math.log(self.domain.min_ratio)
        log_max = math.log(self.domain.max_ratio)
        object.__setattr__(self, "log_min", log_min)
        object.__setattr__(self, "log_max", log_max)
        object.__setattr__(self, "log_range", log_max - log_min)

    def linear_to_ratio(self, position: float) -> float:
        """
        Линейная позиция [0, 1] → ratio на логарифмической шкале.

        Вход не клампится. Функция монотонно возрастает по position.

        Args:
            position: Позиция слайдера (ожидается ∈ [0, 1])

        Returns:
            exp(position * log_range + log_min)
        """
        position_in_range = position * self.log_range
        shifted_position = position_in_range + self.log_min
        return math.exp(shifted_position)

    def ratio_to_linear(self, ratio: float) -> float:
        """
        Ratio на логарифмической шкале → линейная позиция [0, 1].

        Ratio вне домена (например, живой рыночный P/E) клампится к краю
        шкалы, +inf даёт 1.0.

        Args:
            ratio: P/E ratio (строго положительный)

        Returns:
            clamp01((ln(ratio) - log_min) / log_range)

        Raises:
            ScaleDomainViolation: если ratio <= 0 или NaN
        """
        if math.isnan(ratio) or ratio <= 0:
            raise ScaleDomainViolation(
                f"ratio must be positive for log scale conversion, got {ratio}"
            )

        ratio_in_range = math.log(ratio) - self.log_min
        return clamp01(ratio_in_range / self.log_range)


# Конвертер growth profile по умолчанию ([6, 250])
DEFAULT_GROWTH_PROFILE_DOMAIN: Final[LogScaleDomain] = LogScaleDomain()
DEFAULT_GROWTH_PROFILE_CONVERTER: Final[LogScaleConverter] = LogScaleConverter(
    DEFAULT_GROWTH_PROFILE_DOMAIN
)


def linear_to_ratio(position: float) -> float:
    """linear_to_ratio на шкале growth profile по умолчанию."""
    return DEFAULT_GROWTH_PROFILE_CONVERTER.linear_to_ratio(position)


def ratio_to_linear(ratio: float) -> float:
    """ratio_to_linear на шкале growth profile по умолчанию."""
    return DEFAULT_GROWTH_PROFILE_CONVERTER.ratio_to_linear(ratio)
