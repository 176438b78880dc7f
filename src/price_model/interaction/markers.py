"""
Markers — Метки на слайдерах

Growth profile: P/E эталонных компаний и рыночный P/E самого ETH,
размещённые на log-шкале через ratio_to_linear.

Monetary premium: фиксированные метки 2x, 4x, 8x, 16x на линейной шкале.
"""

from typing import Final

from pydantic import BaseModel, Field

from price_model.core.domain.market_inputs import BenchmarkPeRatios
from price_model.core.math.log_scale import LogScaleConverter
from price_model.interaction.config import PremiumDomain

# AMZN скрывается, если его метка ближе этого расстояния (в P/E) к метке ETH
AMZN_MIN_DISTANCE_FROM_ETH: Final[float] = 4.0

PREMIUM_MARKER_MULTIPLIERS: Final[tuple[float, ...]] = (2.0, 4.0, 8.0, 16.0)


class SliderMarker(BaseModel):
    """Метка на слайдере: подпись, значение на шкале и позиция [0, 1]."""

    label: str = Field(..., min_length=1, description="Тикер или подпись метки")
    value: float = Field(..., description="Значение на шкале (P/E или множитель)")
    position: float = Field(..., ge=0.0, le=1.0, description="Позиция на слайдере")

    model_config = {"frozen": True}


def _is_placeable(pe_ratio: float | None) -> bool:
    # ln(P/E) определён только для P/E > 0 (NaN тоже отсекается)
    return pe_ratio is not None and pe_ratio > 0


def _append_pe_marker(
    markers: list[SliderMarker],
    label: str,
    pe_ratio: float,
    converter: LogScaleConverter,
) -> None:
    if not _is_placeable(pe_ratio):
        return
    markers.append(
        SliderMarker(
            label=label, value=pe_ratio, position=converter.ratio_to_linear(pe_ratio)
        )
    )


def benchmark_markers(
    pe_ratios: BenchmarkPeRatios,
    implied_ratio: float | None,
    converter: LogScaleConverter,
) -> list[SliderMarker]:
    """
    Метки P/E на слайдере growth profile (слева направо по порядку отрисовки).

    Порядок: INTC, GOOGL, ETH, AMZN, DIS, TSLA. NFLX не отображается.
    - Компании с неположительным P/E (убыток) пропускаются: такой P/E нельзя
      разместить на log-шкале
    - ETH: только если рыночный P/E известен и положителен
    - AMZN: только если P/E ETH известен и AMZN - ETH > 4 (иначе метки перекрываются)

    Args:
        pe_ratios: P/E эталонных компаний
        implied_ratio: Рыночный P/E ETH (None до авто-инициализации)
        converter: Конвертер log-шкалы слайдера

    Returns:
        Список SliderMarker
    """
    eth_known = _is_placeable(implied_ratio)

    markers: list[SliderMarker] = []
    _append_pe_marker(markers, "INTC", pe_ratios.INTC, converter)
    _append_pe_marker(markers, "GOOGL", pe_ratios.GOOGL, converter)

    if eth_known:
        _append_pe_marker(markers, "ETH", implied_ratio, converter)

    if eth_known and pe_ratios.AMZN - implied_ratio > AMZN_MIN_DISTANCE_FROM_ETH:
        _append_pe_marker(markers, "AMZN", pe_ratios.AMZN, converter)

    _append_pe_marker(markers, "DIS", pe_ratios.DIS, converter)
    _append_pe_marker(markers, "TSLA", pe_ratios.TSLA, converter)
    return markers


def premium_markers(domain: PremiumDomain) -> list[SliderMarker]:
    """Метки 2x/4x/8x/16x на слайдере monetary premium.

    Позиции точные: (m - min) / (max - min). Визуальные сдвиги меток под
    ширину ползунка (+0.3, +0.2, +0.1, -0.3) делает presentation-слой.
    """
    return [
        SliderMarker(
            label=f"{multiplier:g}x",
            value=multiplier,
            position=domain.position_of(multiplier),
        )
        for multiplier in PREMIUM_MARKER_MULTIPLIERS
        if domain.min_multiplier <= multiplier <= domain.max_multiplier
    ]
