"""
Тесты для меток слайдеров

Проверяет:
1. Порядок и видимость меток P/E (ETH, AMZN)
2. Позиции меток на log-шкале
3. Метки monetary premium
"""

import pytest

from price_model.core.domain.market_inputs import BenchmarkPeRatios
from price_model.core.math.log_scale import DEFAULT_GROWTH_PROFILE_CONVERTER as CONVERTER
from price_model.interaction.config import PremiumDomain
from price_model.interaction.markers import benchmark_markers, premium_markers

PE_RATIOS = BenchmarkPeRatios(AMZN=60.0, DIS=30.0, GOOGL=25.0, INTC=10.0, NFLX=40.0, TSLA=300.0)


def _labels(markers) -> list[str]:
    return [m.label for m in markers]


class TestBenchmarkMarkers:
    """Тесты для benchmark_markers"""

    def test_without_eth_ratio(self) -> None:
        """P/E ETH неизвестен → нет меток ETH и AMZN"""
        markers = benchmark_markers(PE_RATIOS, None, CONVERTER)
        assert _labels(markers) == ["INTC", "GOOGL", "DIS", "TSLA"]

    def test_with_eth_ratio_far_from_amzn(self) -> None:
        markers = benchmark_markers(PE_RATIOS, 20.0, CONVERTER)
        assert _labels(markers) == ["INTC", "GOOGL", "ETH", "AMZN", "DIS", "TSLA"]

    def test_amzn_hidden_when_close_to_eth(self) -> None:
        """AMZN - ETH <= 4 → метки перекрываются, AMZN скрыт"""
        markers = benchmark_markers(PE_RATIOS, 56.0, CONVERTER)
        assert "AMZN" not in _labels(markers)
        assert "ETH" in _labels(markers)

    def test_negative_eth_ratio_not_marked(self) -> None:
        markers = benchmark_markers(PE_RATIOS, -12.0, CONVERTER)
        assert _labels(markers) == ["INTC", "GOOGL", "DIS", "TSLA"]

    def test_negative_benchmark_skipped(self) -> None:
        """Убыточная компания (P/E < 0) не размещается на log-шкале"""
        ratios = PE_RATIOS.model_copy(update={"INTC": -15.0})

        markers = benchmark_markers(ratios, 20.0, CONVERTER)

        assert _labels(markers) == ["GOOGL", "ETH", "AMZN", "DIS", "TSLA"]

    @pytest.mark.parametrize("pe_ratio", [0.0, float("nan")])
    def test_zero_and_nan_benchmark_skipped(self, pe_ratio: float) -> None:
        ratios = PE_RATIOS.model_copy(update={"DIS": pe_ratio})
        assert "DIS" not in _labels(benchmark_markers(ratios, None, CONVERTER))

    def test_netflix_not_marked(self) -> None:
        markers = benchmark_markers(PE_RATIOS, 20.0, CONVERTER)
        assert "NFLX" not in _labels(markers)

    def test_positions_on_log_scale(self) -> None:
        markers = {m.label: m for m in benchmark_markers(PE_RATIOS, 20.0, CONVERTER)}

        assert markers["GOOGL"].value == 25.0
        assert markers["GOOGL"].position == pytest.approx(CONVERTER.ratio_to_linear(25.0))
        assert markers["INTC"].position < markers["GOOGL"].position
        # TSLA 300 вне домена → правый край
        assert markers["TSLA"].position == 1.0


class TestPremiumMarkers:
    """Тесты для premium_markers"""

    def test_default_domain(self) -> None:
        markers = premium_markers(PremiumDomain())

        assert _labels(markers) == ["2x", "4x", "8x", "16x"]
        assert markers[0].position == pytest.approx(1.0 / 19.0)
        assert markers[-1].position == pytest.approx(15.0 / 19.0)

    def test_markers_outside_domain_dropped(self) -> None:
        markers = premium_markers(PremiumDomain(min_multiplier=1.0, max_multiplier=10.0))
        assert _labels(markers) == ["2x", "4x", "8x"]


class TestPremiumDomain:
    """Тесты конфигурации PremiumDomain"""

    def test_defaults(self) -> None:
        domain = PremiumDomain()
        assert (domain.min_multiplier, domain.max_multiplier) == (1.0, 20.0)
        assert domain.step == 0.01
        assert domain.default == 1.0
        assert domain.range == 19.0

    def test_position_of_bounds(self) -> None:
        domain = PremiumDomain()
        assert domain.position_of(1.0) == 0.0
        assert domain.position_of(20.0) == 1.0

    def test_invalid_bounds(self) -> None:
        with pytest.raises(ValueError):
            PremiumDomain(min_multiplier=20.0, max_multiplier=1.0)

    def test_default_outside_bounds(self) -> None:
        with pytest.raises(ValueError):
            PremiumDomain(default=25.0)
