"""Unit tests for result sorting and mode comparison cards."""

import pytest

from ecotrip.domain.comparison import compute_all_modes
from ecotrip.domain.entities import TransportMode, UnknownModeError
from ecotrip.domain.enums import Badge, Relation, SortKey
from ecotrip.domain.ranking import bar_percentage, build_mode_cards, sort_results


class TestSortResults:
    def test_sort_by_emission(self, scenario_results):
        assert [r.key for r in sort_results(scenario_results)] == ["train", "car", "plane"]

    def test_sort_by_time(self, scenario_results):
        ordered = sort_results(scenario_results, SortKey.TIME)
        assert [r.key for r in ordered] == ["plane", "train", "car"]

    def test_sort_by_cost(self, scenario_results):
        ordered = sort_results(scenario_results, SortKey.COST)
        assert [r.key for r in ordered] == ["train", "car", "plane"]

    def test_returns_new_list(self, scenario_results):
        before = list(scenario_results)
        sort_results(scenario_results)
        assert scenario_results == before


class TestBarPercentage:
    def test_zero_over_zero(self):
        assert bar_percentage(0.0, 0.0) == 0.0

    def test_value_over_zero_max(self):
        assert bar_percentage(5.0, 0.0) == 100.0

    def test_proportional(self):
        assert bar_percentage(25.0, 100.0) == pytest.approx(25.0)

    def test_capped(self):
        assert bar_percentage(150.0, 100.0) == 100.0


class TestModeCards:
    def test_badges_by_emission(self, scenario_results):
        cards = build_mode_cards(scenario_results, "car")
        assert [(c.result.key, c.badge) for c in cards] == [
            ("train", Badge.BEST),
            ("car", Badge.SELECTED),
            ("plane", Badge.WORST),
        ]
        assert [c.position for c in cards] == [0, 1, 2]

    def test_selected_badge_wins_over_worst(self, scenario_results):
        cards = build_mode_cards(scenario_results, "car", SortKey.TIME)
        assert cards[-1].result.key == "car"
        assert cards[-1].badge is Badge.SELECTED
        assert cards[0].badge is Badge.BEST

    def test_middle_card_has_no_badge(self, scenario_results):
        cards = build_mode_cards(scenario_results, "plane")
        assert cards[1].result.key == "car"
        assert cards[1].badge is None

    def test_relation_to_selected(self, scenario_results):
        cards = {c.result.key: c for c in build_mode_cards(scenario_results, "car")}
        assert cards["train"].relation is Relation.LESS
        assert cards["train"].co2_delta == pytest.approx(-400)
        assert cards["plane"].relation is Relation.MORE
        assert cards["plane"].co2_delta == pytest.approx(150)
        assert cards["car"].relation is None
        assert cards["car"].is_selected

    def test_same_emissions(self):
        modes = {
            "a": TransportMode("a", "A", "*", 0.1, 50.0, 0.1),
            "b": TransportMode("b", "B", "*", 0.1, 100.0, 0.1),
        }
        cards = {c.result.key: c for c in build_mode_cards(compute_all_modes(10.0, modes), "a")}
        assert cards["b"].relation is Relation.SAME

    def test_bar_percentages(self, scenario_results):
        cards = {c.result.key: c for c in build_mode_cards(scenario_results, "car")}
        assert cards["plane"].co2_percent == pytest.approx(100)
        assert cards["car"].co2_percent == pytest.approx(80)
        assert cards["car"].time_percent == pytest.approx(100)
        assert cards["plane"].time_percent == pytest.approx(12.5)
        assert cards["train"].cost_percent == pytest.approx(50)

    def test_unknown_selected_key(self, scenario_results):
        with pytest.raises(UnknownModeError):
            build_mode_cards(scenario_results, "rocket")
