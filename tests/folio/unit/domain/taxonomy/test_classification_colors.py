"""Tests for color distribution and cascading on classifications."""

import random

import pytest

from folio.domain.shared.color import to_hex, to_hsb
from tests.shared.fixtures import TestTaxonomyFactory


def _hue_distance(first: float, second: float) -> float:
    distance = abs(first - second) % 360.0
    return min(distance, 360.0 - distance)


class TestSpreadColors:
    """Test cases for evenly distributing hues over children."""

    def test_two_children_get_opposite_hues(self):
        root = TestTaxonomyFactory.node("root")
        first = TestTaxonomyFactory.node("first", parent=root)
        second = TestTaxonomyFactory.node("second", parent=root)

        root.spread_colors(0.0, 0.5, 0.5)

        assert first.color == "#804040"
        assert second.color == "#408080"
        assert to_hsb(first.color)[0] == pytest.approx(0.0, abs=1.0)
        assert to_hsb(second.color)[0] == pytest.approx(180.0, abs=1.0)

    def test_children_are_sorted_by_rank(self):
        root = TestTaxonomyFactory.node("root")
        low = TestTaxonomyFactory.node("low", parent=root, rank=0)
        high = TestTaxonomyFactory.node("high", parent=root, rank=5)

        root.spread_colors(0.0, 0.5, 0.5)

        assert root.children == [high, low]
        assert high.color == "#804040"
        assert low.color == "#408080"

    def test_hue_wraps_around(self):
        root = TestTaxonomyFactory.node("root")
        children = [TestTaxonomyFactory.node(str(i), parent=root) for i in range(4)]

        root.spread_colors(300.0, 0.6, 0.7)

        hues = [to_hsb(child.color)[0] for child in children]
        expected = [300.0, 30.0, 120.0, 210.0]
        for hue, want in zip(hues, expected):
            assert _hue_distance(hue, want) < 2.0

    def test_without_children_is_a_no_op(self):
        leaf = TestTaxonomyFactory.node("leaf", color="#123456")

        leaf.spread_colors(0.0, 0.5, 0.5)

        assert leaf.color == "#123456"

    def test_spread_cascades_to_grandchildren(self):
        root = TestTaxonomyFactory.node("root")
        child = TestTaxonomyFactory.node("child", parent=root)
        grandchild = TestTaxonomyFactory.node("grandchild", parent=child)

        root.spread_colors(0.0, 0.5, 0.5)

        hue, saturation, brightness = to_hsb(grandchild.color)
        assert _hue_distance(hue, 0.0) < 2.0
        assert saturation == pytest.approx(0.4, abs=0.01)
        assert brightness == pytest.approx(0.6, abs=0.01)


class TestAssignRandomColors:
    """Test cases for random color assignment."""

    def test_seeded_assignment_is_reproducible(self):
        colors = []
        for _ in range(2):
            root = TestTaxonomyFactory.node("root")
            a = TestTaxonomyFactory.node("a", parent=root)
            b = TestTaxonomyFactory.node("b", parent=root)
            b1 = TestTaxonomyFactory.node("b1", parent=b)

            root.assign_random_colors(random.Random(3))
            colors.append((a.color, b.color, b1.color))

        assert colors[0] == colors[1]

    @pytest.mark.parametrize("seed", range(10))
    def test_children_hues_are_evenly_spaced(self, seed):
        root = TestTaxonomyFactory.node("root")
        children = [TestTaxonomyFactory.node(str(i), parent=root) for i in range(3)]

        root.assign_random_colors(random.Random(seed))

        hues = [to_hsb(child.color)[0] for child in children]
        assert _hue_distance(hues[0], hues[1]) == pytest.approx(120.0, abs=3.0)
        assert _hue_distance(hues[1], hues[2]) == pytest.approx(120.0, abs=3.0)

    @pytest.mark.parametrize("seed", range(10))
    def test_random_ranges(self, seed):
        root = TestTaxonomyFactory.node("root")
        child = TestTaxonomyFactory.node("child", parent=root)

        root.assign_random_colors(random.Random(seed))

        _, saturation, brightness = to_hsb(child.color)
        assert 0.29 <= saturation <= 0.81
        assert 0.49 <= brightness <= 0.91

    def test_root_color_is_untouched(self):
        root = TestTaxonomyFactory.node("root", color="#010203")
        TestTaxonomyFactory.node("child", parent=root)

        root.assign_random_colors(random.Random(1))

        assert root.color == "#010203"


class TestCascadeColorDown:
    """Test cases for lightening colors down the tree."""

    def test_each_level_gets_lighter(self):
        root = TestTaxonomyFactory.node("root", color=to_hex(120.0, 0.8, 0.5))
        child = TestTaxonomyFactory.node("child", parent=root)
        grandchild = TestTaxonomyFactory.node("grandchild", parent=child)

        root.cascade_color_down()

        _, child_saturation, child_brightness = to_hsb(child.color)
        _, grand_saturation, grand_brightness = to_hsb(grandchild.color)
        assert child_saturation == pytest.approx(0.7, abs=0.01)
        assert child_brightness == pytest.approx(0.6, abs=0.01)
        assert grand_saturation == pytest.approx(0.6, abs=0.01)
        assert grand_brightness == pytest.approx(0.7, abs=0.01)

    def test_siblings_share_the_same_color(self):
        root = TestTaxonomyFactory.node("root", color=to_hex(240.0, 0.6, 0.6))
        a = TestTaxonomyFactory.node("a", parent=root)
        b = TestTaxonomyFactory.node("b", parent=root)

        root.cascade_color_down()

        assert a.color == b.color

    def test_saturation_and_brightness_are_clamped(self):
        root = TestTaxonomyFactory.node("root", color=to_hex(200.0, 0.05, 0.95))
        child = TestTaxonomyFactory.node("child", parent=root)
        grandchild = TestTaxonomyFactory.node("grandchild", parent=child)

        root.cascade_color_down()

        assert child.color == "#ffffff"
        assert grandchild.color == "#ffffff"

    def test_without_children_ignores_malformed_color(self):
        leaf = TestTaxonomyFactory.node("leaf", color="not-a-color")

        leaf.cascade_color_down()

        assert leaf.color == "not-a-color"

    @pytest.mark.parametrize(
        "color",
        [
            "not-a-color",
            "#zzzzzz",
            "#12345",
            "#-12345",
            "#0x1234",
            "#12_345",
            "# 1234 ",
            "123456",
        ],
    )
    def test_malformed_color_propagates(self, color):
        root = TestTaxonomyFactory.node("root", color=color)
        TestTaxonomyFactory.node("child", parent=root)

        with pytest.raises(ValueError):
            root.cascade_color_down()
