import math

import pytest

from huegen.color import (
    MAX_DISTANCE,
    InvalidColorFormat,
    color_distance,
    is_similar,
    random_colors,
)
from huegen.random import SeededRandom


def test_distance_extremes():
    assert color_distance("#000000", "#000000") == 0
    assert color_distance("#000000", "#FFFFFF") == pytest.approx(MAX_DISTANCE)
    assert MAX_DISTANCE == pytest.approx(441.67, abs=0.01)


def test_distance_between_primaries():
    assert color_distance("#FF0000", "#00FF00") == pytest.approx(255 * math.sqrt(2))


def test_distance_ignores_case():
    assert color_distance("#abcdef", "#ABCDEF") == 0


def test_distance_is_symmetric_and_zero_on_self():
    colors = random_colors(40, SeededRandom(3))
    for a, b in zip(colors, reversed(colors)):
        assert color_distance(a, b) == color_distance(b, a)
        assert color_distance(a, a) == 0
        assert 0 <= color_distance(a, b) <= MAX_DISTANCE


def test_distance_rejects_invalid_colors():
    with pytest.raises(InvalidColorFormat) as exc:
        color_distance("#000000", "red")
    assert exc.value.param == "b"


def test_is_similar_uses_inclusive_threshold():
    assert is_similar("#000000", "#393939")  # ~98.7
    assert not is_similar("#000000", "#3A3A3A")  # ~100.5
    assert is_similar("#000000", "#3A3A3A", threshold=150)
