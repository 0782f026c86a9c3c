import itertools

import pytest

from traveller.color import Color, color_from_name, color_pair

KNOWN = [c for c in Color if c is not Color.UNKNOWN]


@pytest.mark.parametrize("color", KNOWN)
def test_names_round_trip(color):
    assert color_from_name(color.name.lower()) is color


@pytest.mark.parametrize("name", ["", "purple", "Red", "grey"])
def test_unknown_names(name):
    assert color_from_name(name) is Color.UNKNOWN


def test_pairs_are_unique():
    pairs = {color_pair(f, b) for f, b in itertools.product(KNOWN, KNOWN)}
    assert len(pairs) == len(KNOWN) ** 2


def test_pinned_pairs():
    assert color_pair(Color.BLACK, Color.BLACK) == 101
    assert color_pair(Color.WHITE, Color.WHITE) == 808


def test_unknown_colour_has_no_pair():
    with pytest.raises(ValueError):
        color_pair(Color.UNKNOWN, Color.BLACK)