import dataclasses

import pytest

from cctag.colors import COLOR_BLUE, COLOR_GREEN, COLOR_RED, COLOR_WHITE, Color


def test_default_color_is_all_zero():
    assert tuple(Color()) == (0.0, 0.0, 0.0, 0.0)


def test_named_colors():
    assert Color(1.0, 1.0, 1.0, 1.0) == COLOR_WHITE
    assert Color(1.0, 0.0, 0.0, 1.0) == COLOR_RED
    assert Color(0.0, 1.0, 0.0, 1.0) == COLOR_GREEN
    assert Color(0.0, 0.0, 1.0, 1.0) == COLOR_BLUE


def test_indexing_follows_component_order():
    color = Color(0.1, 0.2, 0.3, 0.4)
    assert [color[i] for i in range(len(color))] == [color.r, color.g, color.b, color.alpha]
    assert color[-1] == 0.4


def test_replace_changes_one_component():
    original = Color(1.0, 0.0, 0.0, 1.0)
    changed = dataclasses.replace(original, alpha=0.5)
    assert tuple(changed) == (1.0, 0.0, 0.0, 0.5)
    assert tuple(original) == (1.0, 0.0, 0.0, 1.0)


def test_colors_are_immutable():
    color = Color(0.5, 0.5, 0.5, 1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        color.r = 0.0
    assert color.r == 0.5
    assert tuple(color) == (0.5, 0.5, 0.5, 1.0)