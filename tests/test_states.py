"""Tests InteractionStateCascade — hover / pressed / focused."""
import pytest

from style_engine.cascade import InteractionStateCascade

BASE = {"opacity": 100, "color": "#fff"}


def test_none_returns_input():
    s = InteractionStateCascade(hover={"opacity": 50})
    assert s.resolve(BASE, "none") == BASE


def test_state_overlays_input():
    s = InteractionStateCascade(hover={"opacity": 50})
    assert s.resolve(BASE, "hover") == {"opacity": 50, "color": "#fff"}
    assert s.resolve(BASE, "pressed") == BASE


def test_lazy_creation_on_first_write():
    s = InteractionStateCascade()
    assert s.focused is None
    s.set_property("focused", "borderColor", "#00f")
    assert s.focused == {"borderColor": "#00f"}
    assert s.has_overrides_for_state("focused") is True


def test_reset_state_deletes_bag():
    s = InteractionStateCascade()
    s.upsert_state("hover", {"opacity": 50})
    assert s.has_overrides_for_state("hover") is True
    s.reset_state("hover")
    assert s.hover is None
    assert s.has_overrides_for_state("hover") is False
    assert s.resolve(BASE, "hover") == s.resolve(BASE, "none")


def test_empty_bag_has_no_overrides():
    s = InteractionStateCascade(pressed={})
    assert s.has_overrides_for_state("pressed") is False
    assert s.has_overrides_for_state("none") is False


def test_remove_property():
    s = InteractionStateCascade(hover={"opacity": 50, "color": "#000"})
    s.remove_property("hover", "opacity")
    assert s.hover == {"color": "#000"}


def test_unknown_state_raises():
    with pytest.raises(ValueError, match="inconnu"):
        InteractionStateCascade().set_property("dragging", "opacity", 10)
