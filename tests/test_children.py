"""Tests overrides enfants — héritage, fusion par propriété, purge."""
import pytest

from style_engine.errors import UnknownPropertyError
from style_engine.effects import (
    ChildOverrideResolver, EffectDefinition,
    effective_for, prune_child_overrides, remove_child_override, upsert_child_override,
)


def _parent() -> EffectDefinition:
    e = EffectDefinition.default("appear")
    e.apply_preset("fade-up")   # opacity + translateY
    return e


def test_no_override_returns_parent_itself():
    parent = _parent()
    assert effective_for(parent, "card-1") is parent


def test_inheritance_follows_later_parent_edits():
    parent = _parent()
    upsert_child_override(parent, "card-2", duration=900)
    parent.update_timing(duration=1200)
    assert effective_for(parent, "card-1").duration == 1200
    assert effective_for(parent, "card-2").duration == 900


def test_inheritance_unaffected_by_sibling_edits():
    parent = _parent()
    snapshot = parent.model_dump(exclude={"child_overrides"})
    upsert_child_override(parent, "card-2", easing="linear", delay=50)
    resolved = effective_for(parent, "card-1")
    assert resolved.model_dump(exclude={"child_overrides"}) == snapshot


def test_defined_fields_override_undefined_inherit():
    parent = _parent()
    parent.delay = 100
    upsert_child_override(parent, "c", easing="linear")
    resolved = effective_for(parent, "c")
    assert resolved.easing == "linear"
    assert resolved.delay == 100
    assert resolved.duration == parent.duration
    assert resolved is not parent
    assert resolved.child_overrides == []


def test_keyframes_merge_per_property():
    parent = _parent()
    upsert_child_override(parent, "c", keyframes={"from": {"translateY": "80"}})
    resolved = effective_for(parent, "c")
    assert resolved.keyframes.from_ == {"opacity": 0, "translateY": "80"}
    assert resolved.keyframes.to == {"opacity": 100, "translateY": "0"}
    assert parent.keyframes.from_["translateY"] == "30"


def test_child_only_property_keeps_keyframes_symmetric():
    parent = _parent()
    upsert_child_override(parent, "c", keyframes={"to": {"rotate": "15"}})
    resolved = effective_for(parent, "c")
    assert resolved.keyframes.to["rotate"] == "15"
    assert resolved.keyframes.from_["rotate"] == "0"
    assert set(resolved.keyframes.from_) == set(resolved.keyframes.to)


def test_successive_upserts_merge_keyframes():
    parent = _parent()
    upsert_child_override(parent, "c", keyframes={"from": {"translateY": "80"}})
    upsert_child_override(parent, "c", keyframes={"to": {"opacity": 70}})
    record = parent.child_override("c")
    assert record.keyframes.from_ == {"translateY": "80"}
    assert record.keyframes.to == {"opacity": 70}


def test_child_preset_replaces_parent_bundle():
    parent = _parent()
    upsert_child_override(parent, "c", preset="zoom-in", delay=40)
    resolved = effective_for(parent, "c")
    assert resolved.preset == "zoom-in"
    assert resolved.keyframes.from_ == {"scale": 0.8, "opacity": 0}
    assert resolved.easing == "ease-out-back"
    assert resolved.delay == 40


def test_hand_edited_child_reports_custom():
    parent = _parent()
    upsert_child_override(parent, "c", duration=100)
    assert effective_for(parent, "c").preset == "custom"


def test_scroll_range_override():
    parent = EffectDefinition.default("scroll")
    upsert_child_override(parent, "c", scroll_range={"start": 20, "end": 60})
    resolved = effective_for(parent, "c")
    assert resolved.scroll_range.start == 20
    assert parent.scroll_range.start == 0


def test_effective_view_does_not_share_state_with_parent():
    parent = _parent()
    upsert_child_override(parent, "c", duration=900)
    view = effective_for(parent, "c")
    view.trigger_params.threshold = 0.9
    view.keyframes.from_["opacity"] = 50
    assert parent.trigger_params.threshold == 0.1
    assert parent.keyframes.from_["opacity"] == 0


def test_unknown_child_keyframe_property_is_dropped():
    parent = _parent()
    record = upsert_child_override(parent, "c", keyframes={"from": {"bogus": 1, "translateY": "60"}})
    assert record.keyframes.from_ == {"translateY": "60"}
    resolved = effective_for(parent, "c")
    assert "bogus" not in resolved.keyframes.from_
    assert "bogus" not in resolved.keyframes.to


def test_unknown_child_keyframe_property_strict_raises():
    parent = _parent()
    with pytest.raises(UnknownPropertyError):
        upsert_child_override(parent, "c", strict=True, keyframes={"to": {"bogus": 1}})
    assert parent.child_overrides == []


def test_unknown_property_in_loaded_override_is_ignored():
    parent = EffectDefinition.model_validate({
        "trigger": "appear",
        "keyframes": {"from": {"opacity": 0}, "to": {"opacity": 100}},
        "childOverrides": [{"childId": "c", "keyframes": {"from": {"bogus": 1}}}],
    })
    resolved = effective_for(parent, "c")
    assert resolved.keyframes.from_ == {"opacity": 0}
    assert resolved.keyframes.to == {"opacity": 100}


def test_upsert_creates_once_per_child():
    parent = _parent()
    first = upsert_child_override(parent, "c")
    assert first.is_inheriting()
    upsert_child_override(parent, "c", duration=10)
    assert len(parent.child_overrides) == 1
    assert parent.child_override("c").duration == 10
    assert effective_for(parent, "c").duration == 10


def test_upsert_none_returns_field_to_parent():
    parent = _parent()
    upsert_child_override(parent, "c", duration=10, easing="linear")
    upsert_child_override(parent, "c", duration=None)
    record = parent.child_override("c")
    assert record.duration is None
    assert record.easing == "linear"


def test_remove_reverts_to_full_inheritance():
    parent = _parent()
    upsert_child_override(parent, "c", duration=10)
    assert remove_child_override(parent, "c") is True
    assert effective_for(parent, "c") is parent
    assert remove_child_override(parent, "c") is False


def test_prune_dangling_overrides():
    parent = _parent()
    for cid in ("a", "b", "c"):
        upsert_child_override(parent, cid, delay=1)
    assert prune_child_overrides(parent, ["a", "c"]) == ["b"]
    assert [c.child_id for c in parent.child_overrides] == ["a", "c"]
    assert prune_child_overrides(parent, ["a", "c"]) == []


def test_resolver_facade():
    parent = _parent()
    resolver = ChildOverrideResolver(parent)
    resolver.upsert("card-2", duration=900)
    assert resolver.get("card-2").duration == 900
    assert resolver.effective_for("card-2").duration == 900
    assert parent.effective_for("card-2").duration == 900
    assert resolver.remove("card-2") is True
    assert resolver.prune([]) == []
