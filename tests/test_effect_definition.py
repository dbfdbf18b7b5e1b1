"""Tests EffectDefinition — presets, édition manuelle, cycle de vie."""
import pytest
from pydantic import ValidationError

from style_engine.effects import (
    BlockEffects, EffectDefinition, AppearParams, LoopParams, ScrollParams,
    EFFECT_PRESETS, preset_to_fields,
)


# ── Presets ───────────────────────────────────────────────────────────────────

def test_every_preset_is_symmetric():
    for preset_id in EFFECT_PRESETS:
        fields = preset_to_fields(preset_id)
        assert set(fields.keyframes.from_) == set(fields.keyframes.to), preset_id


def test_preset_to_fields_returns_fresh_copies():
    a = preset_to_fields("fade-in")
    a.keyframes.to["opacity"] = 42
    assert preset_to_fields("fade-in").keyframes.to == {"opacity": 100}


def test_preset_to_fields_rejects_custom_and_unknown():
    with pytest.raises(ValueError, match="custom"):
        preset_to_fields("custom")
    with pytest.raises(ValueError, match="Preset inconnu"):
        preset_to_fields("explode")


def test_apply_preset_overwrites_fields():
    e = EffectDefinition.default("appear")
    e.add_property("blur")
    e.update_timing(duration=2000, easing="linear", transform_origin="top-left")
    e.apply_preset("zoom-in")
    assert e.preset == "zoom-in"
    assert e.keyframes.from_ == {"scale": 0.8, "opacity": 0}
    assert e.keyframes.to == {"scale": 1, "opacity": 100}
    assert e.duration == 400
    assert e.easing == "ease-out-back"
    assert e.transform_origin == "center"


def test_apply_preset_keeps_delay_and_params():
    e = EffectDefinition.default("appear")
    e.delay = 250
    e.apply_preset("fade-up")
    assert e.delay == 250
    assert isinstance(e.trigger_params, AppearParams)


def test_apply_preset_twice_is_idempotent():
    e = EffectDefinition.default("appear")
    e.apply_preset("fade-in")
    once = e.model_dump()
    e.apply_preset("fade-in")
    assert e.model_dump() == once


def test_manual_edit_then_reapply_restores_preset():
    e = EffectDefinition.default("appear")
    e.apply_preset("fade-in")
    e.set_keyframe_value("to", "opacity", 60)
    assert e.preset == "custom"
    e.apply_preset("fade-in")
    assert e.preset == "fade-in"
    assert e.keyframes.to == {"opacity": 100}
    assert e.keyframes.from_ == {"opacity": 0}


def test_custom_preset_changes_nothing_else():
    e = EffectDefinition.default("hover")
    e.apply_preset("slide-up")
    before = e.model_dump(exclude={"preset"})
    e.apply_preset("custom")
    assert e.preset == "custom"
    assert e.model_dump(exclude={"preset"}) == before


def test_unknown_preset_leaves_effect_untouched():
    e = EffectDefinition.default("hover")
    e.apply_preset("fade-in")
    with pytest.raises(ValueError):
        e.apply_preset("explode")
    assert e.preset == "fade-in"
    assert e.keyframes.to == {"opacity": 100}


# ── Édition manuelle → custom ────────────────────────────────────────────────

@pytest.mark.parametrize("edit", [
    lambda e: e.update_timing(duration=999),
    lambda e: e.update_timing(delay=10),
    lambda e: e.update_timing(easing="linear"),
    lambda e: e.update_timing(transform_origin="bottom"),
    lambda e: e.set_keyframe_value("from", "opacity", 10),
    lambda e: e.add_property("blur"),
    lambda e: e.remove_property("opacity"),
])
def test_every_hand_edit_sets_custom(edit):
    e = EffectDefinition.default("appear")
    e.apply_preset("fade-in")
    edit(e)
    assert e.preset == "custom"


def test_noop_edits_keep_preset():
    e = EffectDefinition.default("appear")
    e.apply_preset("fade-in")
    e.update_timing()
    e.add_property("opacity")       # déjà présente
    e.remove_property("translateX")  # absente
    assert e.preset == "fade-in"


def test_same_value_edits_keep_preset():
    e = EffectDefinition.default("appear")
    e.apply_preset("fade-in")
    assert e.set_keyframe_value("to", "opacity", 100) is False
    e.update_timing(duration=e.duration, easing=e.easing)
    assert e.preset == "fade-in"


def test_direct_assignment_is_validated():
    e = EffectDefinition.default("appear")
    with pytest.raises(ValidationError):
        e.easing = "wiggle"
    with pytest.raises(ValidationError):
        e.duration = -5
    with pytest.raises(ValidationError):
        e.trigger_params = LoopParams()
    assert e.easing == "ease-out"


def test_update_timing_validates():
    e = EffectDefinition.default("hover")
    with pytest.raises(ValueError, match="Easing inconnu"):
        e.update_timing(easing="wiggle")
    with pytest.raises(ValueError):
        e.update_timing(duration=-5)
    assert e.preset == "custom"
    assert e.easing == "ease"


# ── Construction / params ────────────────────────────────────────────────────

def test_default_params_per_trigger():
    assert EffectDefinition.default("hover").trigger_params is None
    assert isinstance(EffectDefinition.default("scroll").trigger_params, ScrollParams)
    assert isinstance(EffectDefinition.default("loop").trigger_params, LoopParams)
    appear = EffectDefinition.default("appear").trigger_params
    assert appear.trigger == "in-view" and appear.once is True
    assert EffectDefinition.default("loop").duration == 1000


def test_params_must_match_trigger():
    with pytest.raises(ValidationError, match="incompatibles"):
        EffectDefinition(trigger="hover", trigger_params=LoopParams())


def test_params_discriminated_from_json():
    e = EffectDefinition.model_validate({
        "trigger": "scroll",
        "triggerParams": {"kind": "scroll", "trigger": "page-scroll",
                          "scrollRange": {"start": 10, "end": 80, "relativeTo": "page"}},
    })
    assert e.scroll_range.start == 10
    assert e.scroll_range.relative_to == "page"


def test_duplicate_child_overrides_rejected():
    with pytest.raises(ValidationError, match="dupliqué"):
        EffectDefinition(trigger="appear", child_overrides=[{"childId": "a"}, {"childId": "a"}])


def test_frame_at_clamps_progress():
    e = EffectDefinition.default("scroll")
    e.apply_preset("fade-in")
    assert e.frame_at(0.5) == {"opacity": 50.0}
    assert e.frame_at(-1) == {"opacity": 0.0}
    assert e.frame_at(2) == {"opacity": 100.0}


# ── BlockEffects ─────────────────────────────────────────────────────────────

def test_enable_materializes_default_and_disable_removes():
    effects = BlockEffects()
    assert effects.get("appear") is None
    appear = effects.enable("appear")
    assert appear.enabled is True
    assert appear.preset == "custom"
    assert effects.appear is appear
    effects.disable("appear")
    assert effects.appear is None


def test_enable_keeps_existing_definition():
    effects = BlockEffects()
    hover = effects.enable("hover")
    hover.apply_preset("scale-up")
    hover.enabled = False
    again = effects.enable("hover")
    assert again is hover
    assert again.enabled is True
    assert again.preset == "scale-up"


def test_reenable_after_reset_starts_from_default():
    effects = BlockEffects()
    effects.enable("loop").apply_preset("blur-in")
    effects.reset("loop")
    assert effects.enable("loop").preset == "custom"


def test_active_lists_enabled_effects():
    effects = BlockEffects()
    effects.enable("hover")
    effects.enable("loop").enabled = False
    assert list(effects.active()) == ["hover"]


def test_unknown_trigger():
    with pytest.raises(ValueError, match="Trigger inconnu"):
        BlockEffects().enable("click")
