"""Effets : keyframes, presets, définitions, overrides enfants, stagger."""
from .keyframes import EffectKeyframePair, PartialKeyframes, KeyframeSide
from .presets import EFFECT_PRESETS, PRESET_OPTIONS, PresetId, PresetFields, preset_to_fields, is_preset
from .definition import (
    EffectDefinition, EffectTrigger, TRIGGERS,
    ScrollRange, ScrollParams, AppearParams, LoopParams,
    StaggerConfig, GridStagger, ChildOverride,
)
from .children import (
    ChildOverrideResolver,
    effective_for,
    upsert_child_override,
    remove_child_override,
    prune_child_overrides,
)
from .stagger import compute_delays, compute_grid_delays
from .interpolate import interpolate, ranged_progress
from .block_effects import BlockEffects

__all__ = [
    "EffectKeyframePair", "PartialKeyframes", "KeyframeSide",
    "EFFECT_PRESETS", "PRESET_OPTIONS", "PresetId", "PresetFields", "preset_to_fields", "is_preset",
    "EffectDefinition", "EffectTrigger", "TRIGGERS",
    "ScrollRange", "ScrollParams", "AppearParams", "LoopParams",
    "StaggerConfig", "GridStagger", "ChildOverride",
    "ChildOverrideResolver", "effective_for", "upsert_child_override",
    "remove_child_override", "prune_child_overrides",
    "compute_delays", "compute_grid_delays",
    "interpolate", "ranged_progress",
    "BlockEffects",
]
