"""
Block Style Engine — résolution des overrides de style et des effets d'animation
d'un éditeur visuel de blocs.

Usage:
    >>> from style_engine import BlockStyle, EditorSelection
    >>> block = BlockStyle(id="hero")
    >>> block.edit("color", "#fff")
    >>> block.edit("color", "#000", EditorSelection(breakpoint="mobile"))
    >>> block.resolve("mobile")
    {'color': '#000'}

Usage (effets):
    >>> appear = block.effects.enable("appear")
    >>> appear.apply_preset("fade-up")
    >>> block.set_children(["card-1", "card-2", "card-3"])
    >>> appear.stagger = StaggerConfig(enabled=True, amount=100)
    >>> block.child_delays("appear")
    {'card-1': 0.0, 'card-2': 100.0, 'card-3': 200.0}
"""
from .config import configure_logging
from .errors import (
    StyleEngineError,
    UnknownPropertyError,
    MissingOverrideTargetError,
    DanglingChildOverrideError,
)
from .core import PropertyBag, overlay, EFFECT_PROPERTIES
from .cascade import BreakpointCascade, Breakpoint, InteractionStateCascade, InteractionState
from .effects import (
    EffectKeyframePair, PartialKeyframes,
    EFFECT_PRESETS, preset_to_fields,
    EffectDefinition, EffectTrigger,
    ScrollRange, ScrollParams, AppearParams, LoopParams,
    StaggerConfig, GridStagger, ChildOverride,
    ChildOverrideResolver, effective_for,
    compute_delays, compute_grid_delays,
    interpolate,
    BlockEffects,
)
from .block import BlockStyle, EditorSelection

__version__ = "0.1.0"

__all__ = [
    "configure_logging",
    "StyleEngineError", "UnknownPropertyError", "MissingOverrideTargetError", "DanglingChildOverrideError",
    "PropertyBag", "overlay", "EFFECT_PROPERTIES",
    "BreakpointCascade", "Breakpoint", "InteractionStateCascade", "InteractionState",
    "EffectKeyframePair", "PartialKeyframes",
    "EFFECT_PRESETS", "preset_to_fields",
    "EffectDefinition", "EffectTrigger",
    "ScrollRange", "ScrollParams", "AppearParams", "LoopParams",
    "StaggerConfig", "GridStagger", "ChildOverride",
    "ChildOverrideResolver", "effective_for",
    "compute_delays", "compute_grid_delays",
    "interpolate",
    "BlockEffects",
    "BlockStyle", "EditorSelection",
]
