"""Renderer CSS des effets."""
from .css import (
    effect_state_to_css,
    keyframes_css,
    effect_keyframes_css,
    transition_css,
    animation_css,
    camel_to_kebab,
)

__all__ = [
    "effect_state_to_css", "keyframes_css", "effect_keyframes_css",
    "transition_css", "animation_css", "camel_to_kebab",
]
