"""
Presets d'effets — bundles figés keyframes + timing.

Un preset s'applique en un seul remplacement (preset_to_fields) : keyframes,
duration, easing et transform_origin sont écrasés ensemble. Le preset
"custom" n'a pas de bundle ; il indique seulement que l'effet est édité à la main.
"""
from typing import Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field

from .keyframes import EffectKeyframePair

PresetId = Literal[
    "fade-in", "fade-out",
    "slide-up", "slide-down", "slide-left", "slide-right",
    "zoom-in", "zoom-out",
    "flip-x", "flip-y",
    "rotate-in", "rotate-out",
    "bounce-in", "bounce-out",
    "blur-in", "blur-out",
    "scale-up", "scale-down",
    "fade-up", "fade-down", "fade-left", "fade-right",
    "fade-zoom-in", "fade-zoom-out",
    "custom",
]

CUSTOM = "custom"

# Chaque preset = from/to + timing ; transform_origin absent → "center"
EFFECT_PRESETS: Dict[str, dict] = {
    # Fade
    "fade-in":  {"from": {"opacity": 0},   "to": {"opacity": 100}, "duration": 400, "easing": "ease-out"},
    "fade-out": {"from": {"opacity": 100}, "to": {"opacity": 0},   "duration": 400, "easing": "ease-out"},
    # Slide
    "slide-up":    {"from": {"translateY": "40"},  "to": {"translateY": "0"}, "duration": 500, "easing": "ease-out-cubic"},
    "slide-down":  {"from": {"translateY": "-40"}, "to": {"translateY": "0"}, "duration": 500, "easing": "ease-out-cubic"},
    "slide-left":  {"from": {"translateX": "40"},  "to": {"translateX": "0"}, "duration": 500, "easing": "ease-out-cubic"},
    "slide-right": {"from": {"translateX": "-40"}, "to": {"translateX": "0"}, "duration": 500, "easing": "ease-out-cubic"},
    # Zoom
    "zoom-in": {
        "from": {"scale": 0.8, "opacity": 0}, "to": {"scale": 1, "opacity": 100},
        "duration": 400, "easing": "ease-out-back", "transform_origin": "center",
    },
    "zoom-out": {
        "from": {"scale": 1.2, "opacity": 0}, "to": {"scale": 1, "opacity": 100},
        "duration": 400, "easing": "ease-out", "transform_origin": "center",
    },
    # Flip (3D)
    "flip-x": {
        "from": {"rotateX": "90", "opacity": 0}, "to": {"rotateX": "0", "opacity": 100},
        "duration": 600, "easing": "ease-out-cubic", "transform_origin": "center",
    },
    "flip-y": {
        "from": {"rotateY": "90", "opacity": 0}, "to": {"rotateY": "0", "opacity": 100},
        "duration": 600, "easing": "ease-out-cubic", "transform_origin": "center",
    },
    # Rotate
    "rotate-in": {
        "from": {"rotate": "-180", "opacity": 0, "scale": 0.5}, "to": {"rotate": "0", "opacity": 100, "scale": 1},
        "duration": 500, "easing": "ease-out-back", "transform_origin": "center",
    },
    "rotate-out": {
        "from": {"rotate": "0", "opacity": 100, "scale": 1}, "to": {"rotate": "180", "opacity": 0, "scale": 0.5},
        "duration": 500, "easing": "ease-in", "transform_origin": "center",
    },
    # Bounce
    "bounce-in": {
        "from": {"scale": 0.3, "opacity": 0}, "to": {"scale": 1, "opacity": 100},
        "duration": 600, "easing": "ease-out-bounce", "transform_origin": "center",
    },
    "bounce-out": {
        "from": {"scale": 1, "opacity": 100}, "to": {"scale": 0.3, "opacity": 0},
        "duration": 600, "easing": "ease-in", "transform_origin": "center",
    },
    # Blur
    "blur-in":  {"from": {"blur": "20", "opacity": 0},  "to": {"blur": "0", "opacity": 100}, "duration": 500, "easing": "ease-out"},
    "blur-out": {"from": {"blur": "0", "opacity": 100}, "to": {"blur": "20", "opacity": 0},  "duration": 500, "easing": "ease-out"},
    # Scale
    "scale-up":   {"from": {"scale": 0.95}, "to": {"scale": 1}, "duration": 300, "easing": "ease-out"},
    "scale-down": {"from": {"scale": 1.05}, "to": {"scale": 1}, "duration": 300, "easing": "ease-out"},
    # Combos
    "fade-up":    {"from": {"opacity": 0, "translateY": "30"},  "to": {"opacity": 100, "translateY": "0"}, "duration": 500, "easing": "ease-out-cubic"},
    "fade-down":  {"from": {"opacity": 0, "translateY": "-30"}, "to": {"opacity": 100, "translateY": "0"}, "duration": 500, "easing": "ease-out-cubic"},
    "fade-left":  {"from": {"opacity": 0, "translateX": "30"},  "to": {"opacity": 100, "translateX": "0"}, "duration": 500, "easing": "ease-out-cubic"},
    "fade-right": {"from": {"opacity": 0, "translateX": "-30"}, "to": {"opacity": 100, "translateX": "0"}, "duration": 500, "easing": "ease-out-cubic"},
    "fade-zoom-in":  {"from": {"opacity": 0, "scale": 0.9}, "to": {"opacity": 100, "scale": 1}, "duration": 400, "easing": "ease-out"},
    "fade-zoom-out": {"from": {"opacity": 0, "scale": 1.1}, "to": {"opacity": 100, "scale": 1}, "duration": 400, "easing": "ease-out"},
}

# (id, label, groupe) — ordre d'affichage dans le sélecteur de l'éditeur
PRESET_OPTIONS: List[tuple] = [
    ("fade-in", "Fade In", "Fade"),
    ("fade-out", "Fade Out", "Fade"),
    ("fade-up", "Fade Up", "Fade + Move"),
    ("fade-down", "Fade Down", "Fade + Move"),
    ("fade-left", "Fade Left", "Fade + Move"),
    ("fade-right", "Fade Right", "Fade + Move"),
    ("zoom-in", "Zoom In", "Zoom"),
    ("zoom-out", "Zoom Out", "Zoom"),
    ("fade-zoom-in", "Fade Zoom In", "Zoom"),
    ("fade-zoom-out", "Fade Zoom Out", "Zoom"),
    ("slide-up", "Slide Up", "Slide"),
    ("slide-down", "Slide Down", "Slide"),
    ("slide-left", "Slide Left", "Slide"),
    ("slide-right", "Slide Right", "Slide"),
    ("flip-x", "Flip X", "3D"),
    ("flip-y", "Flip Y", "3D"),
    ("rotate-in", "Rotate In", "3D"),
    ("rotate-out", "Rotate Out", "3D"),
    ("bounce-in", "Bounce In", "Special"),
    ("bounce-out", "Bounce Out", "Special"),
    ("blur-in", "Blur In", "Special"),
    ("blur-out", "Blur Out", "Special"),
    ("scale-up", "Scale Up", "Special"),
    ("scale-down", "Scale Down", "Special"),
    ("custom", "Custom", "Custom"),
]


class PresetFields(BaseModel):
    """Champs écrasés par l'application d'un preset."""
    model_config = ConfigDict(populate_by_name=True)

    keyframes: EffectKeyframePair
    duration: int = Field(ge=0)
    easing: str
    transform_origin: str = Field(default="center", alias="transformOrigin")


def is_preset(preset_id: str) -> bool:
    return preset_id in EFFECT_PRESETS


def preset_to_fields(preset_id: str) -> PresetFields:
    """
    Bundle complet d'un preset, construit à neuf à chaque appel
    (aucune référence partagée avec le catalogue).
    """
    if preset_id == CUSTOM:
        raise ValueError("Le preset 'custom' n'a pas de valeurs à appliquer")
    cfg = EFFECT_PRESETS.get(preset_id)
    if cfg is None:
        raise ValueError(f"Preset inconnu : {preset_id!r}. Registry : {list(EFFECT_PRESETS)}")
    return PresetFields(
        keyframes=EffectKeyframePair(from_=dict(cfg["from"]), to=dict(cfg["to"])),
        duration=cfg["duration"],
        easing=cfg["easing"],
        transform_origin=cfg.get("transform_origin", "center"),
    )
