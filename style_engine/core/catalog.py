"""
Catalogues statiques du moteur d'effets.

  - EFFECT_PROPERTIES   propriétés animables (kind, défaut, unité CSS)
  - EASING_VALUES       nom d'easing → fonction de timing CSS
  - TRANSFORM_ORIGINS   ancre → valeur CSS transform-origin

Conventions de valeurs (identiques côté éditeur) :
  opacity, brightness, contrast, saturate, grayscale → échelle 0-100
  translate*, rotate*, skew*, blur, tailles         → chaîne numérique, unité implicite
"""
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel

PropertyKind = Literal["number", "percentage", "length", "angle", "color"]


class PropertySpec(BaseModel):
    """Déclaration d'une propriété animable."""
    key: str
    kind: PropertyKind
    default: Any
    unit: str = ""
    group: str = "transform"


def _spec(key: str, kind: PropertyKind, default: Any, unit: str = "", group: str = "transform") -> PropertySpec:
    return PropertySpec(key=key, kind=kind, default=default, unit=unit, group=group)


_SPECS: List[PropertySpec] = [
    # Opacité
    _spec("opacity",      "percentage", 100, group="opacity"),
    # Scale
    _spec("scale",        "number", 1),
    _spec("scaleX",       "number", 1),
    _spec("scaleY",       "number", 1),
    # Translate
    _spec("translateX",   "length", "0", "px"),
    _spec("translateY",   "length", "0", "px"),
    _spec("translateZ",   "length", "0", "px"),
    # Rotate / skew
    _spec("rotate",       "angle", "0", "deg"),
    _spec("rotateX",      "angle", "0", "deg"),
    _spec("rotateY",      "angle", "0", "deg"),
    _spec("skewX",        "angle", "0", "deg"),
    _spec("skewY",        "angle", "0", "deg"),
    # Filtres
    _spec("blur",         "length", "0", "px", group="filter"),
    _spec("brightness",   "percentage", 100, group="filter"),
    _spec("contrast",     "percentage", 100, group="filter"),
    _spec("saturate",     "percentage", 100, group="filter"),
    _spec("grayscale",    "percentage", 0, group="filter"),
    _spec("hueRotate",    "number", 0, "deg", group="filter"),
    _spec("backdropBlur", "length", "0", "px", group="filter"),
    # Taille
    _spec("width",        "length", "auto", "px", group="size"),
    _spec("height",       "length", "auto", "px", group="size"),
    # Couleurs
    _spec("backgroundColor", "color", "transparent", group="color"),
    _spec("color",           "color", "#000000", group="color"),
    _spec("borderColor",     "color", "#000000", group="color"),
    # Bordure
    _spec("borderWidth",  "length", "0", "px", group="border"),
    _spec("borderRadius", "length", "0", "px", group="border"),
    # Espacements
    _spec("paddingTop",    "length", "0", "px", group="spacing"),
    _spec("paddingRight",  "length", "0", "px", group="spacing"),
    _spec("paddingBottom", "length", "0", "px", group="spacing"),
    _spec("paddingLeft",   "length", "0", "px", group="spacing"),
    _spec("marginTop",     "length", "0", "px", group="spacing"),
    _spec("marginRight",   "length", "0", "px", group="spacing"),
    _spec("marginBottom",  "length", "0", "px", group="spacing"),
    _spec("marginLeft",    "length", "0", "px", group="spacing"),
    # Ombre
    _spec("shadowX",      "length", "0", "px", group="shadow"),
    _spec("shadowY",      "length", "0", "px", group="shadow"),
    _spec("shadowBlur",   "length", "0", "px", group="shadow"),
    _spec("shadowSpread", "length", "0", "px", group="shadow"),
    _spec("shadowColor",  "color", "rgba(0, 0, 0, 0.2)", group="shadow"),
]

EFFECT_PROPERTIES: Dict[str, PropertySpec] = {s.key: s for s in _SPECS}


def is_known_property(key: str) -> bool:
    return key in EFFECT_PROPERTIES


def get_property_spec(key: str) -> Optional[PropertySpec]:
    return EFFECT_PROPERTIES.get(key)


def get_property_default(key: str) -> Any:
    """Valeur par défaut déclarée, None si la propriété est inconnue."""
    spec = EFFECT_PROPERTIES.get(key)
    return spec.default if spec else None


# ── Easings ─────────────────────────────────────────────────────────────────

EASING_VALUES: Dict[str, str] = {
    # Standard
    "linear":            "linear",
    "ease":              "ease",
    "ease-in":           "ease-in",
    "ease-out":          "ease-out",
    "ease-in-out":       "ease-in-out",
    # Quad
    "ease-in-quad":      "cubic-bezier(0.55, 0.085, 0.68, 0.53)",
    "ease-out-quad":     "cubic-bezier(0.25, 0.46, 0.45, 0.94)",
    "ease-in-out-quad":  "cubic-bezier(0.455, 0.03, 0.515, 0.955)",
    # Cubic
    "ease-in-cubic":     "cubic-bezier(0.55, 0.055, 0.675, 0.19)",
    "ease-out-cubic":    "cubic-bezier(0.215, 0.61, 0.355, 1)",
    "ease-in-out-cubic": "cubic-bezier(0.645, 0.045, 0.355, 1)",
    # Quart
    "ease-in-quart":     "cubic-bezier(0.895, 0.03, 0.685, 0.22)",
    "ease-out-quart":    "cubic-bezier(0.165, 0.84, 0.44, 1)",
    "ease-in-out-quart": "cubic-bezier(0.77, 0, 0.175, 1)",
    # Expo
    "ease-in-expo":      "cubic-bezier(0.95, 0.05, 0.795, 0.035)",
    "ease-out-expo":     "cubic-bezier(0.19, 1, 0.22, 1)",
    "ease-in-out-expo":  "cubic-bezier(1, 0, 0, 1)",
    # Back (dépassement)
    "ease-in-back":      "cubic-bezier(0.6, -0.28, 0.735, 0.045)",
    "ease-out-back":     "cubic-bezier(0.175, 0.885, 0.32, 1.275)",
    "ease-in-out-back":  "cubic-bezier(0.68, -0.55, 0.265, 1.55)",
    # Approximations : un vrai elastic/bounce demande des keyframes intermédiaires
    "ease-out-elastic":  "cubic-bezier(0.175, 0.885, 0.32, 1.275)",
    "ease-out-bounce":   "cubic-bezier(0.34, 1.56, 0.64, 1)",
}


def get_easing_css(easing: str) -> str:
    return EASING_VALUES.get(easing, "ease")


# ── Transform origin ────────────────────────────────────────────────────────

TRANSFORM_ORIGINS: Dict[str, str] = {
    "center":       "center center",
    "top":          "center top",
    "top-right":    "right top",
    "right":        "right center",
    "bottom-right": "right bottom",
    "bottom":       "center bottom",
    "bottom-left":  "left bottom",
    "left":         "left center",
    "top-left":     "left top",
}


def get_transform_origin_css(origin: str) -> str:
    return TRANSFORM_ORIGINS.get(origin, "center center")
