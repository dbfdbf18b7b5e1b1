"""
Générateur CSS des effets — PropertyBag de keyframe → déclarations CSS.

Pipeline :
  effect_state_to_css(bag)          →  {"opacity": "0", "transform": "translateY(40px)", ...}
  keyframes_css(name, keyframes)    →  @keyframes name { 0% {...} 100% {...} }
  effect_keyframes_css(effect, name) →  idem avec la perspective de l'effet
  transition_css / animation_css    →  valeurs de timing d'un EffectDefinition
"""
from typing import Dict, List, Optional

from ..config import DEFAULT_PERSPECTIVE
from ..core.catalog import get_easing_css, get_transform_origin_css
from ..core.property_bag import PropertyBag
from ..effects.definition import EffectDefinition, LoopParams
from ..effects.keyframes import EffectKeyframePair

_UNITS = ("px", "%", "em", "rem", "vh", "vw")

_SPACING = (
    "paddingTop", "paddingRight", "paddingBottom", "paddingLeft",
    "marginTop", "marginRight", "marginBottom", "marginLeft",
)


def _with_unit(value, unit: str = "px") -> str:
    """"40" → "40px" ; "50%", "auto" et autres valeurs non numériques inchangées."""
    text = str(value)
    if text.endswith(_UNITS):
        return text
    try:
        float(text)
    except ValueError:
        return text
    return f"{text}{unit}"


def _set(value) -> bool:
    """Vrai pour une valeur de transform/filter non neutre."""
    return value is not None and str(value) not in ("", "0")


def _ratio(value) -> str:
    return f"{float(value) / 100:g}"


def camel_to_kebab(name: str) -> str:
    out = []
    for i, ch in enumerate(name):
        if ch.isupper() and i and name[i - 1].islower():
            out.append("-")
        out.append(ch.lower())
    return "".join(out)


def effect_state_to_css(state: Optional[PropertyBag], perspective: Optional[str] = None) -> Dict[str, str]:
    """
    Déclarations CSS (noms kebab-case) d'un état de keyframe.
    Les transforms et filtres sont composés dans l'ordre du catalogue.
    """
    if not state:
        return {}

    css: Dict[str, str] = {}
    transforms: List[str] = []
    filters: List[str] = []

    if state.get("opacity") is not None:
        css["opacity"] = _ratio(state["opacity"])

    # Scale (1 = neutre)
    for key in ("scale", "scaleX", "scaleY"):
        if state.get(key) is not None and float(state[key]) != 1:
            transforms.append(f"{key}({state[key]})")

    # Translate
    for key in ("translateX", "translateY", "translateZ"):
        if _set(state.get(key)):
            transforms.append(f"{key}({_with_unit(state[key])})")

    # Rotate / skew (degrés)
    for key in ("rotate", "rotateX", "rotateY", "skewX", "skewY"):
        if _set(state.get(key)):
            transforms.append(f"{key}({state[key]}deg)")

    if transforms:
        is_3d = any(_set(state.get(k)) for k in ("rotateX", "rotateY", "translateZ"))
        if perspective or is_3d:
            css["transform"] = f"perspective({perspective or DEFAULT_PERSPECTIVE}) " + " ".join(transforms)
        else:
            css["transform"] = " ".join(transforms)

    # Filtres
    if _set(state.get("blur")):
        filters.append(f"blur({_with_unit(state['blur'])})")
    for key, neutral in (("brightness", 100), ("contrast", 100), ("saturate", 100), ("grayscale", 0)):
        if state.get(key) is not None and float(state[key]) != neutral:
            filters.append(f"{key}({_ratio(state[key])})")
    if state.get("hueRotate") is not None and float(state["hueRotate"]) != 0:
        filters.append(f"hue-rotate({state['hueRotate']}deg)")
    if filters:
        css["filter"] = " ".join(filters)

    if _set(state.get("backdropBlur")):
        css["backdrop-filter"] = f"blur({_with_unit(state['backdropBlur'])})"

    # Taille, bordure, espacements
    for key in ("width", "height", "borderWidth", "borderRadius") + _SPACING:
        if state.get(key) not in (None, ""):
            css[camel_to_kebab(key)] = _with_unit(state[key])

    # Couleurs
    for key in ("backgroundColor", "color", "borderColor"):
        if state.get(key):
            css[camel_to_kebab(key)] = state[key]

    # Ombre
    if state.get("shadowColor"):
        parts = [_with_unit(state.get(k) or "0") for k in ("shadowX", "shadowY", "shadowBlur", "shadowSpread")]
        css["box-shadow"] = " ".join(parts + [state["shadowColor"]])

    return css


def declarations(css: Dict[str, str]) -> str:
    return "; ".join(f"{k}: {v}" for k, v in css.items())


def keyframes_css(name: str, keyframes: EffectKeyframePair, perspective: Optional[str] = None) -> str:
    """Bloc @keyframes 0% (from) → 100% (to)."""
    start = declarations(effect_state_to_css(keyframes.from_, perspective))
    end = declarations(effect_state_to_css(keyframes.to, perspective))
    return f"@keyframes {name} {{\n  0% {{ {start} }}\n  100% {{ {end} }}\n}}"


def effect_keyframes_css(effect: EffectDefinition, name: str) -> str:
    """@keyframes d'un effet, avec sa perspective propre (défaut config sinon)."""
    return keyframes_css(name, effect.keyframes, effect.perspective)


def transition_css(effect: EffectDefinition) -> Dict[str, str]:
    """Timing d'un effet hover (transition entre from et to)."""
    return {
        "transition": f"all {effect.duration}ms {get_easing_css(effect.easing)} {effect.delay}ms",
        "transform-origin": get_transform_origin_css(effect.transform_origin),
    }


def animation_css(effect: EffectDefinition, name: str, delay_offset: float = 0) -> Dict[str, str]:
    """
    Propriété `animation` d'un effet appear/loop ; `delay_offset` = offset de
    stagger de l'enfant, ajouté au delay de l'effet.
    """
    delay = effect.delay + delay_offset
    parts = [name, f"{effect.duration}ms", get_easing_css(effect.easing), f"{delay:g}ms"]
    params = effect.trigger_params
    if isinstance(params, LoopParams):
        parts.append("infinite" if params.loop else "1")
        if params.reverse:
            parts.append("alternate")
    parts.append("both")
    css = {
        "animation": " ".join(parts),
        "transform-origin": get_transform_origin_css(effect.transform_origin),
    }
    if effect.will_change:
        css["will-change"] = "transform, opacity, filter"
    return css
