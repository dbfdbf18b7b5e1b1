"""
Interpolation des keyframes (effets pilotés par le scroll).

Numérique → interpolation linéaire ; longueurs/angles "40", "12px" → idem
en conservant l'unité ; couleurs et valeurs non numériques → bascule à 50 %.
Côté manquant → valeur par défaut du catalogue.
"""
import re
from typing import Any, Optional, Tuple

from ..core.catalog import get_property_default
from ..core.property_bag import PropertyBag

_NUMERIC = re.compile(r"^(-?\d+(?:\.\d+)?)([a-z%]*)$")


def _clamp(progress: float) -> float:
    return max(0.0, min(1.0, progress))


def _parse(value: Any) -> Optional[Tuple[float, str]]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value), ""
    if isinstance(value, str):
        m = _NUMERIC.match(value.strip())
        if m:
            return float(m.group(1)), m.group(2)
    return None


def _format(number: float) -> str:
    rounded = round(number, 4)
    return str(int(rounded)) if rounded == int(rounded) else str(rounded)


def _lerp_value(start: Any, end: Any, progress: float) -> Any:
    a, b = _parse(start), _parse(end)
    if a is None or b is None or (a[1] and b[1] and a[1] != b[1]):
        return start if progress < 0.5 else end
    number = a[0] + (b[0] - a[0]) * progress
    if isinstance(start, str) or isinstance(end, str):
        return _format(number) + (a[1] or b[1])
    return round(number, 4)


def interpolate(start: PropertyBag, end: PropertyBag, progress: float) -> PropertyBag:
    """Bag intermédiaire entre `start` (0) et `end` (1)."""
    progress = _clamp(progress)
    result: PropertyBag = {}
    for key in list(start) + [k for k in end if k not in start]:
        a = start[key] if key in start else get_property_default(key)
        b = end[key] if key in end else get_property_default(key)
        if a is None:
            a = b
        if b is None:
            b = a
        result[key] = _lerp_value(a, b, progress)
    return result


def ranged_progress(raw: float, start: float = 0, end: float = 100) -> float:
    """
    Ramène une progression brute (0-1) dans la plage [start, end] (en %).
    Avant la plage → 0, après → 1.
    """
    if end <= start:
        return 1.0 if raw * 100 >= start else 0.0
    return _clamp((raw * 100 - start) / (end - start))
