"""
PropertyBag — map creuse nom de propriété → valeur.

Une clé absente = héritage ; une clé présente = override concret.
Aucune sentinelle "null = hériter" : None n'est jamais stocké.

Valeurs acceptées : longueur avec unité ("12px"), pourcentage numérique,
couleur ("#fff", "rgb(...)"), mot-clé énuméré, ou sous-record structuré
(BorderValue, ShadowValue, GradientValue).
"""
import copy
from typing import Any, Dict, Iterable, List, Literal, Optional

from pydantic import BaseModel, Field

PropertyBag = Dict[str, Any]


# ── Sous-records structurés ─────────────────────────────────────────────────

class BorderValue(BaseModel):
    width: str = "0"
    style: Literal["solid", "dashed", "dotted", "double", "none"] = "solid"
    color: str = "currentColor"
    radius: str = "0"
    sides: str = "top,right,bottom,left"


class ShadowValue(BaseModel):
    enabled: bool = True
    x: str = "0"
    y: str = "4"
    blur: str = "8"
    spread: str = "0"
    color: str = "#000000"
    opacity: int = Field(default=20, ge=0, le=100)


class GradientStop(BaseModel):
    color: str
    position: float = Field(ge=0, le=100)
    opacity: int = Field(default=100, ge=0, le=100)


class GradientValue(BaseModel):
    type: Literal["linear", "radial"] = "linear"
    angle: int = 180
    stops: List[GradientStop] = Field(default_factory=list)
    opacity: int = Field(default=100, ge=0, le=100)


# ── Opérations ──────────────────────────────────────────────────────────────

def overlay(*layers: Optional[PropertyBag]) -> PropertyBag:
    """
    Superpose les couches de gauche à droite : la dernière gagne clé par clé.
    Les couches None sont traitées comme vides. Le résultat est une copie
    indépendante (modifier le résultat ne touche aucune couche).
    """
    merged: PropertyBag = {}
    for layer in layers:
        if not layer:
            continue
        for key, value in layer.items():
            merged[key] = copy.deepcopy(value)
    return merged


def set_property(bag: PropertyBag, key: str, value: Any) -> PropertyBag:
    """Écrit un override. value=None retire la clé (retour à l'héritage)."""
    if value is None:
        bag.pop(key, None)
    else:
        bag[key] = value
    return bag


def without(bag: Optional[PropertyBag], keys: Iterable[str]) -> PropertyBag:
    drop = set(keys)
    return {k: v for k, v in (bag or {}).items() if k not in drop}


def is_empty(bag: Optional[PropertyBag]) -> bool:
    return not bag


def changed_keys(bag: PropertyBag, reference: PropertyBag) -> List[str]:
    """Clés de `bag` absentes de `reference` ou de valeur différente."""
    return [k for k, v in bag.items() if k not in reference or reference[k] != v]
