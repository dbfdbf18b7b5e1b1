"""
BreakpointCascade — base (desktop) + overrides tablet / mobile.

Sens d'héritage retenu : desktop → tablet → mobile.
  desktop = base
  tablet  = base ⊕ tablet
  mobile  = base ⊕ tablet ⊕ mobile
Chaque breakpoint plus étroit hérite de tout ce qui n'est pas surchargé
à un breakpoint plus large.
"""
import logging
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field

from ..core.property_bag import PropertyBag, overlay, set_property

log = logging.getLogger(__name__)

Breakpoint = Literal["desktop", "tablet", "mobile"]

# Couches traversées (de la plus large à la plus étroite) par breakpoint
_CHAIN: Dict[str, Tuple[str, ...]] = {
    "desktop": ("base",),
    "tablet":  ("base", "tablet"),
    "mobile":  ("base", "tablet", "mobile"),
}

_LAYER_OF: Dict[str, str] = {"desktop": "base", "tablet": "tablet", "mobile": "mobile"}


def _check_breakpoint(breakpoint: str) -> None:
    if breakpoint not in _CHAIN:
        raise ValueError(f"Breakpoint inconnu : {breakpoint!r}. Attendu : {list(_CHAIN)}")


class BreakpointCascade(BaseModel):
    """Styles d'un bloc : base + overrides responsive optionnels."""
    base: PropertyBag = Field(default_factory=dict)
    tablet: Optional[PropertyBag] = None
    mobile: Optional[PropertyBag] = None

    # ── Lecture ──────────────────────────────────────────────────────────────

    def layers(self, breakpoint: Breakpoint) -> List[Optional[PropertyBag]]:
        _check_breakpoint(breakpoint)
        return [getattr(self, name) for name in _CHAIN[breakpoint]]

    def resolve(self, breakpoint: Breakpoint = "desktop") -> PropertyBag:
        """PropertyBag effectif pour un breakpoint (copie, jamais une couche)."""
        return overlay(*self.layers(breakpoint))

    def layer(self, breakpoint: Breakpoint) -> Optional[PropertyBag]:
        """Couche propre au breakpoint (None si jamais éditée)."""
        _check_breakpoint(breakpoint)
        return getattr(self, _LAYER_OF[breakpoint])

    def has_override(self, breakpoint: Breakpoint, key: str) -> bool:
        """Vrai si `key` est surchargée dans la couche propre d'un breakpoint non desktop."""
        if breakpoint == "desktop":
            _check_breakpoint(breakpoint)
            return False
        own = self.layer(breakpoint)
        return bool(own) and key in own

    def inherited_value(self, breakpoint: Breakpoint, key: str) -> Any:
        """Valeur que le breakpoint hériterait des couches plus larges (None si aucune)."""
        _check_breakpoint(breakpoint)
        wider = [getattr(self, name) for name in _CHAIN[breakpoint][:-1]]
        return overlay(*wider).get(key)

    # ── Édition (toujours dans la couche du breakpoint sélectionné) ─────────

    def set_property(self, breakpoint: Breakpoint, key: str, value: Any) -> None:
        _check_breakpoint(breakpoint)
        name = _LAYER_OF[breakpoint]
        bag = getattr(self, name)
        if bag is None:
            bag = {}
            setattr(self, name, bag)
        set_property(bag, key, value)

    def remove_property(self, breakpoint: Breakpoint, key: str) -> None:
        bag = self.layer(breakpoint)
        if bag:
            bag.pop(key, None)

    def reset_breakpoint(self, breakpoint: Breakpoint) -> None:
        """Supprime la couche tablet/mobile entière. La base ne se réinitialise pas."""
        _check_breakpoint(breakpoint)
        if breakpoint == "desktop":
            raise ValueError("La couche desktop (base) ne peut pas être réinitialisée")
        setattr(self, _LAYER_OF[breakpoint], None)
        log.debug("Overrides %s supprimés", breakpoint)
