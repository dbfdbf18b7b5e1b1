"""
InteractionStateCascade — overrides hover / pressed / focused.

S'applique par-dessus un PropertyBag déjà résolu pour un breakpoint.
Un bag d'état est créé paresseusement à la première écriture et supprimé
entièrement par reset_state (pas de bag vide résiduel).
"""
import logging
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel

from ..core.property_bag import PropertyBag, overlay, set_property

log = logging.getLogger(__name__)

InteractionState = Literal["none", "hover", "pressed", "focused"]

_STATES = ("hover", "pressed", "focused")


def _state_field(state: str) -> str:
    if state not in _STATES:
        raise ValueError(f"État d'interaction inconnu : {state!r}. Attendu : {list(_STATES)}")
    return state


class InteractionStateCascade(BaseModel):
    hover: Optional[PropertyBag] = None
    pressed: Optional[PropertyBag] = None
    focused: Optional[PropertyBag] = None

    def resolve(self, resolved: PropertyBag, state: InteractionState = "none") -> PropertyBag:
        if state == "none":
            return overlay(resolved)
        return overlay(resolved, getattr(self, _state_field(state)))

    def bag(self, state: InteractionState) -> Optional[PropertyBag]:
        return getattr(self, _state_field(state))

    def has_overrides_for_state(self, state: InteractionState) -> bool:
        if state == "none":
            return False
        return bool(self.bag(state))

    def set_property(self, state: InteractionState, key: str, value: Any) -> None:
        field = _state_field(state)
        bag = getattr(self, field)
        if bag is None:
            bag = {}
            setattr(self, field, bag)
        set_property(bag, key, value)

    def upsert_state(self, state: InteractionState, properties: Dict[str, Any]) -> None:
        for key, value in properties.items():
            self.set_property(state, key, value)

    def remove_property(self, state: InteractionState, key: str) -> None:
        bag = self.bag(state)
        if bag:
            bag.pop(key, None)

    def reset_state(self, state: InteractionState) -> None:
        setattr(self, _state_field(state), None)
        log.debug("Overrides d'état %s supprimés", state)
