"""
BlockEffects — les quatre slots d'effets d'un bloc (hover, scroll, appear, loop).
"""
import logging
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel

from .children import prune_child_overrides
from .definition import TRIGGERS, EffectDefinition, EffectTrigger

log = logging.getLogger(__name__)


def _check_trigger(trigger: str) -> str:
    if trigger not in TRIGGERS:
        raise ValueError(f"Trigger inconnu : {trigger!r}. Attendu : {list(TRIGGERS)}")
    return trigger


class BlockEffects(BaseModel):
    hover: Optional[EffectDefinition] = None
    scroll: Optional[EffectDefinition] = None
    appear: Optional[EffectDefinition] = None
    loop: Optional[EffectDefinition] = None

    def get(self, trigger: EffectTrigger) -> Optional[EffectDefinition]:
        return getattr(self, _check_trigger(trigger))

    def enable(self, trigger: EffectTrigger) -> EffectDefinition:
        """Active un trigger ; matérialise une définition par défaut si absente."""
        effect = self.get(trigger)
        if effect is None:
            effect = EffectDefinition.default(trigger)
            setattr(self, trigger, effect)
            log.debug("Effet %s créé", trigger)
        else:
            effect.enabled = True
        return effect

    def disable(self, trigger: EffectTrigger) -> None:
        """Reset : supprime la définition (retour à l'absence, pas à un objet vide)."""
        setattr(self, _check_trigger(trigger), None)
        log.debug("Effet %s supprimé", trigger)

    reset = disable

    def active(self) -> Dict[str, EffectDefinition]:
        """Effets présents et activés, par trigger."""
        effects = {t: getattr(self, t) for t in TRIGGERS}
        return {t: e for t, e in effects.items() if e is not None and e.enabled}

    def prune_child_overrides(self, child_ids: Iterable[str]) -> Dict[str, List[str]]:
        members = list(child_ids)
        pruned: Dict[str, List[str]] = {}
        for trigger in TRIGGERS:
            effect = getattr(self, trigger)
            if effect is None:
                continue
            removed = prune_child_overrides(effect, members)
            if removed:
                pruned[trigger] = removed
        return pruned
