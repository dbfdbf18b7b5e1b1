"""
BlockStyle — tout l'état de style/effets d'un bloc visuel.

Possède : BreakpointCascade, InteractionStateCascade, BlockEffects, et la
liste ordonnée des ids enfants (référencés, non possédés).

Résolution pour le rendu :
    bag = block.resolve("mobile", "hover")
    = états(hover) ⊕ (base ⊕ tablet ⊕ mobile)
"""
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .cascade.breakpoints import Breakpoint, BreakpointCascade
from .cascade.states import InteractionState, InteractionStateCascade
from .config import is_strict
from .core.property_bag import PropertyBag
from .effects.block_effects import BlockEffects
from .effects.children import effective_for, remove_child_override, upsert_child_override
from .effects.definition import ChildOverride, EffectDefinition, EffectTrigger
from .errors import DanglingChildOverrideError

log = logging.getLogger(__name__)


class EditorSelection(BaseModel):
    """Onglets actifs dans l'inspecteur : breakpoint + état d'interaction."""
    breakpoint: Breakpoint = "desktop"
    state: InteractionState = "none"


class BlockStyle(BaseModel):
    id: str
    styles: BreakpointCascade = Field(default_factory=BreakpointCascade)
    states: InteractionStateCascade = Field(default_factory=InteractionStateCascade)
    effects: BlockEffects = Field(default_factory=BlockEffects)
    children: List[str] = Field(default_factory=list)

    # ── Styles ───────────────────────────────────────────────────────────────

    def resolve(self, breakpoint: Breakpoint = "desktop", state: InteractionState = "none") -> PropertyBag:
        """PropertyBag à peindre pour (breakpoint, état)."""
        return self.states.resolve(self.styles.resolve(breakpoint), state)

    def edit(self, key: str, value: Any, selection: Optional[EditorSelection] = None) -> None:
        """
        Édition brute (clé, valeur) depuis l'inspecteur.

        Un onglet d'état actif (≠ none) écrit dans le bag de cet état ;
        sinon l'écriture va dans la couche du breakpoint sélectionné.
        value=None retire l'override de la couche ciblée.
        """
        selection = selection or EditorSelection()
        if selection.state != "none":
            self.states.set_property(selection.state, key, value)
        else:
            self.styles.set_property(selection.breakpoint, key, value)

    # ── Enfants ──────────────────────────────────────────────────────────────

    def set_children(self, child_ids: List[str]) -> Dict[str, List[str]]:
        """Remplace la liste des enfants et purge les overrides devenus orphelins."""
        self.children = list(child_ids)
        return self.effects.prune_child_overrides(self.children)

    def upsert_child_override(
        self,
        trigger: EffectTrigger,
        child_id: str,
        strict: Optional[bool] = None,
        **fields: Any,
    ) -> Optional[ChildOverride]:
        """
        Écrit un override enfant si l'enfant appartient au bloc et que l'effet
        existe ; no-op (None) sinon, DanglingChildOverrideError en mode strict.
        """
        if child_id not in self.children:
            if is_strict(strict):
                raise DanglingChildOverrideError(child_id)
            log.debug("Override ignoré : %s n'est pas un enfant de %s", child_id, self.id)
            return None
        effect = self.effects.get(trigger)
        if effect is None:
            log.debug("Override ignoré : effet %s absent sur %s", trigger, self.id)
            return None
        return upsert_child_override(effect, child_id, strict=strict, **fields)

    def remove_child_override(self, trigger: EffectTrigger, child_id: str) -> bool:
        effect = self.effects.get(trigger)
        if effect is None:
            return False
        return remove_child_override(effect, child_id)

    def effective_child_effect(self, trigger: EffectTrigger, child_id: str) -> Optional[EffectDefinition]:
        """
        Effet effectif d'un enfant. Un override dont l'enfant n'est plus membre
        se résout comme s'il était absent.
        """
        effect = self.effects.get(trigger)
        if effect is None:
            return None
        if child_id not in self.children:
            return effect
        return effective_for(effect, child_id)

    def child_delays(self, trigger: EffectTrigger) -> Dict[str, float]:
        """Offsets de stagger des enfants pour un trigger (zéros si pas d'effet)."""
        effect = self.effects.get(trigger)
        if effect is None:
            return {cid: 0 for cid in self.children}
        return effect.stagger_delays(self.children)
