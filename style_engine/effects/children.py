"""
Résolution des overrides enfants.

effective_for(parent, child_id) calcule à la demande la vue effective d'un
enfant ; rien n'est stocké dénormalisé, une édition ultérieure du parent
continue donc de s'appliquer aux enfants non surchargés.

Fusion des keyframes propriété par propriété : un enfant peut surcharger
`from.translateX` tout en héritant `opacity` du parent.
"""
import logging
from typing import Any, Iterable, List, Optional

from ..config import is_strict
from ..core.catalog import get_property_default, is_known_property
from ..core.property_bag import PropertyBag, overlay
from ..errors import UnknownPropertyError
from .definition import ChildOverride, EffectDefinition, ScrollParams
from .keyframes import EffectKeyframePair, PartialKeyframes
from .presets import CUSTOM, preset_to_fields

log = logging.getLogger(__name__)


def _fill_missing(side: PropertyBag, other: PropertyBag) -> PropertyBag:
    """Complète `side` avec les clés présentes seulement dans `other` (défaut catalogue)."""
    for key, value in other.items():
        if key not in side:
            default = get_property_default(key)
            side[key] = value if default is None else default
    return side


def _known_only(bag: Optional[PropertyBag], strict: Optional[bool] = None) -> Optional[PropertyBag]:
    """Retire les propriétés hors catalogue (UnknownPropertyError en mode strict)."""
    if not bag:
        return bag
    for key in bag:
        if not is_known_property(key):
            if is_strict(strict):
                raise UnknownPropertyError(key)
            log.debug("Override enfant : propriété inconnue %r ignorée", key)
    return {k: v for k, v in bag.items() if is_known_property(k)}


def effective_for(parent: EffectDefinition, child_id: str) -> EffectDefinition:
    """
    Effet effectif d'un enfant.

    Sans override (ou override entièrement hérité) : retourne `parent` lui-même.
    Sinon : nouvelle EffectDefinition = parent ⊕ champs définis de l'override.
    Un `preset` enfant (hors custom) remplace le bundle du parent avant que
    les keyframes / timing propres à l'enfant ne s'appliquent.
    """
    record = parent.child_override(child_id)
    if record is None or record.is_inheriting():
        return parent

    from_bag, to_bag = parent.keyframes.from_, parent.keyframes.to
    duration, easing, origin = parent.duration, parent.easing, parent.transform_origin
    preset = parent.preset

    if record.preset is not None:
        preset = record.preset
        if record.preset != CUSTOM:
            fields = preset_to_fields(record.preset)
            from_bag, to_bag = fields.keyframes.from_, fields.keyframes.to
            duration, easing, origin = fields.duration, fields.easing, fields.transform_origin

    from_bag, to_bag = overlay(from_bag), overlay(to_bag)
    if record.keyframes is not None:
        from_bag = overlay(from_bag, _known_only(record.keyframes.from_, strict=False))
        to_bag = overlay(to_bag, _known_only(record.keyframes.to, strict=False))
        _fill_missing(from_bag, to_bag)
        _fill_missing(to_bag, from_bag)

    hand_edited = any(v is not None for v in (record.keyframes, record.duration, record.easing))
    if record.preset is None and hand_edited:
        preset = CUSTOM

    params = parent.trigger_params.model_copy(deep=True) if parent.trigger_params is not None else None
    if record.scroll_range is not None and isinstance(params, ScrollParams):
        params.scroll_range = record.scroll_range.model_copy()

    return parent.model_copy(
        deep=True,
        update={
            "preset": preset,
            "keyframes": EffectKeyframePair(from_=from_bag, to=to_bag),
            "duration": record.duration if record.duration is not None else duration,
            "delay": record.delay if record.delay is not None else parent.delay,
            "easing": record.easing if record.easing is not None else easing,
            "transform_origin": origin,
            "trigger_params": params,
            "child_overrides": [],
        },
    )


def upsert_child_override(
    parent: EffectDefinition,
    child_id: str,
    strict: Optional[bool] = None,
    **fields: Any,
) -> ChildOverride:
    """
    Crée (premier appel, tout hérité) ou met à jour l'override d'un enfant.

    Seuls les champs passés sont touchés ; passer None rend le champ au parent.
    Les keyframes partiels sont fusionnés propriété par propriété avec
    ceux déjà surchargés.
    Les propriétés hors catalogue sont ignorées (UnknownPropertyError en
    mode strict).
    """
    patch = ChildOverride.model_validate({"child_id": child_id, **fields})
    if patch.keyframes is not None:
        patch.keyframes = PartialKeyframes(
            from_=_known_only(patch.keyframes.from_, strict),
            to=_known_only(patch.keyframes.to, strict),
        )
    record = parent.child_override(child_id)
    if record is None:
        record = ChildOverride(child_id=child_id)
        parent.child_overrides.append(record)
        log.debug("Override enfant créé : %s (%s)", child_id, parent.trigger)

    for name in patch.model_fields_set - {"child_id"}:
        value = getattr(patch, name)
        if name == "keyframes" and value is not None and record.keyframes is not None:
            record.keyframes = record.keyframes.merged(value)
        else:
            setattr(record, name, value)
    return record


def remove_child_override(parent: EffectDefinition, child_id: str) -> bool:
    """Supprime l'override ; l'enfant revient à l'héritage complet."""
    before = len(parent.child_overrides)
    parent.child_overrides = [c for c in parent.child_overrides if c.child_id != child_id]
    return len(parent.child_overrides) != before


def prune_child_overrides(parent: EffectDefinition, child_ids: Iterable[str]) -> List[str]:
    """Supprime les overrides dont l'enfant n'appartient plus au bloc. Retourne les ids retirés."""
    members = set(child_ids)
    dangling = [c.child_id for c in parent.child_overrides if c.child_id not in members]
    if dangling:
        parent.child_overrides = [c for c in parent.child_overrides if c.child_id in members]
        log.info("Overrides enfants orphelins supprimés (%s) : %s", parent.trigger, ", ".join(dangling))
    return dangling


class ChildOverrideResolver:
    """
    Façade liée à une EffectDefinition parente, pour l'éditeur.

    Usage:
        >>> resolver = ChildOverrideResolver(effect)
        >>> resolver.upsert("card-2", duration=900)
        >>> resolver.effective_for("card-2").duration
        900
    """

    def __init__(self, parent: EffectDefinition):
        self.parent = parent

    def effective_for(self, child_id: str) -> EffectDefinition:
        return effective_for(self.parent, child_id)

    def get(self, child_id: str) -> Optional[ChildOverride]:
        return self.parent.child_override(child_id)

    def upsert(self, child_id: str, strict: Optional[bool] = None, **fields: Any) -> ChildOverride:
        return upsert_child_override(self.parent, child_id, strict=strict, **fields)

    def remove(self, child_id: str) -> bool:
        return remove_child_override(self.parent, child_id)

    def prune(self, child_ids: Iterable[str]) -> List[str]:
        return prune_child_overrides(self.parent, child_ids)
