"""
EffectKeyframePair — états de départ (`from`) et d'arrivée (`to`) d'un effet.

Invariant : keys(from) == keys(to) après chaque mutation. Ajout et retrait
de propriété touchent les deux côtés dans la même opération.
"""
import logging
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..config import is_strict
from ..core.catalog import get_property_default, is_known_property
from ..core.property_bag import PropertyBag, overlay
from ..errors import MissingOverrideTargetError, UnknownPropertyError

log = logging.getLogger(__name__)

KeyframeSide = Literal["from", "to"]


class EffectKeyframePair(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: PropertyBag = Field(default_factory=dict, alias="from")
    to: PropertyBag = Field(default_factory=dict)

    @model_validator(mode="after")
    def _same_keys(self):
        if set(self.from_) != set(self.to):
            raise ValueError(
                f"Keyframes asymétriques : from={sorted(self.from_)} to={sorted(self.to)}"
            )
        return self

    def keys(self) -> List[str]:
        return list(self.from_)

    def side(self, side: KeyframeSide) -> PropertyBag:
        if side == "from":
            return self.from_
        if side == "to":
            return self.to
        raise ValueError(f"Côté de keyframe inconnu : {side!r}")

    def add_property(self, key: str, strict: Optional[bool] = None) -> bool:
        """
        Ajoute `key` des deux côtés avec sa valeur par défaut du catalogue.

        Returns:
            True si la propriété a été ajoutée, False sinon (déjà présente,
            ou inconnue en mode non strict).
        """
        if not is_known_property(key):
            if is_strict(strict):
                raise UnknownPropertyError(key)
            log.debug("addProperty ignoré : propriété inconnue %r", key)
            return False
        if key in self.from_:
            return False
        default = get_property_default(key)
        self.from_, self.to = {**self.from_, key: default}, {**self.to, key: default}
        return True

    def remove_property(self, key: str) -> bool:
        if key not in self.from_:
            return False
        self.from_, self.to = (
            {k: v for k, v in self.from_.items() if k != key},
            {k: v for k, v in self.to.items() if k != key},
        )
        return True

    def set_value(self, side: KeyframeSide, key: str, value: Any, strict: Optional[bool] = None) -> bool:
        """
        Écrit la valeur d'un côté. En mode strict la propriété doit avoir été
        ajoutée au préalable ; sinon elle est ajoutée à la volée.
        Retourne False si la valeur est inchangée.
        """
        bag = self.side(side)
        if value is None:
            raise ValueError("None n'est pas une valeur de keyframe (utiliser remove_property)")
        if key not in bag:
            if is_strict(strict):
                if not is_known_property(key):
                    raise UnknownPropertyError(key)
                raise MissingOverrideTargetError(side, key)
            log.debug("setValue %s.%s : propriété absente, ajout implicite", side, key)
            if not self.add_property(key, strict=False):
                return False
            bag = self.side(side)
        elif bag[key] == value:
            return False
        bag[key] = value
        return True


class PartialKeyframes(BaseModel):
    """Keyframes partiels d'un override enfant : chaque côté est optionnel."""
    model_config = ConfigDict(populate_by_name=True)

    from_: Optional[PropertyBag] = Field(default=None, alias="from")
    to: Optional[PropertyBag] = None

    def merged(self, other: "PartialKeyframes") -> "PartialKeyframes":
        """Fusion propriété par propriété, `other` gagne."""
        return PartialKeyframes(
            from_=overlay(self.from_, other.from_) if (self.from_ or other.from_) else None,
            to=overlay(self.to, other.to) if (self.to or other.to) else None,
        )
