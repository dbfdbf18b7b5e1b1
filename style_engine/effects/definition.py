"""
EffectDefinition — configuration complète d'un effet pour un trigger.

Triggers : hover | scroll | appear | loop (un slot par bloc, voir BlockEffects).
Absence de définition = effet désactivé ; enable() matérialise une
définition par défaut, disable() la supprime (pas de remise à blanc).

Toute édition manuelle des keyframes ou du timing repasse preset="custom".
"""
import logging
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

from ..core.catalog import EASING_VALUES, TRANSFORM_ORIGINS
from ..core.property_bag import PropertyBag
from .keyframes import EffectKeyframePair, KeyframeSide, PartialKeyframes
from .presets import CUSTOM, PresetId, preset_to_fields

log = logging.getLogger(__name__)

EffectTrigger = Literal["hover", "scroll", "appear", "loop"]
TRIGGERS = ("hover", "scroll", "appear", "loop")


def _check_easing(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in EASING_VALUES:
        raise ValueError(f"Easing inconnu : {value!r}")
    return value


def _check_origin(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in TRANSFORM_ORIGINS:
        raise ValueError(f"Transform origin inconnu : {value!r}")
    return value


Easing = Annotated[str, AfterValidator(_check_easing)]
TransformOrigin = Annotated[str, AfterValidator(_check_origin)]


# ── Paramètres spécifiques au trigger ───────────────────────────────────────

class ScrollRange(BaseModel):
    """Plage de scroll en % de progression (0-100)."""
    model_config = ConfigDict(populate_by_name=True)

    start: int = Field(default=0, ge=0, le=100)
    end: int = Field(default=100, ge=0, le=100)
    relative_to: Literal["viewport", "page"] = Field(default="viewport", alias="relativeTo")


class ScrollParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["scroll"] = "scroll"
    trigger: Literal["while-scrolling", "page-scroll"] = "while-scrolling"
    scroll_range: ScrollRange = Field(default_factory=ScrollRange, alias="scrollRange")


class AppearParams(BaseModel):
    kind: Literal["appear"] = "appear"
    trigger: Literal["in-view", "load"] = "in-view"
    threshold: float = Field(default=0.1, ge=0, le=1)
    once: bool = True


class LoopParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["loop"] = "loop"
    start_trigger: Literal["load", "in-view", "hover", "click"] = Field(default="load", alias="startTrigger")
    stop_trigger: Literal["never", "hover-end", "out-of-view", "click"] = Field(default="never", alias="stopTrigger")
    reverse: bool = False
    loop: bool = True


TriggerParams = Annotated[
    Union[ScrollParams, AppearParams, LoopParams],
    Field(discriminator="kind"),
]

_DEFAULT_PARAMS = {
    "hover":  lambda: None,
    "scroll": ScrollParams,
    "appear": AppearParams,
    "loop":   LoopParams,
}

# Timing par défaut à la première activation
_DEFAULT_TIMING: Dict[str, dict] = {
    "hover":  {"duration": 300,  "easing": "ease"},
    "scroll": {"duration": 500,  "easing": "ease-out"},
    "appear": {"duration": 600,  "easing": "ease-out"},
    "loop":   {"duration": 1000, "easing": "ease-in-out"},
}


# ── Stagger ─────────────────────────────────────────────────────────────────

class GridStagger(BaseModel):
    columns: int = Field(default=3, ge=1)
    direction: Literal["row", "column", "diagonal"] = "row"


class StaggerConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    enabled: bool = False
    amount: float = Field(default=100, ge=0)
    from_: Literal["first", "last", "center", "edges"] = Field(default="first", alias="from")
    grid: Optional[GridStagger] = None


# ── Override enfant ─────────────────────────────────────────────────────────

class ChildOverride(BaseModel):
    """
    EffectDefinition partielle pour un enfant donné.
    Champ None = hérité du parent. `child_id` référence le bloc enfant
    sans le posséder.
    """
    model_config = ConfigDict(populate_by_name=True)

    child_id: str = Field(..., alias="childId")
    preset: Optional[PresetId] = None
    keyframes: Optional[PartialKeyframes] = None
    duration: Optional[int] = Field(default=None, ge=0)
    delay: Optional[int] = Field(default=None, ge=0)
    easing: Optional[Easing] = None
    scroll_range: Optional[ScrollRange] = Field(default=None, alias="scrollRange")

    def is_inheriting(self) -> bool:
        """Vrai si aucun champ n'est surchargé."""
        return all(
            getattr(self, name) is None
            for name in ("preset", "keyframes", "duration", "delay", "easing", "scroll_range")
        )


# ── EffectDefinition ────────────────────────────────────────────────────────

class EffectDefinition(BaseModel):
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    trigger: EffectTrigger
    enabled: bool = True
    preset: PresetId = CUSTOM
    keyframes: EffectKeyframePair = Field(default_factory=EffectKeyframePair)
    duration: int = Field(default=500, ge=0)
    delay: int = Field(default=0, ge=0)
    easing: Easing = "ease-out"
    transform_origin: TransformOrigin = Field(default="center", alias="transformOrigin")
    perspective: Optional[str] = None
    will_change: bool = Field(default=False, alias="willChange")
    trigger_params: Optional[TriggerParams] = Field(default=None, alias="triggerParams")
    stagger: Optional[StaggerConfig] = None
    child_overrides: List[ChildOverride] = Field(default_factory=list, alias="childOverrides")

    @model_validator(mode="after")
    def _params_match_trigger(self):
        if self.trigger_params is not None and self.trigger_params.kind != self.trigger:
            raise ValueError(
                f"triggerParams {self.trigger_params.kind!r} incompatibles avec le trigger {self.trigger!r}"
            )
        ids = [c.child_id for c in self.child_overrides]
        if len(ids) != len(set(ids)):
            raise ValueError("Un seul override par enfant (childId dupliqué)")
        return self

    @classmethod
    def default(cls, trigger: EffectTrigger) -> "EffectDefinition":
        """Définition matérialisée à la première activation d'un trigger."""
        if trigger not in _DEFAULT_PARAMS:
            raise ValueError(f"Trigger inconnu : {trigger!r}. Attendu : {list(TRIGGERS)}")
        return cls(
            trigger=trigger,
            trigger_params=_DEFAULT_PARAMS[trigger](),
            **_DEFAULT_TIMING[trigger],
        )

    # ── Presets ──────────────────────────────────────────────────────────────

    def apply_preset(self, preset_id: str) -> None:
        """
        Écrase keyframes, duration, easing et transform_origin depuis le preset.
        "custom" ne touche aucune valeur.
        """
        if preset_id == CUSTOM:
            self.preset = CUSTOM
            return
        fields = preset_to_fields(preset_id)
        # Bundle calculé en entier avant la première affectation
        self.keyframes = fields.keyframes
        self.duration = fields.duration
        self.easing = fields.easing
        self.transform_origin = fields.transform_origin
        self.preset = preset_id
        log.debug("Preset %s appliqué (%s)", preset_id, self.trigger)

    def _mark_custom(self) -> None:
        if self.preset != CUSTOM:
            log.debug("Édition manuelle : preset %s → custom (%s)", self.preset, self.trigger)
            self.preset = CUSTOM

    # ── Édition des keyframes ────────────────────────────────────────────────

    def add_property(self, key: str, strict: Optional[bool] = None) -> bool:
        added = self.keyframes.add_property(key, strict=strict)
        if added:
            self._mark_custom()
        return added

    def remove_property(self, key: str) -> bool:
        removed = self.keyframes.remove_property(key)
        if removed:
            self._mark_custom()
        return removed

    def set_keyframe_value(self, side: KeyframeSide, key: str, value: Any,
                           strict: Optional[bool] = None) -> bool:
        written = self.keyframes.set_value(side, key, value, strict=strict)
        if written:
            self._mark_custom()
        return written

    # ── Édition du timing ────────────────────────────────────────────────────

    def update_timing(
        self,
        duration: Optional[int] = None,
        delay: Optional[int] = None,
        easing: Optional[str] = None,
        transform_origin: Optional[str] = None,
    ) -> None:
        """
        Met à jour les champs fournis ; toute modification effective passe le
        preset en custom. Seul chemin d'édition du timing qui suit le preset :
        une affectation directe est validée mais ne touche pas au preset.
        """
        if duration is not None and duration < 0:
            raise ValueError("duration doit être >= 0")
        if delay is not None and delay < 0:
            raise ValueError("delay doit être >= 0")
        _check_easing(easing)
        _check_origin(transform_origin)

        changes = {
            "duration": duration, "delay": delay,
            "easing": easing, "transform_origin": transform_origin,
        }
        changes = {k: v for k, v in changes.items() if v is not None and getattr(self, k) != v}
        if not changes:
            return
        for name, value in changes.items():
            setattr(self, name, value)
        self._mark_custom()

    # ── Lecture ──────────────────────────────────────────────────────────────

    @property
    def scroll_range(self) -> Optional[ScrollRange]:
        if isinstance(self.trigger_params, ScrollParams):
            return self.trigger_params.scroll_range
        return None

    def frame_at(self, progress: float) -> PropertyBag:
        """État interpolé à une progression donnée (bornée à [0, 1])."""
        from .interpolate import interpolate
        return interpolate(self.keyframes.from_, self.keyframes.to, progress)

    # ── Overrides enfants (voir children.py) ─────────────────────────────────

    def child_override(self, child_id: str) -> Optional[ChildOverride]:
        for record in self.child_overrides:
            if record.child_id == child_id:
                return record
        return None

    def effective_for(self, child_id: str) -> "EffectDefinition":
        from .children import effective_for
        return effective_for(self, child_id)

    def stagger_delays(self, child_ids: List[str]) -> Dict[str, float]:
        from .stagger import compute_delays, compute_grid_delays
        if self.stagger is not None and self.stagger.grid is not None:
            return compute_grid_delays(child_ids, self.stagger)
        return compute_delays(child_ids, self.stagger)
