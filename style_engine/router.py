"""
Router FastAPI — endpoints du moteur de styles/effets.

GET  /style-engine/presets                                → catalogue des presets + bundles
GET  /style-engine/properties                             → propriétés animables, easings, origins
POST /style-engine/resolve                                → bloc + breakpoint + état → PropertyBag
POST /style-engine/stagger                                → ids enfants + StaggerConfig → délais
POST /style-engine/effects/{trigger}/children/{child_id}  → bloc → effet effectif de l'enfant
"""
from typing import Dict, List

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .block import BlockStyle
from .cascade.breakpoints import Breakpoint
from .cascade.states import InteractionState
from .core.catalog import EASING_VALUES, EFFECT_PROPERTIES, TRANSFORM_ORIGINS
from .effects.definition import StaggerConfig
from .effects.presets import CUSTOM, PRESET_OPTIONS, preset_to_fields
from .effects.stagger import compute_delays, compute_grid_delays

router = APIRouter(prefix="/style-engine", tags=["style_engine"])


class ResolveRequest(BaseModel):
    block: BlockStyle
    breakpoint: Breakpoint = "desktop"
    state: InteractionState = "none"


class StaggerRequest(BaseModel):
    child_ids: List[str] = Field(default_factory=list)
    config: StaggerConfig = Field(default_factory=StaggerConfig)


@router.get("/presets", summary="Liste les presets d'effets et leurs valeurs")
def presets() -> JSONResponse:
    data = []
    for preset_id, label, group in PRESET_OPTIONS:
        fields = None if preset_id == CUSTOM else preset_to_fields(preset_id).model_dump(by_alias=True)
        data.append({"id": preset_id, "label": label, "group": group, "fields": fields})
    return JSONResponse({"presets": data})


@router.get("/properties", summary="Catalogue des propriétés animables")
def properties() -> JSONResponse:
    return JSONResponse({
        "properties": [spec.model_dump() for spec in EFFECT_PROPERTIES.values()],
        "easings": list(EASING_VALUES),
        "transform_origins": list(TRANSFORM_ORIGINS),
    })


@router.post("/resolve", summary="Résout le style effectif d'un bloc")
def resolve(req: ResolveRequest) -> dict:
    return {
        "block_id": req.block.id,
        "breakpoint": req.breakpoint,
        "state": req.state,
        "properties": req.block.resolve(req.breakpoint, req.state),
    }


@router.post("/stagger", summary="Calcule les délais de stagger des enfants")
def stagger(req: StaggerRequest) -> Dict[str, Dict[str, float]]:
    if req.config.grid is not None:
        return {"delays": compute_grid_delays(req.child_ids, req.config)}
    return {"delays": compute_delays(req.child_ids, req.config)}


@router.post("/effects/{trigger}/children/{child_id}", summary="Effet effectif d'un enfant")
def effective_child(trigger: str, child_id: str, block: BlockStyle) -> JSONResponse:
    try:
        effect = block.effective_child_effect(trigger, child_id)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if effect is None:
        raise HTTPException(status_code=404, detail=f"Effet {trigger!r} absent sur le bloc {block.id!r}")
    return JSONResponse(effect.model_dump(mode="json", by_alias=True))
