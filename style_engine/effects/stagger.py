"""
StaggerSequencer — délais de départ des enfants frères.

  first   index * amount
  last    (n-1-index) * amount
  center  |index - milieu| * amount   (milieu = (n-1)//2, égalité → index le plus tôt)
  edges   min(index, n-1-index) * amount   (bords d'abord, convergence vers le centre)

Déterministe : mêmes ids + même config → mêmes délais.
"""
import math
from typing import Dict, List, Optional, Sequence

from .definition import StaggerConfig


def _zeros(child_ids: Sequence[str]) -> Dict[str, float]:
    return {cid: 0 for cid in child_ids}


def stagger_steps(count: int, origin: str) -> List[int]:
    """Nombre de pas de délai de chaque index, pour `count` enfants."""
    last = count - 1
    if origin == "first":
        return list(range(count))
    if origin == "last":
        return [last - i for i in range(count)]
    if origin == "center":
        middle = last // 2
        return [abs(i - middle) for i in range(count)]
    if origin == "edges":
        return [min(i, last - i) for i in range(count)]
    raise ValueError(f"Origine de stagger inconnue : {origin!r}")


def compute_delays(child_ids: Sequence[str], config: Optional[StaggerConfig]) -> Dict[str, float]:
    """Offset de délai (même unité que `amount`) par id d'enfant."""
    if config is None or not config.enabled or not config.amount:
        return _zeros(child_ids)
    steps = stagger_steps(len(child_ids), config.from_)
    return {cid: step * config.amount for cid, step in zip(child_ids, steps)}


def compute_grid_delays(child_ids: Sequence[str], config: Optional[StaggerConfig]) -> Dict[str, float]:
    """
    Variante grille : les enfants sont posés ligne par ligne sur `grid.columns`
    colonnes.
      row       ordre de lecture (ligne puis colonne)
      column    colonne puis ligne
      diagonal  ligne + colonne (vague depuis le coin haut-gauche)
    """
    if config is None or not config.enabled or not config.amount or config.grid is None:
        return _zeros(child_ids)

    columns = config.grid.columns
    rows = math.ceil(len(child_ids) / columns) if child_ids else 0
    delays: Dict[str, float] = {}
    for index, cid in enumerate(child_ids):
        row, col = divmod(index, columns)
        if config.grid.direction == "column":
            step = col * rows + row
        elif config.grid.direction == "diagonal":
            step = row + col
        else:
            step = index
        delays[cid] = step * config.amount
    return delays
