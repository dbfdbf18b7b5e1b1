"""
Configuration du moteur de styles — lue une fois depuis l'environnement.

STYLE_ENGINE_STRICT              "1" → les no-op silencieux deviennent des erreurs
STYLE_ENGINE_DEFAULT_PERSPECTIVE perspective CSS des transforms 3D
STYLE_ENGINE_LOG_LEVEL           niveau appliqué par configure_logging()
"""
import logging
import os
from typing import Optional

STRICT_MODE         = os.getenv("STYLE_ENGINE_STRICT", "0") in ("1", "true", "yes")
DEFAULT_PERSPECTIVE = os.getenv("STYLE_ENGINE_DEFAULT_PERSPECTIVE", "1000px")
LOG_LEVEL           = os.getenv("STYLE_ENGINE_LOG_LEVEL", "WARNING").upper()

LOG_FORMAT = "%(asctime)s %(levelname)s — %(message)s"


def is_strict(strict: Optional[bool] = None) -> bool:
    """Résout le flag strict d'un appel : explicite, sinon la config globale."""
    return STRICT_MODE if strict is None else strict


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
