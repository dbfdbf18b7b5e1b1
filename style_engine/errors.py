"""
Taxonomie d'erreurs du moteur.

Toutes non fatales : en mode normal le moteur fait un no-op (loggé en DEBUG),
en mode strict il lève l'exception correspondante.
"""


class StyleEngineError(ValueError):
    """Erreur de base du moteur de styles/effets."""


class UnknownPropertyError(StyleEngineError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Propriété inconnue : {key!r}")


class MissingOverrideTargetError(StyleEngineError):
    def __init__(self, side: str, key: str):
        self.side = side
        self.key = key
        super().__init__(f"Propriété {key!r} absente du keyframe {side!r} (addProperty requis)")


class DanglingChildOverrideError(StyleEngineError):
    def __init__(self, child_id: str):
        self.child_id = child_id
        super().__init__(f"Enfant {child_id!r} absent de la liste des enfants du bloc")
