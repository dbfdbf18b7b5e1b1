"""Cascades de styles : breakpoints puis états d'interaction."""
from .breakpoints import BreakpointCascade, Breakpoint
from .states import InteractionStateCascade, InteractionState

__all__ = [
    "BreakpointCascade", "Breakpoint",
    "InteractionStateCascade", "InteractionState",
]
