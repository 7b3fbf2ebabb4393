"""Memory Village Core Engine"""
__version__ = "0.1.0"

from src.core.population import AgentId, Population, RosterEntry
from src.core.engine import PlayerState, VillageEngine

__all__ = [
    "AgentId",
    "Population",
    "RosterEntry",
    "PlayerState",
    "VillageEngine",
]
