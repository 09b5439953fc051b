from .types import Frontier
from .scoring import FrontierScorer, HazardConfig
from .frontiers import FrontierSearch
from .orchestrator import ExplorationOrchestrator

__all__ = [
    "Frontier",
    "FrontierScorer",
    "HazardConfig",
    "FrontierSearch",
    "ExplorationOrchestrator",
]
