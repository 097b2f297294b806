from .entity_store import EntityStore
from .id_sequence import IdSequence
from .mutations import MutationOutcome, MutationResult
from .view_selector import ViewSelector
from .dashboard_controller import DashboardController

__all__ = [
    "EntityStore",
    "IdSequence",
    "MutationOutcome",
    "MutationResult",
    "ViewSelector",
    "DashboardController",
]
