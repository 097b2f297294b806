"""Maps mutation outcomes onto HTTP errors."""

from fastapi import HTTPException, status

from dashboard.application.services import MutationOutcome, MutationResult
from dashboard.domain.exceptions import EntityNotFoundError


def ensure_applied(result: MutationResult, entity_type: str, entity_id: int | str | None) -> MutationResult:
    """Return ``result`` when applied; raise 404 for a missing target."""
    if result.outcome is MutationOutcome.NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError(entity_type, entity_id if entity_id is not None else "none")),
        )
    if result.outcome is MutationOutcome.REJECTED:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"{entity_type} change rejected")
    return result
