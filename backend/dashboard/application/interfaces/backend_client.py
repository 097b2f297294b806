"""Abstract interface (port) for the hosted backend the dashboard is wired to."""

from abc import ABC, abstractmethod
from typing import Any


class BackendClient(ABC):
    """Port for the hosted data/auth backend — implemented in the infrastructure layer.

    The in-memory entity store does not call it yet; it is built at startup
    so that missing configuration fails fast.
    """

    @property
    @abstractmethod
    def base_url(self) -> str:
        """Root URL of the backend project."""
        ...

    @abstractmethod
    async def fetch_rows(
        self,
        table: str,
        *,
        select: str = "*",
        filters: dict[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        """Read rows from a backend table."""
        ...

    @abstractmethod
    async def aclose(self) -> None:
        """Release pooled connections."""
        ...
