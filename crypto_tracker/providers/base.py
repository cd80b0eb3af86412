"""Provider base class for price sources."""
from __future__ import annotations

from abc import ABC, abstractmethod


class BaseProvider(ABC):
    """Abstract base class for price providers."""

    NAME: str = "base"

    @abstractmethod
    async def fetch(self) -> str:
        """Issue one request and return the raw response body."""

    @abstractmethod
    async def health_check(self) -> bool:
        """Return True when the upstream service looks reachable/healthy."""
