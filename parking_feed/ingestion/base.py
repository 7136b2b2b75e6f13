"""Abstract source interface for feed retrieval."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseSource(ABC):
    """Abstract base class for feed sources."""

    name: str

    @abstractmethod
    def fetch(self) -> str:
        """Return the raw JSON body, or an empty string when nothing could be read."""
