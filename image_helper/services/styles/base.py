from __future__ import annotations

from abc import ABC, abstractmethod


class DerivativeProfile(ABC):
    """Abstract named image derivative (an "image style")."""

    name: str = "abstract"

    @abstractmethod
    def build_url(self, file_uri: str) -> str:
        """Return the URL of this derivative of *file_uri*.

        Raises
        ------
        ValueError
            If *file_uri* cannot be turned into a derivative path.
        """
