from __future__ import annotations

from typing import Protocol


class NonceIssuer(Protocol):
    """
    Issues and checks one-time form tokens for the admin panel.
    """

    def create(self, action: str) -> str:
        ...

    def verify(self, token: str, action: str) -> bool:
        ...
