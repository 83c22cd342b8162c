"""Authentication provider protocol."""

from dataclasses import dataclass
from typing import Optional, Protocol
from uuid import UUID


@dataclass
class TokenUser:
    """The signed-in member as described by their access token."""

    id: UUID
    email: str
    display_name: Optional[str] = None
    role: Optional[str] = None


class IAuthProvider(Protocol):
    """Protocol for authentication providers."""

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """Return the token's member, or None if the token is not acceptable."""
        ...

    def create_token(self, user: TokenUser) -> str:
        """Issue a token for ``user`` (development and tests only)."""
        ...
