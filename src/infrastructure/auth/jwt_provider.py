"""JWT authentication provider implementation.

Members sign in through Supabase Auth on the front end; this service only
verifies the resulting access token. Supabase signs with ES256 (public keys
published as JWKS); HS256 tokens signed with the local secret are accepted
for development and tests.

Relevant Supabase claims:
    sub            member UUID (``profiles.user_id``)
    email          member email
    role           "authenticated" for signed-in members
    user_metadata  may carry "name" / "full_name" from the OAuth provider
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Optional
from uuid import UUID

import httpx
from jose import JWTError, jwt
from jose.backends import ECKey

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = logging.getLogger(__name__)

# kid -> JWK, fetched lazily and refreshed when an unknown kid shows up
_jwks_cache: dict[str, Any] | None = None


async def _get_jwks_keys(refresh: bool = False) -> dict[str, Any]:
    """Fetch and cache the Supabase JWKS keyed by ``kid``."""
    global _jwks_cache
    if _jwks_cache is not None and not refresh:
        return _jwks_cache

    jwks_url = settings.supabase_jwks_url
    if not jwks_url:
        return {}

    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(jwks_url, timeout=10.0)
            response.raise_for_status()
            keys = response.json().get("keys", [])
    except (httpx.HTTPError, ValueError):
        logger.exception("Failed to fetch JWKS from %s", jwks_url)
        return {}

    _jwks_cache = {key["kid"]: key for key in keys if key.get("kid")}
    logger.info("Fetched %d JWKS keys from Supabase", len(_jwks_cache))
    return _jwks_cache


def _user_from_claims(payload: dict[str, Any]) -> Optional[TokenUser]:
    user_id = payload.get("sub")
    email = payload.get("email")
    if not user_id or not email:
        return None

    metadata = payload.get("user_metadata") or {}
    display_name = (
        metadata.get("name")
        or metadata.get("full_name")
        or metadata.get("display_name")
        or payload.get("name")
    )

    try:
        return TokenUser(
            id=UUID(user_id),
            email=email,
            display_name=display_name,
            role=payload.get("role"),
        )
    except ValueError:
        return None


class JWTAuthProvider:
    """Validates Supabase (ES256) and local (HS256) access tokens."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT and extract the member it identifies.

        Args:
            token: The bearer token to validate

        Returns:
            TokenUser if valid, None if invalid, expired or missing claims
        """
        try:
            header = jwt.get_unverified_header(token)
            if header.get("alg") == "ES256":
                payload = await self._decode_es256(token, header)
            else:
                payload = jwt.decode(
                    token,
                    self._secret_key,
                    algorithms=[self._algorithm],
                    options={"verify_aud": False},
                )
        except JWTError:
            return None

        if payload is None:
            return None
        return _user_from_claims(payload)

    async def _decode_es256(self, token: str, header: dict) -> Optional[dict]:
        """Verify an ES256 token against the JWKS public key named by ``kid``."""
        kid = header.get("kid")
        if not kid:
            return None

        key_data = (await _get_jwks_keys()).get(kid)
        if not key_data:
            # Supabase rotated its signing key
            key_data = (await _get_jwks_keys(refresh=True)).get(kid)
        if not key_data:
            logger.warning("JWKS key not found for kid=%s", kid)
            return None

        return jwt.decode(
            token,
            ECKey(key_data, algorithm="ES256"),
            algorithms=["ES256"],
            options={"verify_aud": False},
        )

    def create_token(self, user: TokenUser) -> str:
        """
        Create an HS256 token for a member (development and tests only).

        Args:
            user: The member to create a token for

        Returns:
            The generated JWT string
        """
        payload: dict[str, Any] = {
            "sub": str(user.id),
            "email": user.email,
            "aud": "authenticated",
            "role": user.role or "authenticated",
            "exp": datetime.utcnow() + timedelta(minutes=self._expire_minutes),
            "user_metadata": {"name": user.display_name},
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
