"""Owner key check for the quest endpoints.

The tracker is single-user, so there is one shared key. When
``settings.api_key`` is unset every request is treated as the owner.
"""

import logging
import secrets

from fastapi import Header

from questkernel.config import settings
from questkernel.kernel.errors import AuthenticationError

logger = logging.getLogger(__name__)


def presented_key(x_api_key: str | None, authorization: str | None) -> str | None:
    """Key from X-API-Key, else from ``Authorization: Bearer <key>``."""
    if x_api_key:
        return x_api_key.strip()
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token.strip():
            return token.strip()
    return None


async def verify_api_key(
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    authorization: str | None = Header(default=None),
) -> str:
    expected = settings.api_key
    if expected is None:
        return ""

    key = presented_key(x_api_key, authorization)
    if key is None:
        raise AuthenticationError("Missing owner key")
    if not secrets.compare_digest(key.encode(), expected.encode()):
        logger.warning("Rejected request with a wrong owner key")
        raise AuthenticationError("Invalid owner key")
    return key
