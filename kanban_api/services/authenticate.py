"""Request Authentication: bearer header checks followed by one async token lookup.

Invariants:
    - Synchronous header checks run first and return without touching the store
    - A missing store is a wiring defect (500), reported after the header checks
    - Unknown, expired, and failed lookups are indistinguishable to the caller (401)
    - Exactly one store call per authenticated request; nothing is cached
    - The credential value is never logged
"""

import logging

from kanban_api.core.bearer_auth import (
    AuthResult, Authenticated, Rejected, extract_bearer_credential,
)
from kanban_api.core.domain_types import TokenId
from kanban_api.core.errors import InternalServerError, UnauthorizedError
from kanban_api.core.repository_protocols import TokenRepository

logger = logging.getLogger(__name__)


async def authenticate_request(
    authorization: bytes | None, store: TokenRepository | None,
) -> AuthResult:
    """Authenticate a caller from the raw Authorization header value."""
    credential = extract_bearer_credential(authorization)
    if isinstance(credential, Rejected):
        return credential

    if store is None:
        logger.error("Token store unavailable: database not initialized")
        return Rejected(InternalServerError())

    try:
        token = await store.validate_token(TokenId(credential))
    except Exception as e:
        logger.warning(f"Bearer token rejected: {type(e).__name__}")
        return Rejected(UnauthorizedError())
    return Authenticated(token)
