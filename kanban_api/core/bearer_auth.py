"""Bearer Authorization: pure header checks and the tagged authentication result.

Invariants:
    - Checks run in a fixed order and stop at the first failure:
      presence, text encoding, scheme present, scheme == "Bearer", credential present
    - Scheme comparison is case-sensitive ("bearer" is unsupported)
    - No IO here; the store lookup happens in services/authenticate.py

Design Decisions:
    - Tagged result (Authenticated | Rejected) over exceptions in the core:
      the shell decides how a rejection becomes an HTTP response
    - Header is taken as raw bytes so non-ASCII values can be told apart from text
"""

from dataclasses import dataclass
from typing import Union

from kanban_api.core.errors import BadRequestError, KanbanError
from kanban_api.core.repository_protocols import TokenLike

AUTHORIZATION_HEADER = "Authorization"
BEARER_SCHEME = "Bearer"

# Tab plus visible ASCII, the byte range an HTTP header value may hold as text.
_HEADER_TEXT_BYTES = frozenset({0x09, *range(0x20, 0x7F)})


@dataclass(frozen=True)
class Authenticated:
    """Caller presented a current token."""
    token: TokenLike


@dataclass(frozen=True)
class Rejected:
    """Caller was refused; error carries status and message."""
    error: KanbanError


AuthResult = Union[Authenticated, Rejected]


def decode_header_value(raw: bytes) -> str | None:
    """Decode an HTTP header value, or None when it is not valid text."""
    if any(byte not in _HEADER_TEXT_BYTES for byte in raw):
        return None
    return raw.decode("ascii")


def extract_bearer_credential(raw: bytes | None) -> str | Rejected:
    """Return the bearer credential from a raw Authorization value, or the rejection."""
    if raw is None:
        return Rejected(BadRequestError("missing Authorization header"))

    value = decode_header_value(raw)
    if value is None:
        return Rejected(BadRequestError("malformed Authorization header"))

    parts = value.split()
    if not parts:
        return Rejected(BadRequestError("missing Authorization type"))

    if parts[0] != BEARER_SCHEME:
        return Rejected(BadRequestError("unsupported Authorization type"))

    if len(parts) < 2:
        return Rejected(BadRequestError("missing Bearer token"))

    return parts[1]
