"""Route Dependencies: authenticated caller and store handle for protected handlers.

Invariants:
    - require_token runs before the handler body; on rejection it raises the
      typed KanbanError and FastAPI never invokes the handler
    - Handlers declare require_token before get_store so header errors win
      over wiring errors
    - The store handle is the process-wide db_manager set by the lifespan

Design Decisions:
    - Raw header bytes read from the ASGI scope: Starlette's decoded view is
      latin-1 and would accept values that are not header text
"""

from fastapi import Request

from kanban_api.core.bearer_auth import Rejected
from kanban_api.core.errors import InternalServerError
from kanban_api.infrastructure import database
from kanban_api.infrastructure.kanban_store import KanbanStore
from kanban_api.models.token import Token
from kanban_api.services.authenticate import authenticate_request

_AUTHORIZATION = b"authorization"


def _raw_authorization(request: Request) -> bytes | None:
    for name, value in request.headers.raw:
        if name.lower() == _AUTHORIZATION:
            return value
    return None


def _current_store() -> KanbanStore | None:
    if database.db_manager is None:
        return None
    return KanbanStore(database.db_manager)


async def require_token(request: Request) -> Token:
    """FastAPI dependency: the caller's valid, unexpired bearer token."""
    result = await authenticate_request(
        _raw_authorization(request), _current_store(),
    )
    if isinstance(result, Rejected):
        raise result.error
    return result.token


def get_store() -> KanbanStore:
    """FastAPI dependency: store bound to the shared connection pool."""
    store = _current_store()
    if store is None:
        raise InternalServerError()
    return store
