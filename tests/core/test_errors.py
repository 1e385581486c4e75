"""Error Hierarchy: status codes, categories and the response envelope."""

from kanban_api.core.errors import (
    BadRequestError,
    DatabaseError,
    ErrorCategory,
    ErrorContext,
    InternalServerError,
    UnauthorizedError,
)


def test_status_codes():
    assert BadRequestError("x").http_status == 400
    assert UnauthorizedError().http_status == 401
    assert InternalServerError().http_status == 500
    assert DatabaseError("x", "query").http_status == 500


def test_default_messages():
    assert UnauthorizedError().message == "invalid Bearer token"
    assert InternalServerError().message == "internal error"


def test_database_error_names_operation():
    err = DatabaseError("Integrity constraint violated", "commit")
    assert err.message == "Database commit failed: Integrity constraint violated"
    assert err.category is ErrorCategory.DATABASE
    assert err.operation == "commit"


def test_to_response_envelope():
    err = BadRequestError("missing Bearer token", ErrorContext(path="/api/boards"))
    body = err.to_response()["error"]
    assert body["code"] == "BAD_REQUEST"
    assert body["message"] == "missing Bearer token"
    assert body["category"] == "validation"
    assert body["severity"] == "warning"
    assert body["context"] == {"path": "/api/boards"}
    assert body["timestamp"]
