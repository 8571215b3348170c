"""Tests for the domain exception to HTTP status mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from userhub.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from userhub.domain.user import (
    EmailAlreadyExistsError,
    PersistenceError,
    UserNotFoundError,
    UserValidationError,
    Violation,
)
from userhub.presentation.api.exception_handlers import (
    _get_status_for_exception,
    setup_exception_handlers,
)


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (UserNotFoundError(1), 404),
        (EmailAlreadyExistsError("a@b.de"), 409),
        (UserValidationError([Violation("name", "must not be blank")]), 400),
        (PersistenceError(), 500),
        (EntityNotFoundError("gone"), 404),
        (ConflictError("taken"), 409),
        (ValidationError("bad"), 400),
        (DomainException("boom"), 500),
    ],
)
def test_status_for_exception(exc, expected):
    assert _get_status_for_exception(exc) == expected


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/invalid")
    async def invalid():
        raise UserValidationError(
            [
                Violation("password", "size must be at least 3"),
                Violation("name", "must not be blank"),
            ]
        )

    @app.get("/persistence")
    async def persistence():
        raise PersistenceError()

    @app.get("/crash")
    async def crash():
        raise RuntimeError("unexpected")

    return TestClient(app, raise_server_exceptions=False)


def test_validation_response_lists_violations(client):
    response = client.get("/invalid")

    assert response.status_code == 400
    assert response.json() == {
        "detail": "Invalid user: name, password",
        "code": "VALIDATION_ERROR",
        "violations": [
            {"field": "name", "message": "must not be blank"},
            {"field": "password", "message": "size must be at least 3"},
        ],
    }


def test_persistence_error_is_500(client):
    response = client.get("/persistence")

    assert response.status_code == 500
    assert response.json()["code"] == ErrorCode.PERSISTENCE_ERROR.value


def test_unhandled_exception_is_internal_error(client):
    response = client.get("/crash")

    assert response.status_code == 500
    assert response.json() == {
        "detail": "An internal error occurred",
        "code": "INTERNAL_ERROR",
    }
