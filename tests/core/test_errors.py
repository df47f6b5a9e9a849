"""Error Hierarchy — kinds, statuses and the public envelope."""

import pytest

from groupchat.core.errors import (
    GENERIC_STORE_MESSAGE,
    HTTP_STATUS_BY_KIND,
    BadRequestError,
    ErrorKind,
    ForbiddenError,
    NotFoundError,
    StoreError,
)


@pytest.mark.parametrize("error,status", [
    (BadRequestError("x"), 400),
    (NotFoundError("x"), 404),
    (ForbiddenError("x"), 403),
    (StoreError("x", "query"), 500),
])
def test_http_status_follows_kind(error, status):
    assert error.http_status == status


def test_every_kind_has_a_status():
    assert set(HTTP_STATUS_BY_KIND) == set(ErrorKind)


def test_request_errors_expose_their_message():
    assert NotFoundError("Group not found").to_response() == {"error": "Group not found"}


def test_store_error_hides_message_unless_verbose():
    error = StoreError("Integrity constraint violated", "commit")
    error.__cause__ = RuntimeError("UNIQUE constraint failed: users.username")
    assert error.to_response() == {"error": GENERIC_STORE_MESSAGE}
    verbose = error.to_response(verbose=True)["error"]
    assert verbose.startswith("Database commit failed: Integrity constraint violated")
    assert "UNIQUE constraint failed" in verbose


def test_store_error_records_operation():
    assert StoreError("boom", "execute").operation == "execute"
