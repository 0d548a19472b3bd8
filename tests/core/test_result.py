"""Operation Result — tests for Ok / Err and the error envelope.

Tests cover:
    - Ok and Err expose is_success / is_failure
    - Err constructors set the right kind and unwrap FieldPath members
    - Err requires at least one failure
    - to_response() renders code, category, message, and details
"""

import pytest

from gift_exchange.core.domain_types import ErrorKind, FieldPath
from gift_exchange.core.result import Err, Ok, ValidationFailure, failure


def test_ok_is_success():
    result = Ok(42)
    assert result.is_success
    assert not result.is_failure
    assert result.value == 42


def test_err_is_failure():
    result = Err.bad_request("room.Name", "Room name is required.")
    assert result.is_failure
    assert not result.is_success


@pytest.mark.parametrize("factory, kind", [
    (Err.not_found, ErrorKind.NOT_FOUND),
    (Err.bad_request, ErrorKind.BAD_REQUEST),
    (Err.forbidden, ErrorKind.FORBIDDEN),
    (Err.not_authorized, ErrorKind.NOT_AUTHORIZED),
])
def test_constructors_set_kind(factory, kind):
    assert factory("id", "msg").kind is kind


def test_field_path_members_are_unwrapped():
    result = Err.forbidden(FieldPath.ADMIN, "Admin cannot be removed from the room.")
    assert result.failures == (
        ValidationFailure("Admin", "Admin cannot be removed from the room."),
    )
    assert result.has_field(FieldPath.ADMIN)
    assert result.has_field("Admin")


def test_failure_helper_accepts_plain_strings():
    assert failure("userCode", "m") == ValidationFailure("userCode", "m")


def test_err_without_failures_is_rejected():
    with pytest.raises(ValueError):
        Err(ErrorKind.BAD_REQUEST, ())


def test_bad_request_from_keeps_every_failure():
    result = Err.bad_request_from([
        failure(FieldPath.ROOM_NAME, "a"), failure(FieldPath.ROOM_USERS, "b"),
    ])
    assert result.fields == ["room.Name", "room.Users"]
    assert result.message == "a; b"


def test_to_response_envelope():
    response = Err.not_found(FieldPath.USER_ID, "User is not found.").to_response()
    assert response == {
        "error": {
            "code": "NOT_FOUND",
            "message": "User is not found.",
            "category": "not_found",
            "details": [{"field": "user.Id", "message": "User is not found."}],
        }
    }
