"""Domain Types — verifies identity wrappers and enum values."""

from gift_exchange.core.domain_types import (
    AuthCode, ErrorKind, FieldPath, MIN_DRAWABLE_USERS, RoomId, RoomState, UserId,
)


def test_identity_types_wrap_primitives():
    assert UserId(5) == 5
    assert RoomId(9) == 9
    assert AuthCode("abc") == "abc"


def test_room_state_has_two_states():
    assert set(RoomState) == {RoomState.OPEN, RoomState.CLOSED}


def test_error_kind_has_four_kinds():
    assert {k.value for k in ErrorKind} == {
        "not_found", "bad_request", "forbidden", "not_authorized",
    }


def test_field_paths_match_wire_names():
    assert FieldPath.ROOM_MIN_USERS_LIMIT.value == "room.MinUsersLimit"
    assert FieldPath.ROOM_CLOSED_ON.value == "room.ClosedOn"
    assert FieldPath.USER_ID.value == "user.Id"
    assert FieldPath.ADMIN.value == "Admin"


def test_draw_needs_two_users():
    assert MIN_DRAWABLE_USERS == 2
