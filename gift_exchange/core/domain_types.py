"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId and RoomId wrap ints, AuthCode wraps str; never mix them in signatures
    - All valid states encoded as Enums, no raw string matching
    - Field paths used in failures are defined once, here

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
RoomId = NewType("RoomId", int)
AuthCode = NewType("AuthCode", str)


# ─── Limits ──────────────────────────────────────────────────────

# A draw needs at least a giver and a different receiver.
MIN_DRAWABLE_USERS: int = 2


# ─── Enums ───────────────────────────────────────────────────────

class RoomState(str, Enum):
    """Room lifecycle: OPEN until a successful draw, then CLOSED forever."""
    OPEN = "open"
    CLOSED = "closed"


class ErrorKind(str, Enum):
    """Failure classification handed to the boundary layer."""
    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    FORBIDDEN = "forbidden"
    NOT_AUTHORIZED = "not_authorized"


class FieldPath(str, Enum):
    """Field paths attached to validation failures."""
    ROOM_NAME = "room.Name"
    ROOM_MIN_USERS_LIMIT = "room.MinUsersLimit"
    ROOM_MAX_USERS_LIMIT = "room.MaxUsersLimit"
    ROOM_CLOSED_ON = "room.ClosedOn"
    ROOM_USERS = "room.Users"
    USER_ID = "user.Id"
    USER_AUTH_CODE = "user.AuthCode"
    USER_FIRST_NAME = "user.FirstName"
    USER_LAST_NAME = "user.LastName"
    USER_PHONE = "user.Phone"
    USER_DELIVERY_INFO = "user.DeliveryInfo"
    USER_INTERESTS = "user.Interests"
    USER_WISHES = "user.Wishes"
    ADMIN = "Admin"
    # Request-level paths used by use-case handlers
    USER_CODE = "userCode"
    ROOM_CODE = "roomCode"
    ID = "id"
