"""Room Aggregate — membership, capacity, and the one-way draw.

Invariants:
    - closed_on is None until draw() succeeds; once set the room is terminal
    - draw() requires len(users) >= min_users_limit and at least 2 users
    - After draw(): every user has a recipient, recipients form a bijection
      over the room's users, and nobody receives their own gift
    - add_user/delete_user/draw are legal only while OPEN
    - Admin users are never removed through delete_user()
    - Every check runs before any mutation: a failed call leaves the room untouched
    - Checks are chained; first failure wins

Design Decisions:
    - Methods return Ok(room) | Err instead of raising: handlers branch on the
      result the same way for every operation
    - Randomness and the clock are parameters, so draws are reproducible in tests
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from gift_exchange.core.derangement import RandomSource, generate_cyclic_assignment
from gift_exchange.core.domain_types import (
    AuthCode, FieldPath, MIN_DRAWABLE_USERS, RoomId, RoomState, UserId,
)
from gift_exchange.core.result import Err, Ok, Result, ValidationFailure, failure
from gift_exchange.core.user import User, UserSpec


DEFAULT_MIN_USERS_LIMIT: int = 3


@dataclass(frozen=True)
class RoomSpec:
    """Named attributes for a new room and its initial participants."""
    id: RoomId
    name: str
    gift_exchange_date: datetime
    description: str = ""
    invitation_code: str = ""
    min_users_limit: int = DEFAULT_MIN_USERS_LIMIT
    max_users_limit: int | None = None
    closed_on: datetime | None = None
    users: tuple[UserSpec, ...] = ()


@dataclass
class Room:
    """Gift exchange room, exclusive owner of its users."""

    id: RoomId
    name: str
    gift_exchange_date: datetime
    description: str = ""
    invitation_code: str = ""
    min_users_limit: int = DEFAULT_MIN_USERS_LIMIT
    max_users_limit: int | None = None
    closed_on: datetime | None = None
    users: list[User] = field(default_factory=list)

    # Concurrency token, maintained by the repository, never by the aggregate
    version: int = 0

    # --- Computed properties ---------------------------------------------------

    @property
    def state(self) -> RoomState:
        return RoomState.CLOSED if self.closed_on is not None else RoomState.OPEN

    @property
    def is_closed(self) -> bool:
        return self.state is RoomState.CLOSED

    @property
    def user_count(self) -> int:
        return len(self.users)

    @property
    def admins(self) -> list[User]:
        return [u for u in self.users if u.is_admin]

    def find_user(self, user_id: UserId) -> User | None:
        return next((u for u in self.users if u.id == user_id), None)

    def find_user_by_code(self, auth_code: AuthCode) -> User | None:
        return next((u for u in self.users if u.auth_code == auth_code), None)

    # --- Operations ------------------------------------------------------------

    def draw(
        self, rng: RandomSource, now: datetime | None = None,
    ) -> Result["Room"]:
        """Assign every user a gift recipient and close the room."""
        error = (
            _check_min_users(self)
            or _check_open(self, "Room is already closed and cannot be drawn again.")
            or _check_drawable(self)
        )
        if error:
            return error

        assignment = generate_cyclic_assignment([u.id for u in self.users], rng)
        for user in self.users:
            user.gift_recipient_user_id = assignment[user.id]
        self.closed_on = now or datetime.now(timezone.utc)
        return Ok(self)

    def add_user(self, spec: UserSpec) -> Result["Room"]:
        """Add a participant while the room is open and below capacity."""
        error = (
            _check_open(self, "Room is closed, users cannot be added.")
            or _check_capacity(self)
            or _check_user_spec(spec)
            or _check_unique_user(self, spec)
        )
        if error:
            return error

        self.users.append(User.from_spec(spec))
        return Ok(self)

    def delete_user(self, user_id: UserId) -> Result["Room"]:
        """Remove a non-admin participant while the room is open."""
        error = (
            _check_open(self, "Room is closed, users cannot be removed.")
            or _check_user_exists(self, user_id)
            or _check_not_admin(self, user_id)
        )
        if error:
            return error

        self.users = [u for u in self.users if u.id != user_id]
        return Ok(self)


def build_room(spec: RoomSpec) -> Result[Room]:
    """Create a room from a spec, reporting every invalid field at once."""
    failures = _validate_room_spec(spec)
    if failures:
        return Err.bad_request_from(failures)

    return Ok(Room(
        id=spec.id,
        name=spec.name.strip(),
        description=spec.description,
        invitation_code=spec.invitation_code,
        min_users_limit=spec.min_users_limit,
        max_users_limit=spec.max_users_limit,
        gift_exchange_date=spec.gift_exchange_date,
        closed_on=spec.closed_on,
        users=[User.from_spec(u) for u in spec.users],
    ))


# ─── Checks (pure, Err on violation, None on success) ───────────

def _check_min_users(room: Room) -> Err | None:
    if room.user_count < room.min_users_limit:
        return Err.bad_request(
            FieldPath.ROOM_MIN_USERS_LIMIT,
            f"Room needs at least {room.min_users_limit} users to draw, "
            f"has {room.user_count}.",
        )
    return None


def _check_open(room: Room, message: str) -> Err | None:
    if room.is_closed:
        return Err.bad_request(FieldPath.ROOM_CLOSED_ON, message)
    return None


def _check_drawable(room: Room) -> Err | None:
    if room.user_count < MIN_DRAWABLE_USERS:
        return Err.bad_request(
            FieldPath.ROOM_USERS,
            f"At least {MIN_DRAWABLE_USERS} users are required to draw.",
        )
    return None


def _check_capacity(room: Room) -> Err | None:
    if room.max_users_limit is not None and room.user_count >= room.max_users_limit:
        return Err.bad_request(
            FieldPath.ROOM_MAX_USERS_LIMIT,
            f"Room is full ({room.user_count}/{room.max_users_limit}).",
        )
    return None


def _check_user_spec(spec: UserSpec) -> Err | None:
    failures = spec.validate()
    return Err.bad_request_from(failures) if failures else None


def _check_unique_user(room: Room, spec: UserSpec) -> Err | None:
    if room.find_user(spec.id) is not None:
        return Err.bad_request(
            FieldPath.USER_ID, f"User with id {spec.id} is already in the room.",
        )
    if room.find_user_by_code(spec.auth_code) is not None:
        return Err.bad_request(
            FieldPath.USER_AUTH_CODE, "User with such auth code is already in the room.",
        )
    return None


def _check_user_exists(room: Room, user_id: UserId) -> Err | None:
    if room.find_user(user_id) is None:
        return Err.not_found(
            FieldPath.USER_ID, f"User with id {user_id} is not found in the room.",
        )
    return None


def _check_not_admin(room: Room, user_id: UserId) -> Err | None:
    user = room.find_user(user_id)
    if user is not None and user.is_admin:
        return Err.forbidden(FieldPath.ADMIN, "Admin cannot be removed from the room.")
    return None


def _validate_room_spec(spec: RoomSpec) -> list[ValidationFailure]:
    failures = []
    if not spec.name or not spec.name.strip():
        failures.append(failure(FieldPath.ROOM_NAME, "Room name is required."))
    if spec.min_users_limit < 0:
        failures.append(failure(
            FieldPath.ROOM_MIN_USERS_LIMIT, "Minimum users limit cannot be negative.",
        ))
    if spec.max_users_limit is not None:
        if spec.max_users_limit < spec.min_users_limit:
            failures.append(failure(
                FieldPath.ROOM_MAX_USERS_LIMIT,
                "Maximum users limit cannot be lower than the minimum.",
            ))
        if len(spec.users) > spec.max_users_limit:
            failures.append(failure(
                FieldPath.ROOM_USERS,
                f"Room cannot hold more than {spec.max_users_limit} users.",
            ))

    ids = [u.id for u in spec.users]
    if len(set(ids)) != len(ids):
        failures.append(failure(FieldPath.USER_ID, "User ids must be unique."))
    codes = [u.auth_code for u in spec.users]
    if len(set(codes)) != len(codes):
        failures.append(failure(FieldPath.USER_AUTH_CODE, "Auth codes must be unique."))

    for user_spec in spec.users:
        failures.extend(user_spec.validate())
    return failures
