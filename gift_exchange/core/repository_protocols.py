"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - update() rejects a room whose version is stale (ConcurrencyError)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations may do IO, but Room methods that
      handlers call between load and save are never async
"""

from typing import NamedTuple, Protocol

from gift_exchange.core.domain_types import AuthCode, RoomId, UserId
from gift_exchange.core.room import Room
from gift_exchange.core.user import User


class UserRecord(NamedTuple):
    """A user together with the id of the room that owns it."""
    room_id: RoomId
    user: User


class RoomRepository(Protocol):
    """Contract for room persistence, implemented by shell."""
    async def add(self, room: Room) -> Room: ...
    async def get_by_user_code(self, auth_code: AuthCode) -> Room | None: ...
    async def get_by_invitation_code(self, invitation_code: str) -> Room | None: ...
    async def update(self, room: Room) -> Room: ...
    def next_room_id(self) -> RoomId: ...
    def next_user_id(self) -> UserId: ...


class UserReadRepository(Protocol):
    """Read-only user lookups across all rooms, implemented by shell."""
    async def get_by_code(self, auth_code: AuthCode) -> UserRecord | None: ...
    async def get_by_id(self, user_id: UserId) -> UserRecord | None: ...
