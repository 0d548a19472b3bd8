"""In-Memory Room Store — RoomRepository + UserReadRepository over a process-local dict.

Invariants:
    - Callers always receive deep copies: mutating a loaded Room never touches
      stored state until update() accepts it
    - update() is an optimistic check-and-set on Room.version; a stale version
      raises ConcurrencyError and stores nothing
    - Room and user ids are unique per store (monotonic counters)

Design Decisions:
    - In-memory, not DB: single-process uvicorn, state lost on restart
    - Check-and-set runs without an await in between, so it is atomic under asyncio
"""

import copy
import itertools
import logging

from gift_exchange.core.domain_types import AuthCode, RoomId, UserId
from gift_exchange.core.errors import ConcurrencyError, ErrorContext
from gift_exchange.core.repository_protocols import UserRecord
from gift_exchange.core.room import Room

logger = logging.getLogger(__name__)


class InMemoryRoomStore:
    """Process-local storage for rooms and their users."""

    def __init__(self):
        self._rooms: dict[RoomId, Room] = {}
        self._room_ids = itertools.count(1)
        self._user_ids = itertools.count(1)

    def next_room_id(self) -> RoomId:
        return RoomId(next(self._room_ids))

    def next_user_id(self) -> UserId:
        return UserId(next(self._user_ids))

    # --- RoomRepository --------------------------------------------------------

    async def add(self, room: Room) -> Room:
        if room.id in self._rooms:
            raise ConcurrencyError(
                f"Room {room.id} already exists",
                ErrorContext(room_id=room.id),
            )
        stored = copy.deepcopy(room)
        stored.version = 1
        self._rooms[room.id] = stored
        return copy.deepcopy(stored)

    async def get_by_user_code(self, auth_code: AuthCode) -> Room | None:
        for room in self._rooms.values():
            if room.find_user_by_code(auth_code) is not None:
                return copy.deepcopy(room)
        return None

    async def get_by_invitation_code(self, invitation_code: str) -> Room | None:
        for room in self._rooms.values():
            if room.invitation_code == invitation_code:
                return copy.deepcopy(room)
        return None

    async def update(self, room: Room) -> Room:
        stored = self._rooms.get(room.id)
        if stored is None or stored.version != room.version:
            logger.warning(
                "Rejected stale room update",
                extra={"room_id": room.id, "error_code": "CONCURRENCY_CONFLICT"},
            )
            raise ConcurrencyError(
                f"Room {room.id} was modified by another request",
                ErrorContext(room_id=room.id),
            )
        updated = copy.deepcopy(room)
        updated.version = stored.version + 1
        self._rooms[room.id] = updated
        return copy.deepcopy(updated)

    # --- UserReadRepository ----------------------------------------------------

    async def get_by_code(self, auth_code: AuthCode) -> UserRecord | None:
        for room in self._rooms.values():
            user = room.find_user_by_code(auth_code)
            if user is not None:
                return UserRecord(room.id, copy.deepcopy(user))
        return None

    async def get_by_id(self, user_id: UserId) -> UserRecord | None:
        for room in self._rooms.values():
            user = room.find_user(user_id)
            if user is not None:
                return UserRecord(room.id, copy.deepcopy(user))
        return None


# Singleton (initialized on startup)
room_store: InMemoryRoomStore | None = None


def init_room_store() -> InMemoryRoomStore:
    global room_store
    room_store = InMemoryRoomStore()
    return room_store


def get_room_store() -> InMemoryRoomStore:
    """FastAPI dependency for the room store."""
    if room_store is None:
        raise RuntimeError("Room store not initialized")
    return room_store
