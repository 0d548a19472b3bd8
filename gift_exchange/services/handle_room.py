"""Room Handlers — create_room, get_room, draw_room.

Invariants:
    - Every handler: load -> at most one aggregate call -> persist
    - Expected violations come back as Err, never raised
    - The room creator is always the room's admin
    - Only an admin of the room may trigger the draw
"""

import logging
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from gift_exchange.core.derangement import RandomSource
from gift_exchange.core.domain_types import AuthCode, FieldPath
from gift_exchange.core.repository_protocols import RoomRepository
from gift_exchange.core.result import Err, Ok, Result
from gift_exchange.core.room import Room, RoomSpec, build_room
from gift_exchange.schemas.room import RoomCreate
from gift_exchange.services.user_specs import user_spec_from_profile

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def user_code_not_found() -> Err:
    return Err.not_found(FieldPath.USER_CODE, "User with such userCode is not found.")


class RoomHandlers:
    """Room lifecycle use cases."""

    def __init__(
        self,
        rooms: RoomRepository,
        rng: RandomSource,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.rooms = rooms
        self.rng = rng
        self.clock = clock

    async def create_room(
        self,
        body: RoomCreate,
        default_min_users_limit: int,
        default_max_users_limit: int | None,
    ) -> Result[Room]:
        """Create a room whose first participant is its admin."""
        admin = user_spec_from_profile(
            self.rooms.next_user_id(), AuthCode(uuid.uuid4().hex),
            body.admin, is_admin=True,
        )
        min_limit = body.room.min_users_limit
        max_limit = body.room.max_users_limit
        spec = RoomSpec(
            id=self.rooms.next_room_id(),
            name=body.room.name,
            description=body.room.description,
            gift_exchange_date=body.room.gift_exchange_date,
            invitation_code=uuid.uuid4().hex,
            min_users_limit=(
                default_min_users_limit if min_limit is None else min_limit
            ),
            max_users_limit=(
                default_max_users_limit if max_limit is None else max_limit
            ),
            users=(admin,),
        )

        result = build_room(spec)
        if result.is_failure:
            logger.info(
                f"Room creation rejected: {result.message}",
                extra={"error_kind": result.kind.value},
            )
            return result

        room = await self.rooms.add(result.value)
        logger.info("Room created", extra={"room_id": room.id, "user_id": admin.id})
        return Ok(room)

    async def get_room(self, user_code: AuthCode) -> Result[Room]:
        room = await self.rooms.get_by_user_code(user_code)
        if room is None:
            return user_code_not_found()
        return Ok(room)

    async def draw_room(self, user_code: AuthCode) -> Result[Room]:
        """Assign gift recipients and close the caller's room (admin only)."""
        room = await self.rooms.get_by_user_code(user_code)
        if room is None:
            return user_code_not_found()

        caller = room.find_user_by_code(user_code)
        if not caller.is_admin:
            return Err.forbidden(FieldPath.USER_CODE, "Only admin can draw the room.")

        result = room.draw(self.rng, now=self.clock())
        if result.is_failure:
            logger.info(
                f"Draw rejected: {result.message}",
                extra={"room_id": room.id, "error_kind": result.kind.value},
            )
            return result

        room = await self.rooms.update(room)
        logger.info(
            "Room drawn and closed",
            extra={"room_id": room.id, "user_count": room.user_count},
        )
        return Ok(room)
