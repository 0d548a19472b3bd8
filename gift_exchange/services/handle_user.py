"""User Handlers — join_room, get_users, delete_user.

Invariants:
    - Caller identity is resolved from the auth code before any room access
    - delete_user checks, in order: caller exists, target exists, same room,
      not self, caller is admin, then defers to Room.delete_user
    - Room.delete_user failures are returned unchanged
    - Expected violations come back as Err, never raised
"""

import logging
import uuid

from gift_exchange.core.domain_types import AuthCode, FieldPath, UserId
from gift_exchange.core.repository_protocols import RoomRepository, UserReadRepository
from gift_exchange.core.result import Err, Ok, Result
from gift_exchange.core.room import Room
from gift_exchange.core.user import User
from gift_exchange.schemas.user import UserCreate
from gift_exchange.services.handle_room import user_code_not_found
from gift_exchange.services.user_specs import user_spec_from_profile

logger = logging.getLogger(__name__)


class UserHandlers:
    """Room membership use cases."""

    def __init__(self, rooms: RoomRepository, users: UserReadRepository):
        self.rooms = rooms
        self.users = users

    async def join_room(self, invitation_code: str, profile: UserCreate) -> Result[User]:
        """Add a new participant to the room behind an invitation code."""
        room = await self.rooms.get_by_invitation_code(invitation_code)
        if room is None:
            return Err.not_found(
                FieldPath.ROOM_CODE, "Room with such roomCode is not found.",
            )

        spec = user_spec_from_profile(
            self.rooms.next_user_id(), AuthCode(uuid.uuid4().hex), profile,
        )
        result = room.add_user(spec)
        if result.is_failure:
            logger.info(
                f"Join rejected: {result.message}",
                extra={"room_id": room.id, "error_kind": result.kind.value},
            )
            return result

        room = await self.rooms.update(room)
        logger.info("User joined room", extra={"room_id": room.id, "user_id": spec.id})
        return Ok(room.find_user(spec.id))

    async def get_users(self, user_code: AuthCode) -> Result[Room]:
        room = await self.rooms.get_by_user_code(user_code)
        if room is None:
            return user_code_not_found()
        return Ok(room)

    async def delete_user(self, user_code: AuthCode, user_id: UserId) -> Result[Room]:
        """Remove a participant on behalf of the room's admin."""
        caller = await self.users.get_by_code(user_code)
        if caller is None:
            return user_code_not_found()

        target = await self.users.get_by_id(user_id)
        if target is None:
            return Err.not_found(FieldPath.ID, "User with such Id is not found.")

        if target.room_id != caller.room_id:
            return Err.not_authorized(
                FieldPath.ID,
                "User with userCode and user with Id belongs to different rooms.",
            )

        if target.user.id == caller.user.id:
            return Err.bad_request(FieldPath.ID, "User cannot delete themselves.")

        room = await self.rooms.get_by_user_code(user_code)
        if room is None:
            return user_code_not_found()

        if not room.find_user_by_code(user_code).is_admin:
            return Err.forbidden(FieldPath.USER_CODE, "Only admin can remove users")

        result = room.delete_user(user_id)
        if result.is_failure:
            logger.info(
                f"Delete rejected: {result.message}",
                extra={
                    "room_id": room.id, "user_id": user_id,
                    "error_kind": result.kind.value,
                },
            )
            return result

        room = await self.rooms.update(room)
        logger.info("User removed from room", extra={"room_id": room.id, "user_id": user_id})
        return Ok(room)
