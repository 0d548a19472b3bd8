"""User Routes — join a room, list participants, remove a participant.

Invariants:
    - Only the caller's own entry reveals gift_recipient_user_id
    - Err results rendered through failure_response (status by ErrorKind)
"""

from fastapi import APIRouter, Depends, Query, status

from gift_exchange.api.error_handlers import failure_response
from gift_exchange.core.domain_types import AuthCode, UserId
from gift_exchange.core.room import Room
from gift_exchange.infrastructure.room_store import InMemoryRoomStore, get_room_store
from gift_exchange.schemas.room import RoomResponse
from gift_exchange.schemas.user import (
    OwnUserResponse, UserCreate, UserResponse, UsersResponse,
)
from gift_exchange.services.handle_user import UserHandlers

router = APIRouter(prefix="/api/v1/users", tags=["users"])


def get_user_handlers(
    store: InMemoryRoomStore = Depends(get_room_store),
) -> UserHandlers:
    return UserHandlers(store, store)


def _users_view(room: Room, user_code: str) -> UsersResponse:
    return UsersResponse(users=[
        UserResponse.from_user(u, reveal_recipient=(u.auth_code == user_code))
        for u in room.users
    ])


@router.post(
    "", response_model=OwnUserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def join_room(
    body: UserCreate,
    room_code: str = Query(alias="roomCode"),
    handlers: UserHandlers = Depends(get_user_handlers),
):
    """Join the room behind an invitation code."""
    result = await handlers.join_room(room_code, body)
    if result.is_failure:
        return failure_response(result)
    return OwnUserResponse.from_user(result.value)


@router.get("", response_model=UsersResponse)
async def get_users(
    user_code: str = Query(alias="userCode"),
    handlers: UserHandlers = Depends(get_user_handlers),
):
    result = await handlers.get_users(AuthCode(user_code))
    if result.is_failure:
        return failure_response(result)
    return _users_view(result.value, user_code)


@router.delete("/{user_id}", response_model=RoomResponse)
async def delete_user(
    user_id: int,
    user_code: str = Query(alias="userCode"),
    handlers: UserHandlers = Depends(get_user_handlers),
):
    """Remove a participant from the caller's room (admin only)."""
    result = await handlers.delete_user(AuthCode(user_code), UserId(user_id))
    if result.is_failure:
        return failure_response(result)
    return RoomResponse.from_room(result.value)
