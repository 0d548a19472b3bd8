"""Room Routes — create a room, read it, and run the draw.

Invariants:
    - Caller identity is the userCode query parameter
    - Err results rendered through failure_response (status by ErrorKind)
"""

from fastapi import APIRouter, Depends, Query, status

from gift_exchange.api.error_handlers import failure_response
from gift_exchange.config import Settings, get_settings
from gift_exchange.core.derangement import RandomSource
from gift_exchange.core.domain_types import AuthCode
from gift_exchange.infrastructure.randomness import get_random_source
from gift_exchange.infrastructure.room_store import InMemoryRoomStore, get_room_store
from gift_exchange.schemas.room import RoomCreate, RoomCreatedResponse, RoomResponse
from gift_exchange.schemas.user import OwnUserResponse
from gift_exchange.services.handle_room import RoomHandlers

router = APIRouter(prefix="/api/v1/rooms", tags=["rooms"])


def get_room_handlers(
    store: InMemoryRoomStore = Depends(get_room_store),
    rng: RandomSource = Depends(get_random_source),
) -> RoomHandlers:
    return RoomHandlers(store, rng)


@router.post(
    "", response_model=RoomCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_room(
    body: RoomCreate,
    handlers: RoomHandlers = Depends(get_room_handlers),
    settings: Settings = Depends(get_settings),
):
    """Create a room; the creator becomes its admin."""
    result = await handlers.create_room(
        body, settings.default_min_users_limit, settings.default_max_users_limit,
    )
    if result.is_failure:
        return failure_response(result)
    room = result.value
    return RoomCreatedResponse(
        room=RoomResponse.from_room(room),
        admin=OwnUserResponse.from_user(room.admins[0]),
    )


@router.get("", response_model=RoomResponse)
async def get_room(
    user_code: str = Query(alias="userCode"),
    handlers: RoomHandlers = Depends(get_room_handlers),
):
    result = await handlers.get_room(AuthCode(user_code))
    if result.is_failure:
        return failure_response(result)
    return RoomResponse.from_room(result.value)


@router.post("/draw", response_model=RoomResponse)
async def draw_room(
    user_code: str = Query(alias="userCode"),
    handlers: RoomHandlers = Depends(get_room_handlers),
):
    """Assign gift recipients and close the room (admin only)."""
    result = await handlers.draw_room(AuthCode(user_code))
    if result.is_failure:
        return failure_response(result)
    return RoomResponse.from_room(result.value)
