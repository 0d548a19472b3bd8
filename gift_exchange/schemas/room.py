"""Room Schemas — room creation input and room views.

Invariants:
    - Limits left as None fall back to configured defaults (config.Settings)
    - state is derived from closed_on, never accepted as input
"""

from datetime import datetime

from pydantic import BaseModel, Field

from gift_exchange.core.domain_types import RoomState
from gift_exchange.core.room import Room
from gift_exchange.schemas.user import OwnUserResponse, UserCreate


class RoomFields(BaseModel):
    name: str = Field(max_length=100)
    description: str = Field("", max_length=1000)
    gift_exchange_date: datetime
    min_users_limit: int | None = None
    max_users_limit: int | None = None


class RoomCreate(BaseModel):
    """Room creation: room attributes plus the admin's own profile."""
    room: RoomFields
    admin: UserCreate


class RoomResponse(BaseModel):
    id: int
    name: str
    description: str
    invitation_code: str
    min_users_limit: int
    max_users_limit: int | None
    gift_exchange_date: datetime
    closed_on: datetime | None
    state: RoomState
    user_count: int

    @classmethod
    def from_room(cls, room: Room) -> "RoomResponse":
        return cls(
            id=room.id,
            name=room.name,
            description=room.description,
            invitation_code=room.invitation_code,
            min_users_limit=room.min_users_limit,
            max_users_limit=room.max_users_limit,
            gift_exchange_date=room.gift_exchange_date,
            closed_on=room.closed_on,
            state=room.state,
            user_count=room.user_count,
        )


class RoomCreatedResponse(BaseModel):
    room: RoomResponse
    admin: OwnUserResponse
