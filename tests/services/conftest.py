"""Service test fixtures — fresh in-memory store, handlers, and FastAPI test client.

Invariants:
    - Every test gets a fresh InMemoryRoomStore
    - Draws use a seeded random.Random and a fixed clock
    - get_room_store / get_random_source overridden on the app for route tests
"""

import random
from types import SimpleNamespace

import pytest
from httpx import ASGITransport, AsyncClient

from gift_exchange.infrastructure.randomness import get_random_source
from gift_exchange.infrastructure.room_store import InMemoryRoomStore, get_room_store
from gift_exchange.main import app
from gift_exchange.services.handle_room import RoomHandlers
from gift_exchange.services.handle_user import UserHandlers
from tests.factories import FIXED_NOW, make_profile, make_room_create


@pytest.fixture
def store():
    return InMemoryRoomStore()


@pytest.fixture
def room_handlers(store):
    return RoomHandlers(store, random.Random(7), clock=lambda: FIXED_NOW)


@pytest.fixture
def user_handlers(store):
    return UserHandlers(store, store)


@pytest.fixture
async def seeded(room_handlers, user_handlers):
    """A room with its admin and two joined members."""
    created = await room_handlers.create_room(make_room_create(), 3, 20)
    room = created.value
    admin = room.admins[0]
    alice = (await user_handlers.join_room(
        room.invitation_code, make_profile("Alice"),
    )).value
    bob = (await user_handlers.join_room(
        room.invitation_code, make_profile("Bob"),
    )).value
    return SimpleNamespace(room=room, admin=admin, alice=alice, bob=bob)


@pytest.fixture
async def client(store):
    """FastAPI test client with store and randomness overridden."""
    app.dependency_overrides[get_room_store] = lambda: store
    app.dependency_overrides[get_random_source] = lambda: random.Random(11)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
