import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.activity import broadcast
from apps.rooms.models import Room, RoomMembership


def client_for(user):
    """Return an API client authenticated as ``user``."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture(autouse=True)
def clear_outbox():
    """Start every test with an empty broadcast outbox."""
    broadcast.outbox.clear()
    yield
    broadcast.outbox.clear()


@pytest.fixture
def owner(db):
    """Create and return the room owner."""
    return User.objects.create_user(
        email='owner@example.com',
        password='TestPass123!',
        name='Owner',
    )


@pytest.fixture
def member(db):
    """Create and return a room member without a name set."""
    return User.objects.create_user(
        email='priya@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def room(db, owner, member):
    """Room with owner and member."""
    room = Room.objects.create(
        name='Flat 4B',
        location='Pune',
        contact='owner@example.com',
        max_members=4,
        owner=owner,
    )
    RoomMembership.objects.create(user=owner, room=room)
    RoomMembership.objects.create(user=member, room=room)
    return room


@pytest.fixture
def owner_client(owner):
    return client_for(owner)


@pytest.fixture
def member_client(member):
    return client_for(member)


@pytest.fixture
def outsider_client(db):
    """Client for a user who belongs to no room."""
    outsider = User.objects.create_user(
        email='lonely@example.com',
        password='TestPass123!',
    )
    return client_for(outsider)
