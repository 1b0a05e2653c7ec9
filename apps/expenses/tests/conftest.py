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
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


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
    """Create and return a second room member."""
    return User.objects.create_user(
        email='member@example.com',
        password='TestPass123!',
        name='Member',
    )


@pytest.fixture
def third_member(db):
    """Create and return a third room member."""
    return User.objects.create_user(
        email='third@example.com',
        password='TestPass123!',
        name='Third',
    )


@pytest.fixture
def outsider(db):
    """Create and return a user who belongs to no room."""
    return User.objects.create_user(
        email='outsider@example.com',
        password='TestPass123!',
        name='Outsider',
    )


@pytest.fixture
def room(db, owner):
    """Room with only the owner in it."""
    room = Room.objects.create(
        name='Flat 4B',
        location='Pune',
        contact='owner@example.com',
        max_members=4,
        owner=owner,
    )
    RoomMembership.objects.create(user=owner, room=room)
    return room


@pytest.fixture
def shared_room(room, member):
    """Room with owner and member."""
    RoomMembership.objects.create(user=member, room=room)
    return room


@pytest.fixture
def three_member_room(shared_room, third_member):
    """Room with owner, member and third member."""
    RoomMembership.objects.create(user=third_member, room=shared_room)
    return shared_room


@pytest.fixture
def owner_client(owner):
    return client_for(owner)


@pytest.fixture
def member_client(member):
    return client_for(member)


@pytest.fixture
def outsider_client(outsider):
    return client_for(outsider)
