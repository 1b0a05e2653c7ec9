import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.activity import broadcast
from apps.groceries.models import GroceryItem
from apps.rooms.models import Room, RoomMembership


def client_for(user):
    """Return an API client authenticated as ``user``."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture(autouse=True)
def clear_outbox():
    broadcast.outbox.clear()
    yield
    broadcast.outbox.clear()


@pytest.fixture
def owner(db):
    return User.objects.create_user(
        email='owner@example.com',
        password='TestPass123!',
        name='Owner',
    )


@pytest.fixture
def member(db):
    return User.objects.create_user(
        email='member@example.com',
        password='TestPass123!',
        name='Member',
    )


@pytest.fixture
def outsider(db):
    return User.objects.create_user(
        email='outsider@example.com',
        password='TestPass123!',
        name='Outsider',
    )


@pytest.fixture
def room(db, owner, member):
    """Room shared by owner and member."""
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
def other_room(db, outsider):
    """A different room owned by outsider."""
    room = Room.objects.create(
        name='Sea View',
        location='Goa',
        contact='outsider@example.com',
        max_members=2,
        owner=outsider,
    )
    RoomMembership.objects.create(user=outsider, room=room)
    return room


@pytest.fixture
def milk(room, owner):
    return GroceryItem.objects.create(room=room, added_by=owner, name='Milk')


@pytest.fixture
def owner_client(owner):
    return client_for(owner)


@pytest.fixture
def member_client(member):
    return client_for(member)


@pytest.fixture
def outsider_client(outsider):
    return client_for(outsider)


@pytest.fixture
def loner_client(db):
    """Client for a user who belongs to no room."""
    loner = User.objects.create_user(email='loner@example.com', password='TestPass123!')
    return client_for(loner)
