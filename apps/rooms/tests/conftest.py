import pytest
from django.utils import timezone
from datetime import timedelta
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.rooms.models import Room, RoomMembership


def client_for(user):
    """Return an API client authenticated as ``user``."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


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
    """Create and return a room member."""
    return User.objects.create_user(
        email='member@example.com',
        password='TestPass123!',
        name='Member',
    )


@pytest.fixture
def late_member(db):
    """Create and return a member who joins after ``member``."""
    return User.objects.create_user(
        email='late@example.com',
        password='TestPass123!',
        name='Late',
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
        max_members=3,
        owner=owner,
        join_code='ABC123',
    )
    RoomMembership.objects.create(user=owner, room=room)
    return room


@pytest.fixture
def room_with_members(room, member, late_member):
    """Owner, then member, then late_member, with distinct join times."""
    RoomMembership.objects.create(user=member, room=room)
    RoomMembership.objects.create(user=late_member, room=room)

    # auto_now_add ignores explicit values on create
    now = timezone.now()
    RoomMembership.objects.filter(user=member).update(joined_at=now + timedelta(minutes=1))
    RoomMembership.objects.filter(user=late_member).update(joined_at=now + timedelta(minutes=2))
    return room


@pytest.fixture
def owner_client(owner):
    return client_for(owner)


@pytest.fixture
def member_client(member):
    return client_for(member)


@pytest.fixture
def outsider_client(outsider):
    return client_for(outsider)
