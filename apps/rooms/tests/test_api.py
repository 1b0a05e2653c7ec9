import pytest
from uuid import uuid4
from django.urls import reverse
from rest_framework import status
from apps.rooms.models import Room, RoomMembership


# =============================================================================
# Room Tests
# =============================================================================

@pytest.mark.django_db
class TestMyRoom:
    """Tests for GET /api/rooms/"""

    def test_get_my_room(self, owner_client, room_with_members):
        """Returns the room with its members."""
        url = reverse('rooms:my-room')
        response = owner_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'Flat 4B'
        assert response.data['join_code'] == 'ABC123'
        assert response.data['member_count'] == 3
        assert [m['user']['display_name'] for m in response.data['members']] == [
            'Owner', 'Member', 'Late',
        ]

    def test_not_in_room(self, outsider_client):
        url = reverse('rooms:my-room')
        response = outsider_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'You are not in a room.'

    def test_unauthenticated(self, api_client):
        url = reverse('rooms:my-room')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestCreateRoom:
    """Tests for POST /api/rooms/create/"""

    def test_create_room(self, outsider_client, outsider):
        url = reverse('rooms:create')
        data = {
            'name': 'Sea View',
            'location': 'Goa',
            'contact': 'outsider@example.com',
            'max_members': 4,
        }
        response = outsider_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert len(response.data['join_code']) == 6
        room = Room.objects.get(name='Sea View')
        assert room.owner == outsider
        assert room.has_member(outsider)

    def test_create_room_invalid_capacity(self, outsider_client):
        url = reverse('rooms:create')
        data = {'name': 'Tiny', 'location': 'Goa', 'contact': 'x', 'max_members': 0}
        response = outsider_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_room_already_in_room(self, owner_client, room):
        url = reverse('rooms:create')
        data = {'name': 'Second', 'location': 'Goa', 'contact': 'x', 'max_members': 2}
        response = owner_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Room.objects.count() == 1


@pytest.mark.django_db
class TestJoinRoom:
    """Tests for POST /api/rooms/join/"""

    def test_join_room(self, outsider_client, room, outsider):
        url = reverse('rooms:join')
        response = outsider_client.post(url, {'join_code': 'ABC123'})

        assert response.status_code == status.HTTP_200_OK
        assert room.has_member(outsider)

    def test_join_unknown_code(self, outsider_client, room):
        url = reverse('rooms:join')
        response = outsider_client.post(url, {'join_code': 'XXXXXX'})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_join_full_room(self, outsider_client, room_with_members):
        url = reverse('rooms:join')
        response = outsider_client.post(url, {'join_code': 'ABC123'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestLeaveAndDelete:
    """Tests for leave, delete and remove-member endpoints."""

    def test_leave_room(self, member_client, room_with_members, member):
        url = reverse('rooms:leave')
        response = member_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert not RoomMembership.objects.filter(user=member).exists()

    def test_last_member_leaving(self, owner_client, room):
        url = reverse('rooms:leave')
        response = owner_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert 'deleted' in response.data['message']
        assert not Room.objects.exists()

    def test_delete_room_owner(self, owner_client, room_with_members):
        url = reverse('rooms:delete')
        response = owner_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert not Room.objects.exists()

    def test_delete_room_member_forbidden(self, member_client, room_with_members):
        url = reverse('rooms:delete')
        response = member_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Room.objects.exists()

    def test_remove_member(self, owner_client, room_with_members, member):
        url = reverse('rooms:remove-member', kwargs={'member_id': member.id})
        response = owner_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert not RoomMembership.objects.filter(user=member).exists()

    def test_remove_self(self, owner_client, room, owner):
        url = reverse('rooms:remove-member', kwargs={'member_id': owner.id})
        response = owner_client.delete(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_remove_member_as_member(self, member_client, room_with_members, late_member):
        url = reverse('rooms:remove-member', kwargs={'member_id': late_member.id})
        response = member_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_remove_unknown_member(self, owner_client, room):
        url = reverse('rooms:remove-member', kwargs={'member_id': uuid4()})
        response = owner_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestToggleLock:
    """Tests for PUT /api/rooms/toggle-lock/"""

    def test_owner_toggles_lock(self, owner_client, room):
        url = reverse('rooms:toggle-lock')
        response = owner_client.put(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Room is now unlocked.'
        assert response.data['is_public'] is True
        room.refresh_from_db()
        assert room.is_public is True

    def test_member_forbidden(self, member_client, room_with_members):
        url = reverse('rooms:toggle-lock')
        response = member_client.put(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['error'] == 'You are not the room owner.'

    def test_not_in_room(self, outsider_client):
        url = reverse('rooms:toggle-lock')
        response = outsider_client.put(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestPublicRooms:
    """Tests for GET /api/rooms/public/"""

    def test_lists_public_rooms_without_join_code(self, api_client, room_with_members):
        Room.objects.filter(id=room_with_members.id).update(is_public=True)

        url = reverse('rooms:public')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        entry = response.data[0]
        assert set(entry) == {'id', 'name', 'description', 'location', 'max_members', 'member_count'}
        assert entry['member_count'] == 3
        assert 'join_code' not in entry

    def test_private_rooms_hidden(self, api_client, room):
        url = reverse('rooms:public')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == []

    def test_filter_by_location(self, api_client, room):
        Room.objects.filter(id=room.id).update(is_public=True)
        url = reverse('rooms:public')

        assert len(api_client.get(url, {'location': 'PUNE'}).data) == 1
        assert api_client.get(url, {'location': 'Goa'}).data == []
