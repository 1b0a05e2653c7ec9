from rest_framework import serializers
from .models import Room, RoomMembership
from apps.accounts.serializers import UserMinimalSerializer


class RoomMemberSerializer(serializers.ModelSerializer):
    """Member of a room."""

    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = RoomMembership
        fields = ['id', 'user', 'joined_at']
        read_only_fields = fields


class RoomSerializer(serializers.ModelSerializer):
    """Main serializer for the current room."""

    owner = UserMinimalSerializer(read_only=True)
    members = RoomMemberSerializer(source='memberships', many=True, read_only=True)
    member_count = serializers.SerializerMethodField()

    class Meta:
        model = Room
        fields = [
            'id',
            'name',
            'description',
            'location',
            'contact',
            'is_public',
            'max_members',
            'join_code',
            'owner',
            'members',
            'member_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_member_count(self, obj):
        return obj.memberships.count()


class RoomCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating rooms."""

    max_members = serializers.IntegerField(min_value=1)

    class Meta:
        model = Room
        fields = ['name', 'description', 'location', 'contact', 'is_public', 'max_members']


class JoinRoomSerializer(serializers.Serializer):
    """Serializer for joining a room with its join code."""

    join_code = serializers.CharField(max_length=16, required=True)


class PublicRoomFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for the public room listing.

    Query Parameters:
        location (str): Case-insensitive substring of the room's location
    """

    location = serializers.CharField(max_length=200, required=False, allow_blank=True)


class PublicRoomSerializer(serializers.ModelSerializer):
    """Public listing entry. Never exposes the join code."""

    member_count = serializers.IntegerField(source='member_total', read_only=True)

    class Meta:
        model = Room
        fields = ['id', 'name', 'description', 'location', 'max_members', 'member_count']
        read_only_fields = fields
