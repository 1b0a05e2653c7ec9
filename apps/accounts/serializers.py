from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    display_name = serializers.SerializerMethodField()
    room = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'name',
            'display_name',
            'room',
            'created_at',
        ]
        read_only_fields = ['id', 'email', 'created_at']

    def get_display_name(self, obj):
        return obj.get_display_name()

    def get_room(self, obj):
        """Id of the room the user currently belongs to, if any."""
        membership = getattr(obj, 'room_membership', None)
        return membership.room_id if membership else None


class UserMinimalSerializer(serializers.ModelSerializer):
    """Minimal user info for nested serialization."""

    display_name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'email', 'display_name']
        read_only_fields = fields

    def get_display_name(self, obj):
        return obj.get_display_name()
