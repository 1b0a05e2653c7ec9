from rest_framework import serializers
from .models import Activity


class ActivitySerializer(serializers.ModelSerializer):
    """Feed entry with the acting user's display name."""

    user_name = serializers.SerializerMethodField()

    class Meta:
        model = Activity
        fields = ['id', 'room', 'user', 'user_name', 'description', 'type', 'created_at']
        read_only_fields = fields

    def get_user_name(self, obj):
        return obj.user.get_display_name()
