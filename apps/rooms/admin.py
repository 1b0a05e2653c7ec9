# ==========================================
# apps/rooms/admin.py
# ==========================================

from django.contrib import admin
from .models import Room, RoomMembership


class RoomMembershipInline(admin.TabularInline):
    """Inline admin for members within a room."""
    model = RoomMembership
    extra = 0
    fields = ['user', 'joined_at']
    readonly_fields = ['joined_at']


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    """Admin interface for rooms and their members."""

    list_display = ['name', 'owner', 'location', 'get_member_count', 'max_members', 'is_public', 'created_at']
    list_filter = ['is_public', 'created_at']
    search_fields = ['name', 'location', 'join_code', 'owner__email', 'owner__name']
    readonly_fields = ['id', 'join_code', 'created_at', 'updated_at']
    inlines = [RoomMembershipInline]

    def get_member_count(self, obj):
        return obj.memberships.count()
    get_member_count.short_description = 'Members'
