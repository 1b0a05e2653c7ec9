from django.contrib import admin
from .models import Activity


@admin.register(Activity)
class ActivityAdmin(admin.ModelAdmin):
    """Read-mostly view of room activity feeds."""

    list_display = ['description', 'type', 'user', 'room', 'created_at']
    list_filter = ['type', 'created_at']
    search_fields = ['description', 'user__email', 'room__name']
    readonly_fields = ['id', 'room', 'user', 'description', 'type', 'created_at']

    def has_add_permission(self, request):
        """Activities are written by the services, not by hand."""
        return False
