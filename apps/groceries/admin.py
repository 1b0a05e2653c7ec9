from django.contrib import admin
from .models import GroceryItem


@admin.register(GroceryItem)
class GroceryItemAdmin(admin.ModelAdmin):
    list_display = ['name', 'room', 'added_by', 'is_purchased', 'created_at']
    list_filter = ['is_purchased', 'created_at']
    search_fields = ['name', 'room__name', 'added_by__email']
    readonly_fields = ['id', 'created_at', 'updated_at']
    raw_id_fields = ['room', 'added_by']
