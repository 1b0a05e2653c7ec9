from django.contrib import admin
from .models import Expense, Settlement


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    """Admin interface for room expenses."""

    list_display = ['description', 'amount', 'added_by', 'room', 'created_at']
    list_filter = ['created_at']
    search_fields = ['description', 'added_by__email', 'added_by__name', 'room__name']
    readonly_fields = ['id', 'created_at']
    raw_id_fields = ['room', 'added_by']


@admin.register(Settlement)
class SettlementAdmin(admin.ModelAdmin):
    list_display = ['paid_by', 'amount', 'room', 'created_at']
    list_filter = ['created_at']
    search_fields = ['paid_by__email', 'paid_by__name', 'room__name']
    readonly_fields = ['id', 'created_at']
    raw_id_fields = ['room', 'paid_by']
