from django.contrib import admin
from django.utils.html import format_html
from .models import Order, OrderStatus


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Admin interface for orders.

    Status and pickup code are read-only: status changes go through the
    order service so the transition table is enforced.
    """

    list_display = [
        'drink',
        'user',
        'size',
        'ice',
        'strength',
        'status_badge',
        'pickup_code',
        'created_at',
    ]

    list_filter = [
        'status',
        'size',
        'ice',
        'created_at',
    ]

    search_fields = [
        'drink',
        'pickup_code',
        'user__email',
        'user__phone',
        'user__name',
    ]

    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    readonly_fields = [
        'id',
        'user',
        'status',
        'pickup_code',
        'created_at',
        'updated_at',
    ]

    def status_badge(self, obj):
        """Display order status as colored badge."""
        colors = {
            OrderStatus.PENDING: ('#8B5CF6', 'white'),
            OrderStatus.PREPARING: ('#3B82F6', 'white'),
            OrderStatus.READY: ('#EC4899', 'white'),
            OrderStatus.PICKED: ('#6B8E5E', 'white'),
            OrderStatus.CANCELLED: ('#B85C5C', 'white'),
        }
        bg, fg = colors.get(obj.status, ('#ccc', '#666'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_status_display()
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'

    def has_add_permission(self, request):
        """Orders are placed through the API so the token is debited."""
        return False

    def has_delete_permission(self, request, obj=None):
        return False
