from django.contrib import admin
from .models import TokenPurchase


@admin.register(TokenPurchase)
class TokenPurchaseAdmin(admin.ModelAdmin):
    """
    Read-only admin for the purchase ledger.

    Entries are append-only; they are created by the purchase service.
    """

    list_display = ['user', 'package_id', 'amount', 'bonus_tokens', 'price', 'created_at']
    list_filter = ['package_id', 'created_at']
    search_fields = ['user__email', 'user__phone', 'user__name']
    date_hierarchy = 'created_at'
    readonly_fields = [
        'id', 'user', 'package_id', 'amount', 'price',
        'bonus_tokens', 'currency', 'created_at',
    ]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
