from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User, OtpCode, UserRole


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for Spontan users.

    The token balance is read-only here: balances change only through
    purchases, orders and check-ins.
    """

    list_display = [
        'get_display_name',
        'phone',
        'email',
        'role_badge',
        'verified',
        'payment_verified',
        'tokens',
        'created_at',
    ]

    list_filter = [
        'role',
        'verified',
        'payment_verified',
        'is_active',
        'is_staff',
        'created_at',
    ]

    search_fields = [
        'name',
        'email',
        'phone',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'email', 'phone', 'password')
        }),
        ('Spontan', {
            'fields': ('role', 'verified', 'payment_verified', 'tokens'),
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'name', 'phone', 'role', 'password1', 'password2'),
        }),
    )

    readonly_fields = [
        'tokens',
        'created_at',
        'last_login',
    ]

    filter_horizontal = ['groups', 'user_permissions']

    def role_badge(self, obj):
        """Display role as colored badge."""
        bg = '#7C3AED' if obj.role == UserRole.BARMAN else '#2563EB'
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, obj.get_role_display()
        )
    role_badge.short_description = 'Role'
    role_badge.admin_order_field = 'role'


@admin.register(OtpCode)
class OtpCodeAdmin(admin.ModelAdmin):
    list_display = ['phone', 'expires_at', 'created_at']
    search_fields = ['phone']
    readonly_fields = ['phone', 'code', 'expires_at', 'created_at']
