from django.contrib import admin
from .models import Event, CheckIn


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ['name', 'qr_code', 'is_active', 'starts_at', 'check_in_count']
    list_filter = ['is_active', 'starts_at']
    search_fields = ['name', 'qr_code']

    def check_in_count(self, obj):
        return obj.check_ins.count()
    check_in_count.short_description = 'Check-ins'


@admin.register(CheckIn)
class CheckInAdmin(admin.ModelAdmin):
    list_display = ['user', 'event', 'created_at']
    list_filter = ['event']
    search_fields = ['user__name', 'user__phone', 'event__name']
    readonly_fields = ['user', 'event', 'created_at']

    def has_add_permission(self, request):
        return False
