from django.db import models
import uuid


class Event(models.Model):
    """Venue event reachable through the QR code printed at the entrance."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    qr_code = models.CharField(max_length=100, unique=True)
    is_active = models.BooleanField(default=True)
    starts_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'events'
        ordering = ['-created_at']

    def __str__(self):
        return self.name


class CheckIn(models.Model):
    """A paid entry of a user into an event."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.PROTECT, related_name='check_ins')
    event = models.ForeignKey(Event, on_delete=models.PROTECT, related_name='check_ins')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'event_check_ins'
        unique_together = [['user', 'event']]
        indexes = [
            models.Index(fields=['event', 'created_at'], name='checkins_event_created_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.user.get_display_name()} at {self.event.name}"
