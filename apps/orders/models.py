from django.conf import settings
from django.db import models
import uuid


class OrderStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    PREPARING = 'preparing', 'Preparing'
    READY = 'ready', 'Ready'
    PICKED = 'picked', 'Picked up'
    CANCELLED = 'cancelled', 'Cancelled'


class DrinkSize(models.TextChoices):
    SMALL = 'small', 'Small'
    MEDIUM = 'medium', 'Medium'
    LARGE = 'large', 'Large'


class DrinkStrength(models.TextChoices):
    LIGHT = 'light', 'Light'
    NORMAL = 'normal', 'Normal'
    STRONG = 'strong', 'Strong'


OPEN_STATUSES = (
    OrderStatus.PENDING.value,
    OrderStatus.PREPARING.value,
    OrderStatus.READY.value,
)


class Order(models.Model):
    """
    Drink order.

    ``status`` changes only through ``apps.orders.services.transition_order``.
    ``pickup_code`` is set once at creation and is unique among open orders.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='orders'
    )
    drink = models.CharField(max_length=100)

    # Options
    size = models.CharField(
        max_length=10,
        choices=DrinkSize.choices,
        default=DrinkSize.MEDIUM
    )
    ice = models.BooleanField(default=True)
    strength = models.CharField(
        max_length=10,
        choices=DrinkStrength.choices,
        null=True,
        blank=True
    )
    extras = models.JSONField(default=list, blank=True)

    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING
    )
    pickup_code = models.CharField(max_length=16, editable=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'orders'
        indexes = [
            models.Index(fields=['status', 'created_at'], name='orders_status_created_idx'),
            models.Index(fields=['user', 'created_at'], name='orders_user_created_idx'),
            models.Index(fields=['pickup_code'], name='orders_pickup_code_idx'),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['pickup_code'],
                condition=models.Q(status__in=['pending', 'preparing', 'ready']),
                name='unique_open_pickup_code',
            ),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.drink} [{self.pickup_code}] ({self.status})"

    @property
    def options(self):
        """Closed options record; ``strength`` is omitted when unset."""
        options = {
            'size': self.size,
            'ice': self.ice,
        }
        if self.strength:
            options['strength'] = self.strength
        if self.extras:
            options['extras'] = list(self.extras)
        return options
