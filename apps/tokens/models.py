from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
import uuid


class TokenPurchase(models.Model):
    """Append-only ledger entry for a token package purchase."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='token_purchases'
    )
    package_id = models.CharField(max_length=20)

    amount = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    price = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    bonus_tokens = models.PositiveIntegerField(default=0)
    currency = models.CharField(max_length=3, default='RON')

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'token_purchases'
        indexes = [
            models.Index(fields=['user', 'created_at'], name='token_purch_user_created_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        bonus = f" (+{self.bonus_tokens} bonus)" if self.bonus_tokens else ""
        return f"{self.amount} tokens{bonus} for {self.price} {self.currency}"

    @property
    def total_tokens(self):
        return self.amount + self.bonus_tokens

    def save(self, *args, **kwargs):
        """Ledger entries are immutable once written."""
        if not self._state.adding:
            raise ValueError("Token purchases are immutable")
        super().save(*args, **kwargs)
