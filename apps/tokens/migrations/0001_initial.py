# Generated manually for the tokens app

import uuid
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='TokenPurchase',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('package_id', models.CharField(max_length=20)),
                ('amount', models.PositiveIntegerField(validators=[MinValueValidator(1)])),
                ('price', models.PositiveIntegerField(validators=[MinValueValidator(1)])),
                ('bonus_tokens', models.PositiveIntegerField(default=0)),
                ('currency', models.CharField(default='RON', max_length=3)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='token_purchases', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'token_purchases',
                'ordering': ['created_at'],
                'indexes': [
                    models.Index(fields=['user', 'created_at'], name='token_purch_user_created_idx'),
                ],
            },
        ),
    ]
