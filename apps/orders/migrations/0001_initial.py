# Generated manually for the orders app

import uuid
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Order',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('drink', models.CharField(max_length=100)),
                ('size', models.CharField(choices=[('small', 'Small'), ('medium', 'Medium'), ('large', 'Large')], default='medium', max_length=10)),
                ('ice', models.BooleanField(default=True)),
                ('strength', models.CharField(blank=True, choices=[('light', 'Light'), ('normal', 'Normal'), ('strong', 'Strong')], max_length=10, null=True)),
                ('extras', models.JSONField(blank=True, default=list)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('preparing', 'Preparing'), ('ready', 'Ready'), ('picked', 'Picked up'), ('cancelled', 'Cancelled')], default='pending', max_length=20)),
                ('pickup_code', models.CharField(editable=False, max_length=16)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='orders', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'orders',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status', 'created_at'], name='orders_status_created_idx'),
                    models.Index(fields=['user', 'created_at'], name='orders_user_created_idx'),
                    models.Index(fields=['pickup_code'], name='orders_pickup_code_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(condition=models.Q(status__in=['pending', 'preparing', 'ready']), fields=('pickup_code',), name='unique_open_pickup_code'),
                ],
            },
        ),
    ]
