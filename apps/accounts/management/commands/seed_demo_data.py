"""
Management command to create demo data for trying the API.

Usage:
    python manage.py seed_demo_data [--client-package ID] [--clear]

This creates:
- the demo barman (Alex Barman)
- a demo client, credited one token package on first run
- the demo event reachable through its entrance QR code
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User, UserRole
from apps.events.models import Event
from apps.tokens.services import credit, list_packages

DEMO_BARMAN = {
    'name': 'Alex Barman',
    'email': 'barman@spontan.app',
    'phone': '0700000000',
}

DEMO_CLIENT = {
    'name': 'Demo Client',
    'email': 'client@spontan.app',
    'phone': '0711111111',
}

DEMO_EVENT = {
    'name': 'Summer Vibes Party @ Club Spontan',
    'qr_code': 'EVT-SUMMER-VIBES',
}


class Command(BaseCommand):
    help = 'Create demo barman, client and event'

    def add_arguments(self, parser):
        parser.add_argument(
            '--client-package',
            default='50',
            choices=[package.id for package in list_packages()],
            help='Token package credited to a newly created demo client',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write('Creating demo data...')

        barman = self.create_user(DEMO_BARMAN, role=UserRole.BARMAN)
        client = self.create_user(DEMO_CLIENT, role=UserRole.CLIENT)

        if client.tokens == 0:
            purchase = credit(user_id=client.id, package_id=options['client_package'])
            self.stdout.write(f'  Credited {purchase.total_tokens} tokens to {client.name}')

        event, _ = Event.objects.update_or_create(
            qr_code=DEMO_EVENT['qr_code'],
            defaults={'name': DEMO_EVENT['name'], 'is_active': True},
        )

        self.stdout.write(self.style.SUCCESS('Demo data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Demo accounts (log in with phone + OTP, code is logged at DEBUG):')
        self.stdout.write(f'  {barman.phone} ({barman.name}, barman)')
        self.stdout.write(f'  {client.phone} ({client.name}, client)')
        self.stdout.write(f'Demo event QR code: {event.qr_code}')

    def create_user(self, data, role):
        user, created = User.objects.get_or_create(
            phone=data['phone'],
            defaults={
                'name': data['name'],
                'email': data['email'],
                'role': role,
                'verified': True,
            }
        )
        if created:
            self.stdout.write(f'  Created {user.name}')
        return user
