"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data [--clear]

This creates:
- 4 users (admin, asha, bilal, chen)
- 1 room owned by asha with bilal and chen as members
- A handful of shared expenses
- One settle-up by chen
"""

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User
from apps.expenses.services import add_expense, settle_up
from apps.rooms.models import Room
from apps.rooms.services import create_room, join_room


SAMPLE_EMAILS = [
    'admin@example.com',
    'asha@example.com',
    'bilal@example.com',
    'chen@example.com',
]


class Command(BaseCommand):
    help = 'Create sample data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing sample data before creating it again',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        if Room.objects.filter(owner__email='asha@example.com').exists():
            self.stdout.write(self.style.WARNING('Sample data already exists. Use --clear to recreate it.'))
            return

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        room = self.create_room(users)
        self.create_expenses(room, users)

        settlement = settle_up(room_id=room.id, user=users['chen'])
        self.stdout.write(f'  Chen settled {settlement.amount}')

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write(f'Join code: {room.join_code}')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (superuser)')
        self.stdout.write('  asha@example.com / password123 (room owner)')
        self.stdout.write('  bilal@example.com / password123')
        self.stdout.write('  chen@example.com / password123')

    def clear_data(self):
        """Remove sample users; their room and ledger cascade with them."""
        Room.objects.filter(owner__email__in=SAMPLE_EMAILS).delete()
        User.objects.filter(email__in=SAMPLE_EMAILS).delete()

    def create_users(self):
        """Create test users."""
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'name': 'Admin',
                'is_staff': True,
                'is_superuser': True,
            }
        )
        admin.set_password('admin123')
        admin.save()

        users = {'admin': admin}
        for key, name in [('asha', 'Asha'), ('bilal', 'Bilal'), ('chen', 'Chen')]:
            user, _ = User.objects.get_or_create(
                email=f'{key}@example.com',
                defaults={'name': name},
            )
            user.set_password('password123')
            user.save()
            users[key] = user

        return users

    def create_room(self, users):
        """Create the room and let the other flatmates join."""
        self.stdout.write('  Creating room...')

        room = create_room(
            owner=users['asha'],
            name='Flat 4B',
            location='Koregaon Park, Pune',
            contact='asha@example.com',
            max_members=4,
            description='Three flatmates sharing rent, groceries and bills',
        )
        join_room(user=users['bilal'], join_code=room.join_code)
        join_room(user=users['chen'], join_code=room.join_code)
        return room

    def create_expenses(self, room, users):
        """Add shared expenses from different payers."""
        self.stdout.write('  Creating expenses...')

        expenses = [
            ('asha', 'Rent deposit share', Decimal('9000.00')),
            ('bilal', 'Groceries', Decimal('1450.50')),
            ('asha', 'Electricity bill', Decimal('1320.00')),
            ('bilal', 'Wi-Fi', Decimal('799.00')),
        ]
        for payer, description, amount in expenses:
            add_expense(room=room, user=users[payer], description=description, amount=amount)
