"""
Management command to clear the event counts before going live.

Usage:
    python manage.py reset_counts
    python manage.py reset_counts --no-input

This deletes:
- Manual headcounts
- Sale items and sales
- Visitors (people with type VISITOR)

Meetings, products, checkpoints, members and staff are kept.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.checkpoints.models import ManualEntry
from apps.people.models import Person, PersonType
from apps.store.models import Sale, SaleItem


class Command(BaseCommand):
    help = 'Delete manual counts, sales and visitors (keeps meetings and products)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--no-input',
            action='store_true',
            help='Do not ask for confirmation',
        )

    def handle(self, *args, **options):
        if not options['no_input']:
            answer = input('This deletes counts, sales and visitors. Type "yes" to continue: ')
            if answer.strip().lower() != 'yes':
                self.stdout.write(self.style.WARNING('Aborted.'))
                return

        self.reset()
        self.stdout.write(self.style.SUCCESS('Counts reset. Meetings and products were kept.'))

    @transaction.atomic
    def reset(self):
        deleted, _ = ManualEntry.objects.all().delete()
        self.stdout.write(f'  Manual counts deleted: {deleted}')

        SaleItem.objects.all().delete()
        deleted, _ = Sale.objects.all().delete()
        self.stdout.write(f'  Sales deleted: {deleted}')

        deleted, _ = Person.objects.filter(type=PersonType.VISITOR).delete()
        self.stdout.write(f'  Visitors removed (with their scans): {deleted}')
