"""
Management command to prepare the database for the event.

Usage:
    python manage.py seed_event

This creates or updates:
- The event checkpoints
- The product catalogue (recreated from scratch)
- The MEETING_COUNT counter
- The staff accounts

Safe to run more than once.
"""

from decimal import Decimal

from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.checkpoints.models import Checkpoint, CheckpointCategory
from apps.meetings.models import GlobalConfig, MEETING_COUNT_KEY
from apps.people.models import Person, PersonType, Role
from apps.store.models import Product

CHECKPOINTS = [
    ('Recepção / Entrada', CheckpointCategory.GENERAL),
    ('Kombi Evangelística', CheckpointCategory.EVANGELISM),
    ('Psalms', CheckpointCategory.STORE),
    ('Salinha Kids', CheckpointCategory.KIDS),
    ('Tenda de Oração', CheckpointCategory.PRAYER),
    ('Espaço Gourmet', CheckpointCategory.STORE),
    ('Casa dos Mártires', CheckpointCategory.PRAYER),
    ('Sala Profética', CheckpointCategory.PROPHETIC),
    ('Consolidação', CheckpointCategory.CONSOLIDATION),
    ('Livraria', CheckpointCategory.STORE),
]

UNSPLASH = 'https://images.unsplash.com/photo-{}?auto=format&fit=crop&q=80&w=500'

PRODUCTS = [
    # Espaço Gourmet
    ('Água sem Gás', '3.00', 'CANTINA', '1563805042-7684c019e1cb'),
    ('Refrigerante Lata', '6.00', 'CANTINA', '1622483767028-3f66f32aef97'),
    ('Salgado Assado', '8.00', 'CANTINA', '1571091718767-18b5b1457add'),
    ('Café Expresso', '4.00', 'CANTINA', '1509042239860-f550ce710b93'),
    ('Chocolate', '5.00', 'CANTINA', '1511381978829-f011418d229d'),
    # Loja Psalms
    ('Camiseta Ekklesia 2026', '69.90', 'LOJA', '1523381210434-271e8be1f52b'),
    ('Livro: Avivamento', '45.00', 'LOJA', '1544947950-fa07a98d237f'),
    ('Boné Trucker', '50.00', 'LOJA', '1588850561407-ed78c282e89b'),
    ('Caneca Personalizada', '35.00', 'LOJA', '1514228742587-6b1558fcca3d'),
]

STAFF = [
    ('Admin Geral', 'admin@ibmg.com', 'ADMIN'),
    ('Ana Recepção', 'ana@recepcao.com', 'RECEPTION'),
    ('Marcos Gourmet', 'marcos@gourmet.com', 'CANTINA'),
    ('Luiza Loja', 'luiza@store.com', 'STORE'),
    ('Carlos Kids', 'carlos@kids.com', 'KIDS'),
    ('Paulo Evangelismo', 'paulo@rua.com', 'EVANGELISM'),
    ('Pedro Profético', 'pedro@tenda.com', 'PROPHETIC'),
    ('Sarah Consolidação', 'sarah@ficha.com', 'CONSOLIDATION'),
]


class Command(BaseCommand):
    help = 'Create checkpoints, products, counters and staff for the event'

    def add_arguments(self, parser):
        parser.add_argument(
            '--keep-products',
            action='store_true',
            help='Leave the current product catalogue untouched',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write('Seeding event data...')

        self.create_checkpoints()
        if not options['keep_products']:
            self.create_products()
        self.create_meeting_counter()
        self.create_staff()

        self.stdout.write(self.style.SUCCESS('Event data ready!'))
        self.stdout.write('')
        self.stdout.write('Staff logins (e-mail only):')
        for _, email, _ in STAFF:
            self.stdout.write(f'  {email}')

    def create_checkpoints(self):
        self.stdout.write('  Creating checkpoints...')
        for name, category in CHECKPOINTS:
            Checkpoint.objects.update_or_create(name=name, defaults={'category': category})

    def create_products(self):
        """Recreate the catalogue. Past sale items keep their prices."""
        self.stdout.write('  Recreating products...')
        Product.objects.all().delete()
        Product.objects.bulk_create([
            Product(
                name=name,
                price=Decimal(price),
                category=category,
                image_url=UNSPLASH.format(photo),
            )
            for name, price, category, photo in PRODUCTS
        ])

    def create_meeting_counter(self):
        self.stdout.write('  Ensuring meeting counter...')
        GlobalConfig.objects.get_or_create(key=MEETING_COUNT_KEY, defaults={'value': '0'})

    def create_staff(self):
        self.stdout.write('  Creating staff...')
        for name, email, department in STAFF:
            person = Person.objects.filter(email__iexact=email).first()
            if person:
                person.role = Role.STAFF
                person.department = department
                person.save(update_fields=['role', 'department'])
                continue

            Person.objects.create(
                name=name,
                email=email,
                type=PersonType.MEMBER,
                role=Role.STAFF,
                department=department,
                church=settings.DEFAULT_CHURCH,
                age=30,
            )
