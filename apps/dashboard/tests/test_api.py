from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status

from apps.checkpoints.models import Checkpoint, CheckpointCategory, ManualEntry, Movement
from apps.meetings.models import Meeting, MeetingType
from apps.people.models import Person, PersonType
from apps.store.models import Product, Sale, SaleItem, SaleStatus
from .conftest import local


@pytest.fixture
def event_data(db):
    """One event day (14/03) with counts, scans, sales and a meeting."""
    entrance = Checkpoint.objects.create(name='Recepção / Entrada', category=CheckpointCategory.GENERAL)
    kids = Checkpoint.objects.create(name='Salinha Kids', category=CheckpointCategory.KIDS)

    ManualEntry.objects.create(
        checkpoint=entrance,
        type=PersonType.MEMBER,
        quantity=5,
        gender='M',
        church='Ibmg Sede',
        timestamp=local(2026, 3, 14, 19, 0),
    )
    # Day before the requested range
    ManualEntry.objects.create(
        checkpoint=entrance,
        type=PersonType.VISITOR,
        quantity=7,
        timestamp=local(2026, 3, 13, 20, 0),
    )

    child = Person.objects.create(name='Lucas Pequeno', type=PersonType.VISITOR, age=8, gender='M')
    Movement.objects.create(person=child, checkpoint=kids, timestamp=local(2026, 3, 14, 19, 30))

    bible = Product.objects.create(name='Bíblia', price=Decimal('89.90'), category='LOJA')
    coffee = Product.objects.create(name='Café', price=Decimal('5.50'), category='CANTINA')

    paid = Sale.objects.create(
        status=SaleStatus.PAID,
        buyer_type=PersonType.VISITOR,
        total=Decimal('100.90'),
        created_at=local(2026, 3, 14, 20, 0),
    )
    SaleItem.objects.create(sale=paid, product=bible, quantity=1, price=bible.price)
    SaleItem.objects.create(sale=paid, product=coffee, quantity=2, price=coffee.price)

    delivered = Sale.objects.create(
        status=SaleStatus.DELIVERED,
        buyer_type=PersonType.MEMBER,
        total=Decimal('10.00'),
        created_at=local(2026, 3, 14, 21, 0),
    )
    # Product removed from the catalogue after the sale
    SaleItem.objects.create(sale=delivered, product=None, quantity=1, price=Decimal('10.00'))

    pending = Sale.objects.create(
        status=SaleStatus.PENDING,
        total=Decimal('89.90'),
        created_at=local(2026, 3, 14, 21, 30),
    )
    SaleItem.objects.create(sale=pending, product=bible, quantity=1, price=bible.price)

    Person.objects.create(name='Bruno Costa', marketing_source='Decisão: Aceitou')
    Meeting.objects.create(title='Alinhamento', date=local(2026, 3, 1, 19, 0), type=MeetingType.HELD)


@pytest.mark.django_db
class TestDashboard:
    """Tests for GET /api/dashboard/"""

    def _get(self, client, **params):
        params = {'start_date': '2026-03-14', 'end_date': '2026-03-14', **params}
        return client.get(reverse('dashboard:dashboard'), params)

    def test_requires_staff(self, api_client):
        response = api_client.get(reverse('dashboard:dashboard'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_attendance(self, staff_client, event_data):
        response = self._get(staff_client)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['available_days'] == ['14/03']
        assert response.data['manual_count'] == 5
        assert response.data['scanner_count'] == 1

        day = response.data['checkpoints_data']['14/03']
        assert day['Total']['total'] == 6
        assert day['Total']['gender'] == {'M': 6, 'F': 0}
        assert day['Salinha Kids']['age']['CRIANCA'] == 1
        assert day['Recepção / Entrada']['church'] == {'Ibmg Sede': 5}
        assert response.data['timeline'] == {'14/03': {19: 6}}

    def test_sales(self, staff_client, event_data):
        response = self._get(staff_client)

        sales = response.data['sales_stats']
        assert sales['total_revenue'] == Decimal('110.90')
        assert sales['by_category'] == {'LOJA': Decimal('99.90'), 'CANTINA': Decimal('11.00')}
        assert sales['demographics'] == {'MEMBER': 1, 'VISITOR': 1}

    def test_counters_and_meetings(self, staff_client, event_data):
        response = self._get(staff_client)

        assert response.data['consolidation_count'] == 1
        assert response.data['meeting_stats'] == {'realizadas': 1, 'agendadas': 0}

    def test_wider_range_includes_previous_day(self, staff_client, event_data):
        response = self._get(staff_client, start_date='2026-03-13')

        assert response.data['available_days'] == ['13/03', '14/03']
        assert response.data['manual_count'] == 12

    def test_default_window_from_settings(self, staff_client, event_data, settings):
        settings.EVENT_START = '2026-03-13'
        settings.EVENT_END = '2026-03-13'

        response = staff_client.get(reverse('dashboard:dashboard'))

        assert response.data['available_days'] == ['13/03']
        assert response.data['sales_stats']['total_revenue'] == Decimal('0.00')

    def test_invalid_range(self, staff_client):
        response = self._get(staff_client, start_date='2026-03-20')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
