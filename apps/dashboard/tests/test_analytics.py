"""
Unit tests for the attendance aggregation.

No database: records are built by hand.
"""

import pytest

from apps.checkpoints.models import AgeGroup
from apps.dashboard.analytics import (
    AttendanceRecord,
    age_group_for,
    aggregate_attendance,
    day_sort_key,
    decision_kind,
    is_marketing_source,
)
from .conftest import local


class TestHelpers:

    @pytest.mark.parametrize('age,group', [
        (None, None),
        (4, AgeGroup.CHILD),
        (12, AgeGroup.CHILD),
        (13, AgeGroup.YOUTH),
        (29, AgeGroup.YOUTH),
        (30, AgeGroup.ADULT),
    ])
    def test_age_group_for(self, age, group):
        assert age_group_for(age) == group

    @pytest.mark.parametrize('source,kind', [
        ('ACEITOU', 'accepted'),
        ('Decisão: Aceitou Jesus', 'accepted'),
        ('RECONCILIACAO', 'reconciled'),
        ('Decisão: Reconciliação', 'reconciled'),
        ('Instagram', None),
        (None, None),
    ])
    def test_decision_kind(self, source, kind):
        assert decision_kind(source) == kind

    @pytest.mark.parametrize('source,expected', [
        ('Instagram', True),
        ('Pastor / Líder', True),
        ('VISITANTE', False),
        ('Decisão: Outro', False),
        ('ACEITOU', False),
        ('', False),
        (None, False),
    ])
    def test_is_marketing_source(self, source, expected):
        assert is_marketing_source(source) is expected

    def test_days_sort_by_month_then_day(self):
        days = ['02/04', '30/03', '31/03']
        assert sorted(days, key=day_sort_key) == ['30/03', '31/03', '02/04']


class TestAggregateAttendance:

    @pytest.fixture
    def result(self):
        records = [
            AttendanceRecord(
                timestamp=local(2026, 3, 14, 19, 10),
                checkpoint_name='Recepção / Entrada',
                type='VISITOR',
                quantity=3,
                gender='F',
                age_group='JOVEM',
                church='Ibmg Sede',
                marketing_source='Instagram',
            ),
            AttendanceRecord(
                timestamp=local(2026, 3, 14, 19, 40),
                checkpoint_name='Tenda de Oração',
                type='MEMBER',
                gender='M',
                age_group='ADULTO',
                church='Ibmg Orlando',
                is_salvation=True,
            ),
            AttendanceRecord(
                timestamp=local(2026, 3, 15, 10, 5),
                checkpoint_name=None,
                type='VISITOR',
                quantity=2,
                church='Ibmg Sede',
                marketing_source='WhatsApp',
            ),
            AttendanceRecord(
                timestamp=local(2026, 3, 15, 10, 20),
                checkpoint_name='Consolidação',
                type='VISITOR',
                marketing_source='ACEITOU',
            ),
        ]
        return aggregate_attendance(records)

    def test_days(self, result):
        assert result['available_days'] == ['14/03', '15/03']

    def test_fixed_buckets_always_present(self, result):
        day = result['checkpoints_data']['14/03']
        for bucket in ('Total', 'Kids', 'Recepcao', 'Consolidacao'):
            assert bucket in day
        assert day['Kids']['total'] == 0

    def test_day_total(self, result):
        total = result['checkpoints_data']['14/03']['Total']

        assert total['total'] == 4
        assert total['type'] == {'VISITOR': 3, 'MEMBER': 1}
        assert total['gender'] == {'M': 1, 'F': 3}
        assert total['age'] == {'CRIANCA': 0, 'JOVEM': 3, 'ADULTO': 1}
        assert total['marketing'] == {'Instagram': 3}
        assert total['church'] == {'Ibmg Sede': 3, 'Ibmg Orlando': 1}

    def test_checkpoint_bucket(self, result):
        prayer = result['checkpoints_data']['14/03']['Tenda de Oração']

        assert prayer['total'] == 1
        assert prayer['salvation'] == {'total': 1, 'M': 1, 'F': 0, 'VISITOR': 0, 'MEMBER': 1}
        assert prayer['healing']['total'] == 0

    def test_unknown_checkpoint_and_decisions(self, result):
        day = result['checkpoints_data']['15/03']

        assert day['Desconhecido']['total'] == 2
        assert day['Total']['accepted'] == 1
        assert day['Total']['reconciled'] == 0
        # Decisions are not marketing sources
        assert day['Total']['marketing'] == {'WhatsApp': 2}

    def test_timeline_by_local_hour(self, result):
        assert result['timeline'] == {'14/03': {19: 4}, '15/03': {10: 3}}

    def test_rankings(self, result):
        assert result['by_church'] == [
            {'name': 'Ibmg Sede', 'value': 5},
            {'name': 'Ibmg Orlando', 'value': 1},
        ]
        assert result['by_source'] == [{'name': 'Redes Sociais', 'value': 5}]

    def test_no_records(self):
        result = aggregate_attendance([])

        assert result['checkpoints_data'] == {}
        assert result['available_days'] == []
        assert result['by_church'] == []
