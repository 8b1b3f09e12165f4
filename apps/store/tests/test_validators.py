from decimal import Decimal

import pytest

from apps.store.models import generate_order_code, ORDER_CODE_ALPHABET
from apps.store.services import to_cents
from apps.store.validators import is_valid_cpf, normalize_cpf


class TestCpf:

    def test_normalize(self):
        assert normalize_cpf('529.982.247-25') == '52998224725'
        assert normalize_cpf(None) == ''

    @pytest.mark.parametrize('cpf', ['529.982.247-25', '52998224725', '111.444.777-35'])
    def test_valid(self, cpf):
        assert is_valid_cpf(cpf)

    @pytest.mark.parametrize('cpf', [
        '529.982.247-26',
        '529.982.247-15',
        '111.111.111-11',
        '123',
        '',
    ])
    def test_invalid(self, cpf):
        assert not is_valid_cpf(cpf)


class TestMoneyAndCodes:

    @pytest.mark.parametrize('amount,cents', [
        (Decimal('89.90'), 8990),
        (Decimal('5.5'), 550),
        ('0.01', 1),
        (Decimal('10'), 1000),
    ])
    def test_to_cents(self, amount, cents):
        assert to_cents(amount) == cents

    def test_order_code_format(self):
        code = generate_order_code()

        assert len(code) == 6
        assert set(code) <= set(ORDER_CODE_ALPHABET)
