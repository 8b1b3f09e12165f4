"""Brazilian taxpayer id (CPF) helpers."""

import re

_NON_DIGITS = re.compile(r'\D')


def normalize_cpf(cpf):
    """Keep only the digits of a CPF."""
    return _NON_DIGITS.sub('', str(cpf or ''))


def _check_digit(digits, weight_start):
    total = sum(int(d) * w for d, w in zip(digits, range(weight_start, 1, -1)))
    rest = (total * 10) % 11
    return 0 if rest == 10 else rest


def is_valid_cpf(cpf):
    """
    Validate the two CPF check digits.

    Formatting is ignored. Repeated-digit numbers like ``111.111.111-11``
    pass the arithmetic but are not valid CPFs.
    """
    digits = normalize_cpf(cpf)
    if len(digits) != 11 or len(set(digits)) == 1:
        return False

    if _check_digit(digits[:9], 10) != int(digits[9]):
        return False
    return _check_digit(digits[:10], 11) == int(digits[10])
