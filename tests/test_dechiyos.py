# tests/test_dechiyos.py

import pytest
from dataclasses import replace

from luach.engines.dechiyos import (
    BETUTAKFOT,
    GATRAD,
    LO_ADU_ROSH,
    MOLAD_ZAKEN,
    DechiyosParams,
    DechiyosResolver,
)
from luach.engines.molad import MoladEngine
from luach.engines.specs import STANDARD_DECHIYOS, STANDARD_MOLAD

# Synthetic inputs: year 2 is common, year 3 is leap (so year 4 follows a leap year).
# Molad day % 7: 0=Sunday, 1=Monday, 2=Tuesday.


@pytest.fixture
def resolver():
    return DechiyosResolver(STANDARD_DECHIYOS, MoladEngine(STANDARD_MOLAD).is_leap_year)


@pytest.mark.parametrize(
    "year, day, parts, expected, rules",
    [
        (2, 2, 9923, 2, ()),
        (2, 2, 9924, 4, (GATRAD, LO_ADU_ROSH)),
        (3, 2, 9924, 2, ()),                           # GaTRaD needs a common year
        (4, 1, 16788, 1, ()),
        (4, 1, 16789, 2, (BETUTAKFOT,)),
        (2, 1, 16789, 1, ()),                          # BeTuTaKFoT needs a leap year before
        (2, 1, 19440, 2, (MOLAD_ZAKEN,)),
        (2, 2, 19440, 4, (MOLAD_ZAKEN, LO_ADU_ROSH)),  # zaken wins over GaTRaD
        (2, 0, 0, 1, (LO_ADU_ROSH,)),
        (2, 3, 0, 4, (LO_ADU_ROSH,)),
        (2, 5, 0, 6, (LO_ADU_ROSH,)),
        (2, 6, 0, 6, ()),
    ],
)
def test_resolve(resolver, year, day, parts, expected, rules):
    assert resolver.resolve(year, day, parts) == expected
    assert resolver.applied(year, day, parts) == rules


def test_at_most_two_days(resolver):
    for day in range(14):
        for parts in (0, 9924, 16789, 19440, 25919):
            for year in (2, 3, 4):
                assert 0 <= resolver.resolve(year, day, parts) - day <= 2


def test_disabled_rules():
    off = replace(STANDARD_DECHIYOS, zaken=25920, gatrad=25920, betutakfot=25920)
    r = DechiyosResolver(off, MoladEngine(STANDARD_MOLAD).is_leap_year)
    assert r.resolve(2, 1, 25919) == 1
    assert r.resolve(2, 2, 25919) == 2
    assert r.resolve(2, 0, 0) == 1


def test_params_validation():
    with pytest.raises(ValueError):
        DechiyosParams(zaken=30000)
    with pytest.raises(ValueError):
        DechiyosParams(gatrad=-1)
    with pytest.raises(ValueError):
        DechiyosParams(lo_adu=(7,))
