# tests/test_diagnostics.py

import pytest

from luach.diagnostics import rosh_hashana_scatter, year_types


def test_year_type_codes():
    # 5784: Shabbos, deficient, leap; 5785: Thursday, complete, common
    assert year_types.year_type("standard", 5784) == "7DL"
    assert year_types.year_type("standard", 5785) == "5CC"


def test_fourteen_year_types():
    counts = year_types.count_types("standard", 5700, 6000)
    assert len(counts) == 14
    assert sum(counts.values()) == 301


def test_scatter_series():
    np = pytest.importorskip("numpy")
    x, y = rosh_hashana_scatter.build_series(np, "standard", 2023, 2025, festival="rosh-hashana")
    assert list(x) == [2023, 2024, 2025]
    # 2023-09-16, 2024-10-03 (leap year), 2025-09-23
    assert list(y) == [259.0, 277.0, 266.0]

    x, y = rosh_hashana_scatter.build_series(np, "standard", 2024, 2024, festival="pesach")
    assert list(y) == [114.0]  # 2024-04-23


def test_rolling_median():
    np = pytest.importorskip("numpy")
    y = np.array([1.0, 9.0, 1.0, 1.0, 9.0, 1.0, 1.0])
    out = rosh_hashana_scatter.rolling_median(np, y, win=3)
    assert list(out) == [1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0]
