from datetime import date

import pytest

from core.services.curve_s import (
    EVMResult,
    accumulate_buckets,
    build_week_buckets,
    calculate_evm,
    interpret_evm,
)


def _curve(pv: float, ev: float):
    buckets = build_week_buckets(date(2025, 3, 3), date(2025, 3, 16))
    buckets[0].pv = pv
    buckets[1].ev = ev
    accumulate_buckets(buckets)
    return buckets


def test_no_buckets_gives_zero_filled_result():
    evm = calculate_evm([], 10000.0)

    assert evm == EVMResult(spi=None, sv=0.0, cpi=None, cv=None, pv_total=0.0, ev_total=0.0, bac=10000.0)


def test_spi_and_sv_from_final_cumulative_totals():
    evm = calculate_evm(_curve(pv=8000.0, ev=6000.0), 20000.0)

    assert evm.pv_total == 8000.0
    assert evm.ev_total == 6000.0
    assert evm.spi == pytest.approx(0.75)
    assert evm.sv == pytest.approx(-2000.0)
    assert evm.bac == 20000.0


def test_spi_is_none_exactly_when_pv_is_zero():
    evm = calculate_evm(_curve(pv=0.0, ev=2000.0), 10000.0)

    assert evm.spi is None
    assert evm.sv == pytest.approx(2000.0)


def test_cpi_and_cv_are_none_without_actual_cost():
    evm = calculate_evm(_curve(pv=1000.0, ev=1000.0), 5000.0)

    assert evm.cpi is None
    assert evm.cv is None


def test_cpi_and_cv_use_actual_cost_not_planned_value():
    evm = calculate_evm(_curve(pv=1000.0, ev=900.0), 5000.0, actual_cost=1200.0)

    assert evm.cpi == pytest.approx(0.75)
    assert evm.cv == pytest.approx(-300.0)
    assert evm.cpi != evm.spi


def test_zero_actual_cost_keeps_cpi_undefined():
    evm = calculate_evm(_curve(pv=1000.0, ev=900.0), 5000.0, actual_cost=0.0)

    assert evm.cpi is None
    assert evm.cv == pytest.approx(900.0)


def test_as_dict_uses_wire_keys():
    evm = calculate_evm(_curve(pv=100.0, ev=50.0), 1000.0)

    assert evm.as_dict() == {
        "spi": 0.5,
        "sv": -50.0,
        "cpi": None,
        "cv": None,
        "pvTotal": 100.0,
        "evTotal": 50.0,
        "bac": 1000.0,
    }


@pytest.mark.parametrize(
    "pv,ev,expected",
    [
        (1000.0, 1100.0, "Schedule: ahead or on time."),
        (1000.0, 1000.0, "Schedule: ahead or on time."),
        (1000.0, 950.0, "Schedule: slight delay."),
        (1000.0, 900.0, "Schedule: slight delay."),
        (1000.0, 850.0, "Schedule: behind (recover plan)."),
        (1000.0, 500.0, "Schedule: behind"),
        (0.0, 500.0, "SPI: not available"),
    ],
)
def test_interpretation_of_schedule_performance(pv, ev, expected):
    text = interpret_evm(calculate_evm(_curve(pv=pv, ev=ev), 100000.0))

    assert expected in text
    assert "CPI: not available" in text


def test_interpretation_warns_when_billing_exceeds_bac():
    text = interpret_evm(calculate_evm(_curve(pv=1000.0, ev=5000.0), 4000.0, actual_cost=6000.0))

    assert "Cost: over budget" in text
    assert "exceeds BAC" in text
