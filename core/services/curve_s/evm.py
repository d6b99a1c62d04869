from __future__ import annotations

from typing import Optional

from core.services.curve_s.models import EVMResult, WeekBucket


def calculate_evm(
    buckets: list[WeekBucket],
    bac: float,
    actual_cost: Optional[float] = None,
) -> EVMResult:
    """
    Scalar earned-value indices from the final cumulative totals.

    - SPI = EV / PV, None when PV is 0.
    - SV = EV - PV.
    - CPI/CV need an actual-cost figure. Without one both are None; planned
      value is never used in its place.
    """
    pv_total = buckets[-1].pv_cumulative if buckets else 0.0
    ev_total = buckets[-1].ev_cumulative if buckets else 0.0

    spi = (ev_total / pv_total) if pv_total > 0 else None
    sv = ev_total - pv_total

    cpi: Optional[float] = None
    cv: Optional[float] = None
    if actual_cost is not None:
        ac = float(actual_cost)
        cv = ev_total - ac
        cpi = (ev_total / ac) if ac > 0 else None

    return EVMResult(
        spi=spi,
        sv=sv,
        cpi=cpi,
        cv=cv,
        pv_total=pv_total,
        ev_total=ev_total,
        bac=float(bac),
    )


def interpret_evm(evm: EVMResult) -> str:
    parts = []

    if evm.spi is None:
        parts.append("SPI: not available (no planned value yet).")
    elif evm.spi >= 1.0:
        parts.append("Schedule: ahead or on time.")
    elif evm.spi >= 0.9:
        parts.append("Schedule: slight delay.")
    else:
        parts.append("Schedule: behind (recover plan).")

    if evm.cpi is None:
        parts.append("CPI: not available (no actual cost recorded).")
    elif evm.cpi >= 1.05:
        parts.append("Cost: under budget.")
    elif evm.cpi >= 0.95:
        parts.append("Cost: roughly on budget.")
    else:
        parts.append("Cost: over budget (needs action).")

    if evm.bac > 0 and evm.ev_total > evm.bac:
        parts.append("Warning: billed value exceeds BAC. Check valorizations and contract total.")

    return " ".join(parts)


__all__ = ["calculate_evm", "interpret_evm"]
