from __future__ import annotations

from enum import Enum


class ScheduleType(str, Enum):
    COMMERCIAL = "commercial"
    PLANNING = "planning"
    EXECUTION = "execution"


class ResourceType(str, Enum):
    INDIVIDUAL = "individual"
    CREW = "crew"


class ValorizationStatus(str, Enum):
    DRAFT = "draft"
    SENT = "sent"
    OBSERVED = "observed"
    CORRECTED = "corrected"
    CLIENT_APPROVED = "client_approved"
    INVOICED = "invoiced"
    PAID = "paid"
    CANCELLED = "cancelled"


# Billing states that count as earned value on the S-curve.
RECOGNIZED_VALORIZATION_STATUSES = frozenset(
    {
        ValorizationStatus.CLIENT_APPROVED,
        ValorizationStatus.INVOICED,
        ValorizationStatus.PAID,
    }
)


__all__ = [
    "ScheduleType",
    "ResourceType",
    "ValorizationStatus",
    "RECOGNIZED_VALORIZATION_STATUSES",
]
