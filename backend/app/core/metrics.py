"""
Dashboard metrics and lease-expiration alerts.
Pure functions over a snapshot of properties; "today" can be injected for tests.
"""
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from app.schemas.property import PropertyRecord
from app.schemas.transaction import TransactionRecord

# Lease alert thresholds, in calendar days (both bounds inclusive)
CRITICAL_DAYS = 30
WARNING_DAYS = 90


@dataclass
class DashboardStats:
    total_properties: int = 0
    occupied_properties: int = 0
    vacant_properties: int = 0
    # rent of occupied properties only
    total_monthly_income: Decimal = Decimal("0")
    # every property, whatever its status
    total_property_value: Decimal = Decimal("0")
    expiring_contracts: list[PropertyRecord] = field(default_factory=list)


@dataclass
class ExpirationAlert:
    property: PropertyRecord
    days_until_expiration: int
    expiration_status: str


def days_until_expiration(end_date: str | None, today: date | None = None) -> int | float:
    """
    Signed number of calendar days from today to end_date.
    Negative once the lease has ended. An empty or unparseable date never
    expires and yields math.inf.
    """
    if not end_date:
        return math.inf
    try:
        end = date.fromisoformat(end_date)
    except (TypeError, ValueError):
        return math.inf
    return (end - (today or date.today())).days


def expiration_status(end_date: str | None, today: date | None = None) -> str:
    """Return 'expired' | 'critical' | 'warning' | 'ok'."""
    days = days_until_expiration(end_date, today)
    if days < 0:
        return "expired"
    if days <= CRITICAL_DAYS:
        return "critical"
    if days <= WARNING_DAYS:
        return "warning"
    return "ok"


@dataclass
class LeaseStatus:
    property_id: str
    end_date: str
    # None when the lease has no (readable) end date
    days_until_expiration: int | None
    expiration_status: str
    expiring_soon: bool


def is_expiring_soon(prop: PropertyRecord, today: date | None = None) -> bool:
    if prop.status != "occupied" or not prop.end_date:
        return False
    return 0 <= days_until_expiration(prop.end_date, today) <= WARNING_DAYS


def lease_status(prop: PropertyRecord, today: date | None = None) -> LeaseStatus:
    """Expiration state of one property, expired leases included."""
    today = today or date.today()
    days = days_until_expiration(prop.end_date, today)
    return LeaseStatus(
        property_id=prop.id,
        end_date=prop.end_date,
        days_until_expiration=None if math.isinf(days) else days,
        expiration_status=expiration_status(prop.end_date, today),
        expiring_soon=is_expiring_soon(prop, today),
    )


def expiring_contracts(properties: Sequence[PropertyRecord], today: date | None = None) -> list[PropertyRecord]:
    """Occupied properties whose lease ends within WARNING_DAYS, soonest first."""
    today = today or date.today()
    soon = [p for p in properties if is_expiring_soon(p, today)]
    # sorted() is stable: equal days keep their input order
    return sorted(soon, key=lambda p: days_until_expiration(p.end_date, today))


def compute_dashboard_stats(
    properties: Sequence[PropertyRecord],
    transactions: Sequence[TransactionRecord],
    today: date | None = None,
) -> DashboardStats:
    """
    Compute the dashboard summary for a snapshot.

    Maintenance properties count toward neither occupied nor vacant and add no
    income, but their value is included in total_property_value.
    Transactions are accepted for signature stability and are not aggregated.
    """
    today = today or date.today()
    occupied = [p for p in properties if p.status == "occupied"]

    stats = DashboardStats()
    stats.total_properties = len(properties)
    stats.occupied_properties = len(occupied)
    stats.vacant_properties = sum(1 for p in properties if p.status == "vacant")
    stats.total_monthly_income = sum(
        (Decimal(str(p.rent_value)) for p in occupied), Decimal("0")
    )
    stats.total_property_value = sum(
        (Decimal(str(p.property_value)) for p in properties), Decimal("0")
    )
    stats.expiring_contracts = expiring_contracts(properties, today)
    return stats


def build_expiration_alerts(
    properties: Sequence[PropertyRecord], today: date | None = None
) -> list[ExpirationAlert]:
    today = today or date.today()
    return [
        ExpirationAlert(
            property=p,
            days_until_expiration=days_until_expiration(p.end_date, today),
            expiration_status=expiration_status(p.end_date, today),
        )
        for p in expiring_contracts(properties, today)
    ]
