"""Tests for the dashboard metrics and lease-expiration rules."""
import math
from datetime import date, timedelta
from decimal import Decimal

from app.core.metrics import (
    build_expiration_alerts,
    compute_dashboard_stats,
    days_until_expiration,
    expiration_status,
    lease_status,
)
from factories import make_property, make_transaction

TODAY = date(2026, 3, 10)


def _in(days: int) -> str:
    return (TODAY + timedelta(days=days)).isoformat()


class TestDaysUntilExpiration:
    def test_future_date(self):
        assert days_until_expiration(_in(15), TODAY) == 15

    def test_past_date_is_negative(self):
        assert days_until_expiration(_in(-5), TODAY) == -5

    def test_today_is_zero(self):
        assert days_until_expiration(TODAY.isoformat(), TODAY) == 0

    def test_empty_date_never_expires(self):
        assert days_until_expiration("", TODAY) == math.inf
        assert days_until_expiration(None, TODAY) == math.inf

    def test_malformed_date_fails_open(self):
        assert days_until_expiration("31/12/2026", TODAY) == math.inf
        assert days_until_expiration("2026-02-30", TODAY) == math.inf

    def test_calendar_days_across_year_end(self):
        assert days_until_expiration("2027-01-01", date(2026, 12, 31)) == 1

    def test_defaults_to_current_date(self):
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        assert days_until_expiration(tomorrow) == 1


class TestExpirationStatus:
    def test_expired(self):
        assert expiration_status(_in(-1), TODAY) == "expired"

    def test_critical_bounds(self):
        assert expiration_status(_in(0), TODAY) == "critical"
        assert expiration_status(_in(15), TODAY) == "critical"
        assert expiration_status(_in(30), TODAY) == "critical"

    def test_warning_bounds(self):
        assert expiration_status(_in(31), TODAY) == "warning"
        assert expiration_status(_in(90), TODAY) == "warning"

    def test_ok_beyond_90_days(self):
        assert expiration_status(_in(91), TODAY) == "ok"

    def test_empty_date_is_ok(self):
        assert expiration_status("", TODAY) == "ok"

    def test_malformed_date_is_ok(self):
        assert expiration_status("not-a-date", TODAY) == "ok"


class TestDashboardStats:
    def test_counts_by_status(self):
        props = [
            make_property(id="a", status="occupied"),
            make_property(id="b", status="vacant"),
            make_property(id="c", status="vacant"),
            make_property(id="d", status="maintenance"),
        ]
        stats = compute_dashboard_stats(props, [], TODAY)
        assert stats.total_properties == 4
        assert stats.occupied_properties == 1
        assert stats.vacant_properties == 2

    def test_income_only_from_occupied(self):
        props = [
            make_property(id="a", status="occupied", rent_value=1000),
            make_property(id="b", status="vacant", rent_value=2000),
        ]
        stats = compute_dashboard_stats(props, [], TODAY)
        assert stats.total_monthly_income == Decimal("1000")

    def test_maintenance_rent_excluded_but_value_included(self):
        props = [
            make_property(id="a", status="occupied", rent_value=1000, property_value=300000),
            make_property(id="b", status="maintenance", rent_value=900, property_value=200000),
            make_property(id="c", status="vacant", rent_value=800, property_value=100000),
        ]
        stats = compute_dashboard_stats(props, [], TODAY)
        assert stats.total_monthly_income == Decimal("1000")
        assert stats.total_property_value == Decimal("600000")

    def test_decimal_sums(self):
        props = [
            make_property(id="a", rent_value=1791.73),
            make_property(id="b", rent_value=0.1),
            make_property(id="c", rent_value=0.2),
        ]
        stats = compute_dashboard_stats(props, [], TODAY)
        assert stats.total_monthly_income == Decimal("1792.03")

    def test_empty_portfolio(self):
        stats = compute_dashboard_stats([], [], TODAY)
        assert stats.total_properties == 0
        assert stats.total_monthly_income == Decimal("0")
        assert stats.expiring_contracts == []

    def test_transactions_do_not_change_the_aggregate(self):
        props = [make_property(id="a", rent_value=1000)]
        txs = [make_transaction(type="expense", amount=400)]
        assert compute_dashboard_stats(props, txs, TODAY) == compute_dashboard_stats(props, [], TODAY)

    def test_idempotent(self):
        props = [
            make_property(id="a", end_date=_in(10)),
            make_property(id="b", status="vacant", end_date=_in(5)),
        ]
        assert compute_dashboard_stats(props, [], TODAY) == compute_dashboard_stats(props, [], TODAY)


class TestExpiringContracts:
    def test_lease_ending_in_15_days_is_included(self):
        prop = make_property(id="a", end_date=_in(15))
        stats = compute_dashboard_stats([prop], [], TODAY)
        assert [p.id for p in stats.expiring_contracts] == ["a"]
        assert expiration_status(prop.end_date, TODAY) == "critical"

    def test_expired_lease_is_not_included(self):
        prop = make_property(id="a", end_date=_in(-5))
        stats = compute_dashboard_stats([prop], [], TODAY)
        assert days_until_expiration(prop.end_date, TODAY) == -5
        assert expiration_status(prop.end_date, TODAY) == "expired"
        assert stats.expiring_contracts == []

    def test_window_bounds(self):
        props = [
            make_property(id="today", end_date=_in(0)),
            make_property(id="day90", end_date=_in(90)),
            make_property(id="day91", end_date=_in(91)),
        ]
        stats = compute_dashboard_stats(props, [], TODAY)
        assert [p.id for p in stats.expiring_contracts] == ["today", "day90"]

    def test_only_occupied_properties(self):
        props = [
            make_property(id="vacant", status="vacant", end_date=_in(10)),
            make_property(id="maint", status="maintenance", end_date=_in(10)),
            make_property(id="occ", status="occupied", end_date=_in(10)),
        ]
        stats = compute_dashboard_stats(props, [], TODAY)
        assert [p.id for p in stats.expiring_contracts] == ["occ"]

    def test_open_ended_and_malformed_leases_are_not_flagged(self):
        props = [
            make_property(id="open", end_date=""),
            make_property(id="bad", end_date="xx"),
        ]
        assert compute_dashboard_stats(props, [], TODAY).expiring_contracts == []

    def test_sorted_soonest_first_with_stable_ties(self):
        props = [
            make_property(id="late", end_date=_in(80)),
            make_property(id="tie-1", end_date=_in(20)),
            make_property(id="soon", end_date=_in(3)),
            make_property(id="tie-2", end_date=_in(20)),
        ]
        result = compute_dashboard_stats(props, [], TODAY).expiring_contracts
        assert [p.id for p in result] == ["soon", "tie-1", "tie-2", "late"]
        days = [days_until_expiration(p.end_date, TODAY) for p in result]
        assert days == sorted(days)

    def test_occupied_without_tenant_is_still_flagged(self):
        prop = make_property(id="a", tenant="", end_date=_in(40))
        assert len(compute_dashboard_stats([prop], [], TODAY).expiring_contracts) == 1


class TestExpirationAlerts:
    def test_alerts_carry_days_and_status(self):
        props = [
            make_property(id="warn", end_date=_in(45)),
            make_property(id="crit", end_date=_in(2)),
            make_property(id="gone", end_date=_in(-1)),
        ]
        alerts = build_expiration_alerts(props, TODAY)
        assert [(a.property.id, a.days_until_expiration, a.expiration_status) for a in alerts] == [
            ("crit", 2, "critical"),
            ("warn", 45, "warning"),
        ]


class TestLeaseStatus:
    def test_expired_lease_is_reported(self):
        status = lease_status(make_property(id="a", end_date=_in(-5)), TODAY)
        assert status.days_until_expiration == -5
        assert status.expiration_status == "expired"
        assert status.expiring_soon is False

    def test_expiring_lease(self):
        status = lease_status(make_property(id="a", end_date=_in(45)), TODAY)
        assert (status.days_until_expiration, status.expiration_status, status.expiring_soon) == (
            45,
            "warning",
            True,
        )

    def test_vacant_unit_is_never_expiring_soon(self):
        status = lease_status(make_property(id="a", status="vacant", end_date=_in(10)), TODAY)
        assert status.expiration_status == "critical"
        assert status.expiring_soon is False

    def test_open_ended_lease_has_no_day_count(self):
        status = lease_status(make_property(id="a", end_date=""), TODAY)
        assert status.days_until_expiration is None
        assert status.expiration_status == "ok"
