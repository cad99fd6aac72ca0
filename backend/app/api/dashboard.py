"""
Dashboard API: aggregate statistics and lease-expiration alerts.
Every call reads a fresh snapshot and recomputes from scratch.
"""
from fastapi import APIRouter, Depends

from app.core.metrics import build_expiration_alerts, compute_dashboard_stats
from app.db.repository import PortfolioRepository, get_repository
from app.schemas.dashboard import DashboardStatsResponse, ExpirationAlertResponse

router = APIRouter()


@router.get("/stats", response_model=DashboardStatsResponse)
def dashboard_stats(repo: PortfolioRepository = Depends(get_repository)):
    snapshot = repo.load_snapshot()
    stats = compute_dashboard_stats(snapshot.properties, snapshot.transactions)
    return DashboardStatsResponse(
        total_properties=stats.total_properties,
        occupied_properties=stats.occupied_properties,
        vacant_properties=stats.vacant_properties,
        total_monthly_income=float(stats.total_monthly_income),
        total_property_value=float(stats.total_property_value),
        expiring_contracts=stats.expiring_contracts,
    )


@router.get("/alerts", response_model=list[ExpirationAlertResponse])
def expiration_alerts(repo: PortfolioRepository = Depends(get_repository)):
    alerts = build_expiration_alerts(repo.list_properties())
    return [ExpirationAlertResponse.model_validate(a) for a in alerts]
