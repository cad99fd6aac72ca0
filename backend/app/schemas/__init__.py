from app.schemas.dashboard import (
    DashboardStatsResponse,
    ExpirationAlertResponse,
    LeaseStatusResponse,
    PropertyBalanceResponse,
)
from app.schemas.property import PropertyCreate, PropertyRecord, PropertyUpdate
from app.schemas.transaction import TransactionCreate, TransactionRecord

__all__ = [
    "PropertyCreate",
    "PropertyUpdate",
    "PropertyRecord",
    "TransactionCreate",
    "TransactionRecord",
    "DashboardStatsResponse",
    "ExpirationAlertResponse",
    "PropertyBalanceResponse",
    "LeaseStatusResponse",
]
