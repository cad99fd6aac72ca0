from pydantic import BaseModel

from app.schemas.property import PropertyRecord
from app.schemas.validators import WIRE_CONFIG


class DashboardStatsResponse(BaseModel):
    total_properties: int
    occupied_properties: int
    vacant_properties: int
    total_monthly_income: float
    total_property_value: float
    expiring_contracts: list[PropertyRecord]

    model_config = {**WIRE_CONFIG, "from_attributes": True}


class ExpirationAlertResponse(BaseModel):
    property: PropertyRecord
    days_until_expiration: int
    expiration_status: str

    model_config = {**WIRE_CONFIG, "from_attributes": True}


class PropertyBalanceResponse(BaseModel):
    property_id: str
    total_income: float
    total_expenses: float
    balance: float
    transaction_count: int

    model_config = WIRE_CONFIG


class LeaseStatusResponse(BaseModel):
    property_id: str
    end_date: str
    days_until_expiration: int | None
    expiration_status: str
    expiring_soon: bool

    model_config = {**WIRE_CONFIG, "from_attributes": True}
