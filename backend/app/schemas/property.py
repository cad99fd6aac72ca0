from datetime import datetime

from pydantic import BaseModel, field_validator

from app.schemas.validators import WIRE_CONFIG, as_utc, check_iso_date, check_non_negative

VALID_STATUSES = {"occupied", "vacant", "maintenance"}

_MONEY_FIELDS = ("area", "property_value", "rent_value", "condo_fee", "iptu", "extra_fee")


def _check_status(v):
    if v not in VALID_STATUSES:
        raise ValueError(f"Status inválido. Valores aceitos: {sorted(VALID_STATUSES)}")
    return v


def _check_due_day(v):
    if not 1 <= v <= 31:
        raise ValueError("O dia de vencimento deve estar entre 1 e 31.")
    return v


class PropertyCreate(BaseModel):
    name: str
    unit: str = ""
    area: float = 0
    property_value: float = 0
    rent_value: float = 0
    condo_fee: float = 0
    iptu: float = 0
    extra_fee: float = 0
    net_value: float = 0
    tenant: str = ""
    start_date: str = ""
    end_date: str = ""
    due_day: int = 1
    notes: str = ""
    status: str = "vacant"

    model_config = WIRE_CONFIG

    @field_validator(*_MONEY_FIELDS)
    @classmethod
    def non_negative_values(cls, v):
        return check_non_negative(v)

    @field_validator("start_date", "end_date")
    @classmethod
    def iso_dates(cls, v):
        return check_iso_date(v)

    @field_validator("due_day")
    @classmethod
    def valid_due_day(cls, v):
        return _check_due_day(v)

    @field_validator("status")
    @classmethod
    def valid_status(cls, v):
        return _check_status(v)


class PropertyUpdate(BaseModel):
    """Partial update: only the fields sent by the client are merged."""

    name: str | None = None
    unit: str | None = None
    area: float | None = None
    property_value: float | None = None
    rent_value: float | None = None
    condo_fee: float | None = None
    iptu: float | None = None
    extra_fee: float | None = None
    net_value: float | None = None
    tenant: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    due_day: int | None = None
    notes: str | None = None
    status: str | None = None

    model_config = WIRE_CONFIG

    @field_validator(*_MONEY_FIELDS)
    @classmethod
    def non_negative_values(cls, v):
        return v if v is None else check_non_negative(v)

    @field_validator("start_date", "end_date")
    @classmethod
    def iso_dates(cls, v):
        return v if v is None else check_iso_date(v)

    @field_validator("due_day")
    @classmethod
    def valid_due_day(cls, v):
        return v if v is None else _check_due_day(v)

    @field_validator("status")
    @classmethod
    def valid_status(cls, v):
        return v if v is None else _check_status(v)


class PropertyRecord(BaseModel):
    """A stored property as read back from the repository.

    Dates are not re-checked here: a malformed stored date is tolerated and
    treated as "never expires" by the metrics engine.
    """

    id: str
    name: str
    unit: str
    area: float
    property_value: float
    rent_value: float
    condo_fee: float
    iptu: float
    extra_fee: float
    net_value: float
    tenant: str
    start_date: str
    end_date: str
    due_day: int
    notes: str
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = {**WIRE_CONFIG, "from_attributes": True}

    @field_validator("status")
    @classmethod
    def valid_status(cls, v):
        return _check_status(v)

    @field_validator("created_at", "updated_at")
    @classmethod
    def utc_timestamps(cls, v):
        return as_utc(v)
