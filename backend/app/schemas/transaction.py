from datetime import datetime

from pydantic import BaseModel, field_validator

from app.schemas.validators import WIRE_CONFIG, as_utc, check_iso_date

VALID_TYPES = {"income", "expense"}


def _check_amount(v):
    if v <= 0:
        raise ValueError("O valor deve ser maior que 0.")
    return v


def _check_type(v):
    if v not in VALID_TYPES:
        raise ValueError(f"Tipo inválido. Valores aceitos: {sorted(VALID_TYPES)}")
    return v


class TransactionCreate(BaseModel):
    property_id: str
    type: str
    category: str = ""
    description: str = ""
    amount: float
    date: str

    model_config = WIRE_CONFIG

    @field_validator("amount")
    @classmethod
    def positive_amount(cls, v):
        return _check_amount(v)

    @field_validator("type")
    @classmethod
    def valid_type(cls, v):
        return _check_type(v)

    @field_validator("date")
    @classmethod
    def iso_date(cls, v):
        return check_iso_date(v, allow_empty=False)


class TransactionRecord(BaseModel):
    id: str
    property_id: str
    type: str
    category: str
    description: str
    amount: float
    date: str
    created_at: datetime

    model_config = {**WIRE_CONFIG, "from_attributes": True}

    @field_validator("amount")
    @classmethod
    def positive_amount(cls, v):
        return _check_amount(v)

    @field_validator("type")
    @classmethod
    def valid_type(cls, v):
        return _check_type(v)

    @field_validator("created_at")
    @classmethod
    def utc_timestamp(cls, v):
        return as_utc(v)
