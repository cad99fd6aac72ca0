"""Field checks shared by the property and transaction schemas."""
import re
from datetime import date, datetime, timezone

from pydantic.alias_generators import to_camel

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# camelCase on the wire, snake_case in Python; money must be a finite number
WIRE_CONFIG = {"alias_generator": to_camel, "populate_by_name": True, "allow_inf_nan": False}


def check_iso_date(value: str, allow_empty: bool = True) -> str:
    if value == "" and allow_empty:
        return value
    if not ISO_DATE_RE.match(value):
        raise ValueError("Data inválida: use o formato AAAA-MM-DD.")
    try:
        date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"Data inexistente no calendário: {value}.") from None
    return value


def check_non_negative(value: float) -> float:
    if value < 0:
        raise ValueError("Os valores não podem ser negativos.")
    return value


def as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; they are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
