import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.database import Base


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Property(Base):
    __tablename__ = "properties"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    unit: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    area: Mapped[float] = mapped_column(Numeric(10, 2), nullable=False, default=0)  # m², 0 = unknown
    property_value: Mapped[float] = mapped_column(Numeric(14, 2), nullable=False, default=0)
    rent_value: Mapped[float] = mapped_column(Numeric(12, 2), nullable=False, default=0)
    condo_fee: Mapped[float] = mapped_column(Numeric(12, 2), nullable=False, default=0)
    iptu: Mapped[float] = mapped_column(Numeric(12, 2), nullable=False, default=0)
    extra_fee: Mapped[float] = mapped_column(Numeric(12, 2), nullable=False, default=0)
    # entered by hand, not derived from rent minus fees
    net_value: Mapped[float] = mapped_column(Numeric(12, 2), nullable=False, default=0)
    tenant: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    # ISO YYYY-MM-DD, "" when not set
    start_date: Mapped[str] = mapped_column(String(10), nullable=False, default="")
    end_date: Mapped[str] = mapped_column(String(10), nullable=False, default="")
    due_day: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    # 'occupied' | 'vacant' | 'maintenance'
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="vacant", index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
