"""
Storage access for properties and transactions.

One repository wraps one SQLAlchemy session. Rows are validated into
pydantic records on the way out; not-found is reported as None/False and
storage failures as StorageError.
"""
from collections.abc import Iterable
from dataclasses import dataclass, field

from fastapi import Depends
from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.database import get_db
from app.exceptions import StorageError
from app.logging import get_logger
from app.models.property import Property, utcnow
from app.models.transaction import Transaction
from app.schemas.property import PropertyCreate, PropertyRecord, PropertyUpdate
from app.schemas.transaction import TransactionCreate, TransactionRecord

logger = get_logger(__name__)


@dataclass
class Snapshot:
    """Everything a dashboard render needs, read in one go."""

    properties: list[PropertyRecord] = field(default_factory=list)
    transactions: list[TransactionRecord] = field(default_factory=list)


def _to_records(rows: Iterable, schema: type[BaseModel]) -> list:
    records = []
    for row in rows:
        try:
            records.append(schema.model_validate(row))
        except ValidationError as e:
            logger.warning(
                "Skipping malformed %s row %s: %s", schema.__name__, row.id, e.errors()
            )
    return records


class PortfolioRepository:
    def __init__(self, db: Session):
        self.db = db

    def _fail(self, action: str) -> StorageError:
        self.db.rollback()
        logger.exception("Storage failure while trying to %s", action)
        return StorageError(f"Could not {action}")

    def _commit(self, action: str, *refresh) -> None:
        """Commit, then reload the given instances; both steps fail as StorageError."""
        try:
            self.db.commit()
            for instance in refresh:
                self.db.refresh(instance)
        except SQLAlchemyError as e:
            raise self._fail(action) from e

    def _fetch(self, action: str, query) -> list:
        try:
            return query.all()
        except SQLAlchemyError as e:
            raise self._fail(action) from e

    # Properties

    def list_properties(self) -> list[PropertyRecord]:
        rows = self._fetch(
            "list properties", self.db.query(Property).order_by(Property.created_at)
        )
        return _to_records(rows, PropertyRecord)

    def _get_property_row(self, property_id: str) -> Property | None:
        rows = self._fetch(
            "read property", self.db.query(Property).filter(Property.id == property_id)
        )
        return rows[0] if rows else None

    def get_property(self, property_id: str) -> PropertyRecord | None:
        prop = self._get_property_row(property_id)
        if not prop:
            return None
        records = _to_records([prop], PropertyRecord)
        return records[0] if records else None

    def create_property(self, data: PropertyCreate) -> PropertyRecord:
        now = utcnow()
        prop = Property(**data.model_dump(), created_at=now, updated_at=now)
        self.db.add(prop)
        self._commit("create property", prop)
        logger.info("Created property %s (%s %s)", prop.id, prop.name, prop.unit)
        return PropertyRecord.model_validate(prop)

    def patch_property(self, property_id: str, data: PropertyUpdate) -> PropertyRecord | None:
        prop = self._get_property_row(property_id)
        if not prop:
            return None
        changes = data.model_dump(exclude_none=True)
        for name, value in changes.items():
            setattr(prop, name, value)
        prop.updated_at = utcnow()
        self._commit("update property", prop)
        logger.info("Updated property %s: %s", property_id, sorted(changes))
        # a stored row that is still malformed after the merge reads as missing, like get_property
        records = _to_records([prop], PropertyRecord)
        return records[0] if records else None

    def delete_property(self, property_id: str) -> bool:
        """Delete a property and every transaction that references it, in one commit."""
        prop = self._get_property_row(property_id)
        if not prop:
            return False
        try:
            removed = (
                self.db.query(Transaction)
                .filter(Transaction.property_id == property_id)
                .delete(synchronize_session=False)
            )
            self.db.delete(prop)
        except SQLAlchemyError as e:
            raise self._fail("delete property") from e
        self._commit("delete property")
        logger.info("Deleted property %s and %d transaction(s)", property_id, removed)
        return True

    # Transactions

    def list_transactions(self, property_id: str | None = None) -> list[TransactionRecord]:
        q = self.db.query(Transaction)
        if property_id:
            q = q.filter(Transaction.property_id == property_id)
        q = q.order_by(Transaction.date.desc(), Transaction.created_at.desc())
        return _to_records(self._fetch("list transactions", q), TransactionRecord)

    def create_transaction(self, data: TransactionCreate) -> TransactionRecord:
        tx = Transaction(**data.model_dump(), created_at=utcnow())
        self.db.add(tx)
        self._commit("create transaction", tx)
        logger.info(
            "Created %s transaction %s for property %s", tx.type, tx.id, tx.property_id
        )
        return TransactionRecord.model_validate(tx)

    def delete_transaction(self, transaction_id: str) -> bool:
        rows = self._fetch(
            "read transaction",
            self.db.query(Transaction).filter(Transaction.id == transaction_id),
        )
        if not rows:
            return False
        self.db.delete(rows[0])
        self._commit("delete transaction")
        logger.info("Deleted transaction %s", transaction_id)
        return True

    def load_snapshot(self) -> Snapshot:
        return Snapshot(properties=self.list_properties(), transactions=self.list_transactions())


def get_repository(db: Session = Depends(get_db)) -> PortfolioRepository:
    return PortfolioRepository(db)
