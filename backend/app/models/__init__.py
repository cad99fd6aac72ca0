from app.models.property import Property
from app.models.transaction import Transaction

__all__ = ["Property", "Transaction"]
