"""Data access layer for payment records"""

import uuid
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from payment_manager.infrastructure.database.models import Base, CashPayment, Cheque

ModelT = TypeVar("ModelT", bound=Base)


class RecordRepository(Generic[ModelT]):
    """Keyed CRUD over one table, listing in descending date order"""

    model: Type[ModelT]
    order_column: str

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[ModelT]:
        """Fetch every row, newest date first"""
        column = getattr(self.model, self.order_column)
        return self.db.query(self.model).order_by(column.desc()).all()

    def get(self, record_id: uuid.UUID) -> Optional[ModelT]:
        return self.db.query(self.model).filter(self.model.id == record_id).first()

    def create(self, values: Dict[str, Any]) -> ModelT:
        """Insert a row; the caller commits"""
        row = self.model(**values)
        self.db.add(row)
        self.db.flush()  # Get ID without committing
        return row

    def update(self, record_id: uuid.UUID, changes: Dict[str, Any]) -> Optional[ModelT]:
        """Apply changes to the row with this id, or return None if there is none"""
        row = self.get(record_id)
        if row is None:
            return None
        for field, value in changes.items():
            setattr(row, field, value)
        self.db.flush()
        return row

    def delete(self, record_id: uuid.UUID) -> int:
        """Delete by id and return the number of rows removed"""
        return (
            self.db.query(self.model)
            .filter(self.model.id == record_id)
            .delete(synchronize_session=False)
        )


class ChequeRepository(RecordRepository[Cheque]):
    """Repository for post-dated cheques"""

    model = Cheque
    order_column = "pdc_date"


class CashPaymentRepository(RecordRepository[CashPayment]):
    """Repository for cash payments"""

    model = CashPayment
    order_column = "payment_date"
