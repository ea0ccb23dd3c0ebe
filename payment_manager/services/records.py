"""Record service - validates input, calls storage and wraps results in an Envelope"""

import time
import logging
import uuid
from typing import Any, Callable, Dict, Optional, Tuple, Type

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from payment_manager.domain.exceptions import DomainException, NotFoundError, StorageError, ValidationError
from payment_manager.domain.models import Envelope, UpdatePolicy
from payment_manager.domain.schemas import parse_create, parse_update
from payment_manager.infrastructure.database.repositories import RecordRepository
from payment_manager.infrastructure.observability.logging import log_operation
from payment_manager.infrastructure.observability.metrics import record_operation

logger = logging.getLogger(__name__)

OUTCOMES: Dict[Type[DomainException], str] = {
    ValidationError: "validation_error",
    NotFoundError: "not_found",
    StorageError: "storage_error",
}


def storage_message(exc: SQLAlchemyError) -> str:
    """Driver error text only; the SQL statement and parameters are never exposed"""
    source = getattr(exc, "orig", None) or exc
    lines = str(source).strip().splitlines()
    return lines[0] if lines else "Storage error"


class RecordService:
    """
    CRUD over one record type.

    Every public operation returns an Envelope and never raises: domain errors
    and storage failures are converted to `success=False` with an error message.
    Subclasses bind the repository, schemas and wording for a concrete table.
    """

    resource: str
    label: str
    repository_class: Type[RecordRepository]
    record_schema: Type[BaseModel]
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    required_fields: Tuple[str, ...]
    nullable_fields: Tuple[str, ...] = ()

    def __init__(
        self,
        db: Session,
        update_policy: UpdatePolicy = UpdatePolicy.IGNORE_FALSY,
        request_id: str = "direct",
    ):
        self.db = db
        self.repo = self.repository_class(db)
        self.update_policy = UpdatePolicy(update_policy)
        self.request_id = request_id

    # Operations

    def list(self) -> Envelope:
        """All records, newest date first"""
        return self._run("list", lambda: [self._serialize(row) for row in self.repo.list_all()])

    def get(self, record_id: Any) -> Envelope:
        return self._run("get", lambda: self._serialize(self._fetch(record_id)))

    def create(self, payload: Any) -> Envelope:
        """Insert a record; data is a one-element list holding the stored row"""

        def action():
            values = parse_create(self.create_schema, payload, self.required_fields)
            row = self.repo.create(values)
            self.db.commit()
            self.db.refresh(row)
            return [self._serialize(row)]

        return self._run("create", action)

    def update(self, record_id: Any, payload: Any) -> Envelope:
        """Apply a partial update; data is a one-element list holding the updated row"""

        def action():
            key = self._parse_id(record_id)
            changes = parse_update(self.update_schema, payload, self.update_policy, self.nullable_fields)
            row = self.repo.update(key, changes) if key is not None else None
            if row is None:
                raise NotFoundError(f"{self.label} not found")
            self.db.commit()
            self.db.refresh(row)
            return [self._serialize(row)]

        return self._run("update", action)

    def delete(self, record_id: Any) -> Envelope:
        """Remove a record; deleting an unknown id also succeeds"""

        def action():
            key = self._parse_id(record_id)
            removed = 0
            if key is not None:
                removed = self.repo.delete(key)
                self.db.commit()
            if not removed:
                logger.info(f"Delete matched no {self.resource} row", extra={"record_id": str(record_id)})

        return self._run("delete", action, message=f"{self.label} deleted successfully")

    # Helpers

    def _run(self, operation: str, action: Callable[[], Any], message: Optional[str] = None) -> Envelope:
        start_time = time.time()
        try:
            data = action()
        except SQLAlchemyError as e:
            self.db.rollback()
            exc: DomainException = StorageError(storage_message(e))
        except DomainException as e:
            self.db.rollback()
            exc = e
        else:
            self._observe(operation, "ok", start_time)
            return Envelope.ok(data, message)

        self._observe(operation, OUTCOMES.get(type(exc), "storage_error"), start_time, str(exc))
        return Envelope.fail(exc)

    def _observe(self, operation: str, outcome: str, start_time: float, error: Optional[str] = None) -> None:
        duration_ms = (time.time() - start_time) * 1000
        record_operation(self.resource, operation, outcome)
        log_operation(self.request_id, self.resource, operation, outcome, duration_ms, error)

    def _parse_id(self, record_id: Any) -> Optional[uuid.UUID]:
        """Ids are opaque to callers: one that is not a UUID cannot match any row"""
        if isinstance(record_id, uuid.UUID):
            return record_id
        try:
            return uuid.UUID(str(record_id))
        except ValueError:
            return None

    def _fetch(self, record_id: Any):
        key = self._parse_id(record_id)
        row = self.repo.get(key) if key is not None else None
        if row is None:
            raise NotFoundError(f"{self.label} not found")
        return row

    def _serialize(self, row) -> Dict[str, Any]:
        return self.record_schema.model_validate(row).model_dump(mode="json")
