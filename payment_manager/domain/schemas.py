"""Pydantic schemas for record payload validation and serialization"""

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from payment_manager.domain.exceptions import ValidationError
from payment_manager.domain.models import CashStatus, ChequeStatus, UpdatePolicy


class _Payload(BaseModel):
    """Common config for inbound payloads: unknown keys are dropped"""

    model_config = ConfigDict(extra="ignore", use_enum_values=True, coerce_numbers_to_str=True)


class ChequeCreate(_Payload):
    """Body of a cheque create request"""

    payer: str = Field(..., min_length=1)
    amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    cheque_no: str = Field(..., min_length=1)
    bank_name: str = Field(..., min_length=1)
    pdc_date: date
    status: ChequeStatus = Field(ChequeStatus.PENDING, validate_default=True)


class ChequeUpdate(_Payload):
    """Partial cheque update; cheque_no is immutable and never accepted"""

    payer: Optional[str] = Field(None, min_length=1)
    amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    bank_name: Optional[str] = Field(None, min_length=1)
    pdc_date: Optional[date] = None
    status: Optional[ChequeStatus] = None


class CashPaymentCreate(_Payload):
    """Body of a cash payment create request"""

    payer: str = Field(..., min_length=1)
    amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    payment_date: date
    purpose: str = Field(..., min_length=1)
    notes: Optional[str] = None
    status: CashStatus = Field(CashStatus.RECEIVED, validate_default=True)


class CashPaymentUpdate(_Payload):
    """Partial cash payment update"""

    payer: Optional[str] = Field(None, min_length=1)
    amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    payment_date: Optional[date] = None
    purpose: Optional[str] = Field(None, min_length=1)
    notes: Optional[str] = None
    status: Optional[CashStatus] = None


class ChequeRecord(BaseModel):
    """Persisted cheque as returned to callers"""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    payer: str
    amount: float
    cheque_no: str
    bank_name: str
    pdc_date: date
    status: str
    created_at: Optional[datetime] = None


class CashPaymentRecord(BaseModel):
    """Persisted cash payment as returned to callers"""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    payer: str
    amount: float
    payment_date: date
    purpose: str
    notes: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _describe(exc: PydanticValidationError) -> str:
    """Flatten pydantic errors into a single human-readable line"""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "body"
        parts.append(f"Invalid {loc}: {err['msg']}")
    return "; ".join(parts)


def _validate(schema: Type[BaseModel], data: Dict[str, Any]) -> BaseModel:
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(_describe(e)) from e


def _require_mapping(payload: Any) -> Mapping[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return payload


def parse_create(
    schema: Type[BaseModel],
    payload: Any,
    required: Iterable[str],
) -> Dict[str, Any]:
    """
    Validate a create payload and return column values ready for insert.

    Raises:
        ValidationError: Required field missing/empty, or a value fails type checks
    """
    payload = _require_mapping(payload)

    missing = [name for name in required if _is_blank(payload.get(name))]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    # Blank optionals fall back to schema defaults (status) or null (notes)
    data = {
        key: value
        for key, value in payload.items()
        if key in schema.model_fields and not _is_blank(value)
    }
    return _validate(schema, data).model_dump()


def parse_update(
    schema: Type[BaseModel],
    payload: Any,
    policy: UpdatePolicy,
    nullable: Iterable[str] = (),
) -> Dict[str, Any]:
    """
    Validate a partial update and return only the fields to change.

    Fields listed in `nullable` are applied whenever present, with "" stored as None.
    Other fields follow `policy`.

    Raises:
        ValidationError: A value fails type checks, or (apply_present) a required field is emptied
    """
    payload = _require_mapping(payload)
    nullable = set(nullable)

    data: Dict[str, Any] = {}
    emptied = []
    for key, value in payload.items():
        if key not in schema.model_fields:
            continue
        if key in nullable:
            data[key] = None if _is_blank(value) else value
        elif policy is UpdatePolicy.IGNORE_FALSY:
            if value:
                data[key] = value
        elif _is_blank(value):
            emptied.append(key)
        else:
            data[key] = value

    if emptied:
        raise ValidationError(f"Required fields cannot be empty: {', '.join(emptied)}")

    return _validate(schema, data).model_dump(exclude_unset=True)
