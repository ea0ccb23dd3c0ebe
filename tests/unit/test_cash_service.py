"""Unit tests for the cash payment record service"""

import uuid
from payment_manager.domain.exceptions import NotFoundError, ValidationError
from payment_manager.services.cash import CashPaymentService


def test_create_cash_scenario(cash_service: CashPaymentService, cash_payload):
    """Test create defaults status to received and leaves notes empty"""
    envelope = cash_service.create(cash_payload)

    assert envelope.success is True
    payment = envelope.data[0]
    assert uuid.UUID(payment["id"])
    assert payment["status"] == "received"
    assert payment["notes"] is None
    assert payment["payer"] == "Bob"
    assert payment["amount"] == 200
    assert payment["payment_date"] == "2025-02-01"
    assert payment["purpose"] == "rent"


def test_create_missing_purpose(cash_service: CashPaymentService, cash_payload):
    cash_payload["purpose"] = ""
    envelope = cash_service.create(cash_payload)

    assert isinstance(envelope.exception, ValidationError)
    assert envelope.error == "Missing required fields: purpose"
    assert cash_service.list().data == []


def test_create_rejects_cheque_status(cash_service: CashPaymentService, cash_payload):
    """Test status must come from the cash payment enum"""
    cash_payload["status"] = "cleared"
    assert isinstance(cash_service.create(cash_payload).exception, ValidationError)


def test_list_orders_by_payment_date_desc(cash_service: CashPaymentService, cash_payload):
    for payment_date in ["2025-01-15", "2025-03-01", "2025-02-10"]:
        cash_service.create({**cash_payload, "payment_date": payment_date})

    dates = [p["payment_date"] for p in cash_service.list().data]

    assert dates == ["2025-03-01", "2025-02-10", "2025-01-15"]


def test_update_notes_cleared_with_empty_string(cash_service: CashPaymentService, cash_payload):
    """Test empty notes are stored as null rather than ignored"""
    created = cash_service.create({**cash_payload, "notes": "paid at counter"}).data[0]
    assert created["notes"] == "paid at counter"

    envelope = cash_service.update(created["id"], {"notes": ""})

    assert envelope.success is True
    assert envelope.data[0]["notes"] is None


def test_update_without_notes_keeps_them(cash_service: CashPaymentService, cash_payload):
    created = cash_service.create({**cash_payload, "notes": "paid at counter"}).data[0]

    envelope = cash_service.update(created["id"], {"status": "spent", "purpose": "utilities"})

    updated = envelope.data[0]
    assert updated["notes"] == "paid at counter"
    assert updated["status"] == "spent"
    assert updated["purpose"] == "utilities"
    assert updated["payer"] == "Bob"


def test_update_nonexistent_id(cash_service: CashPaymentService):
    envelope = cash_service.update(str(uuid.uuid4()), {"purpose": "rent"})

    assert isinstance(envelope.exception, NotFoundError)
    assert envelope.error == "Cash payment not found"


def test_delete_removes_row(cash_service: CashPaymentService, cash_payload):
    created = cash_service.create(cash_payload).data[0]

    envelope = cash_service.delete(created["id"])

    assert envelope.message == "Cash payment deleted successfully"
    assert cash_service.list().data == []


def test_non_uuid_id(cash_service: CashPaymentService):
    assert cash_service.delete("42").message == "Cash payment deleted successfully"
    assert cash_service.update("42", {"purpose": "rent"}).error == "Cash payment not found"
