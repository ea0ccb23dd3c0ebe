"""/api/cash - cash payment CRUD endpoints"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from payment_manager.api.dependencies import get_cash_service
from payment_manager.api.v1.responses import envelope_response
from payment_manager.services.cash import CashPaymentService

router = APIRouter()


@router.get("/cash")
def list_cash_payments(service: CashPaymentService = Depends(get_cash_service)):
    """All cash payments ordered by payment_date, latest first"""
    return envelope_response(service.list())


@router.get("/cash/{payment_id}")
def get_cash_payment(payment_id: str, service: CashPaymentService = Depends(get_cash_service)):
    return envelope_response(service.get(payment_id))


@router.post("/cash", status_code=201)
def create_cash_payment(
    payload: Optional[Dict[str, Any]] = Body(None),
    service: CashPaymentService = Depends(get_cash_service),
):
    """
    Record a new cash payment.

    Required: payer, amount, payment_date, purpose. Status defaults to "received".
    """
    return envelope_response(service.create(payload), success_status=201)


@router.put("/cash/{payment_id}")
def update_cash_payment(
    payment_id: str,
    payload: Optional[Dict[str, Any]] = Body(None),
    service: CashPaymentService = Depends(get_cash_service),
):
    """Partial update; an empty notes value clears the notes"""
    return envelope_response(service.update(payment_id, payload))


@router.delete("/cash/{payment_id}")
def delete_cash_payment(payment_id: str, service: CashPaymentService = Depends(get_cash_service)):
    return envelope_response(service.delete(payment_id))
