"""/api/cheques - post-dated cheque CRUD endpoints"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from payment_manager.api.dependencies import get_cheque_service
from payment_manager.api.v1.responses import envelope_response
from payment_manager.services.cheques import ChequeService

router = APIRouter()


@router.get("/cheques")
def list_cheques(service: ChequeService = Depends(get_cheque_service)):
    """All cheques ordered by pdc_date, latest first"""
    return envelope_response(service.list())


@router.get("/cheques/{cheque_id}")
def get_cheque(cheque_id: str, service: ChequeService = Depends(get_cheque_service)):
    return envelope_response(service.get(cheque_id))


@router.post("/cheques", status_code=201)
def create_cheque(
    payload: Optional[Dict[str, Any]] = Body(None),
    service: ChequeService = Depends(get_cheque_service),
):
    """
    Record a new cheque.

    Required: payer, amount, cheque_no, bank_name, pdc_date. Status defaults to "pending".
    """
    return envelope_response(service.create(payload), success_status=201)


@router.put("/cheques/{cheque_id}")
def update_cheque(
    cheque_id: str,
    payload: Optional[Dict[str, Any]] = Body(None),
    service: ChequeService = Depends(get_cheque_service),
):
    """Partial update; cheque_no cannot be changed"""
    return envelope_response(service.update(cheque_id, payload))


@router.delete("/cheques/{cheque_id}")
def delete_cheque(cheque_id: str, service: ChequeService = Depends(get_cheque_service)):
    return envelope_response(service.delete(cheque_id))
