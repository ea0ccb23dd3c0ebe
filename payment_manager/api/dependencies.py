"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from payment_manager.config import settings
from payment_manager.infrastructure.database.session import get_db
from payment_manager.services.cash import CashPaymentService
from payment_manager.services.cheques import ChequeService


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_cheque_service(request: Request, db: Session = Depends(get_db)) -> ChequeService:
    """Provide cheque service bound to the request's session"""
    return ChequeService(db, update_policy=settings.update_policy, request_id=get_request_id(request))


def get_cash_service(request: Request, db: Session = Depends(get_db)) -> CashPaymentService:
    """Provide cash payment service bound to the request's session"""
    return CashPaymentService(db, update_policy=settings.update_policy, request_id=get_request_id(request))
