"""Envelope to HTTP response mapping"""

from typing import Dict, Type

from fastapi.responses import JSONResponse

from payment_manager.domain.exceptions import DomainException, NotFoundError, ValidationError
from payment_manager.domain.models import Envelope

# Anything not listed (StorageError included) is a server error
ERROR_STATUS: Dict[Type[DomainException], int] = {
    ValidationError: 400,
    NotFoundError: 404,
}


def status_for(envelope: Envelope, success_status: int = 200) -> int:
    if envelope.success:
        return success_status
    return ERROR_STATUS.get(type(envelope.exception), 500)


def envelope_response(envelope: Envelope, success_status: int = 200) -> JSONResponse:
    """Serialize an Envelope with the status code its outcome maps to"""
    return JSONResponse(status_code=status_for(envelope, success_status), content=envelope.to_dict())


def error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})
