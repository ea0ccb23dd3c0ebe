"""Domain models - record statuses, update policy and the response envelope"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from payment_manager.domain.exceptions import DomainException


class ChequeStatus(str, Enum):
    """Lifecycle of a post-dated cheque"""

    PENDING = "pending"
    CLEARED = "cleared"
    BOUNCED = "bounced"


class CashStatus(str, Enum):
    """Lifecycle of a cash payment"""

    RECEIVED = "received"
    PENDING = "pending"
    SPENT = "spent"


class UpdatePolicy(str, Enum):
    """
    Decides which fields of a partial update are applied.

    - ignore_falsy: None, "", 0 and False count as "not supplied"
    - apply_present: every key present in the payload is applied
    """

    IGNORE_FALSY = "ignore_falsy"
    APPLY_PRESENT = "apply_present"


@dataclass
class Envelope:
    """Uniform result of every record operation"""

    success: bool
    data: Any = None
    error: Optional[str] = None
    message: Optional[str] = None
    exception: Optional[DomainException] = field(default=None, repr=False, compare=False)

    @classmethod
    def ok(cls, data: Any = None, message: Optional[str] = None) -> "Envelope":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, exc: DomainException) -> "Envelope":
        return cls(success=False, error=str(exc), exception=exc)

    def to_dict(self) -> Dict[str, Any]:
        """Wire form: keys without a value are omitted"""
        body: Dict[str, Any] = {"success": self.success}
        if self.data is not None:
            body["data"] = self.data
        if self.error is not None:
            body["error"] = self.error
        if self.message is not None:
            body["message"] = self.message
        return body
