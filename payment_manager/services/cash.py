"""Cash payment record service"""

from payment_manager.domain.schemas import CashPaymentCreate, CashPaymentRecord, CashPaymentUpdate
from payment_manager.infrastructure.database.repositories import CashPaymentRepository
from payment_manager.services.records import RecordService


class CashPaymentService(RecordService):
    """Cash payments, listed by payment_date descending"""

    resource = "cash_payments"
    label = "Cash payment"
    repository_class = CashPaymentRepository
    record_schema = CashPaymentRecord
    create_schema = CashPaymentCreate
    update_schema = CashPaymentUpdate
    required_fields = ("payer", "amount", "payment_date", "purpose")
    # "" clears notes; an absent key leaves them untouched
    nullable_fields = ("notes",)
