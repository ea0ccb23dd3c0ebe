"""Cheque record service"""

from payment_manager.domain.schemas import ChequeCreate, ChequeRecord, ChequeUpdate
from payment_manager.infrastructure.database.repositories import ChequeRepository
from payment_manager.services.records import RecordService


class ChequeService(RecordService):
    """Post-dated cheques, listed by pdc_date descending; cheque_no is fixed at creation"""

    resource = "cheques"
    label = "Cheque"
    repository_class = ChequeRepository
    record_schema = ChequeRecord
    create_schema = ChequeCreate
    update_schema = ChequeUpdate
    required_fields = ("payer", "amount", "cheque_no", "bank_name", "pdc_date")
