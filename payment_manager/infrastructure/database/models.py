"""SQLAlchemy ORM models matching db/schema.sql"""

import uuid
from sqlalchemy import Column, Date, DateTime, Numeric, Text, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class Cheque(Base):
    """Post-dated cheque received from a payer"""

    __tablename__ = "cheques"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    payer = Column(Text, nullable=False)
    amount = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    cheque_no = Column(Text, nullable=False)
    bank_name = Column(Text, nullable=False)
    pdc_date = Column(Date, nullable=False, index=True)
    status = Column(Text, nullable=False, default="pending")  # pending | cleared | bounced
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class CashPayment(Base):
    """Cash payment received from a payer"""

    __tablename__ = "cash_payments"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    payer = Column(Text, nullable=False)
    amount = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    payment_date = Column(Date, nullable=False, index=True)
    purpose = Column(Text, nullable=False)
    notes = Column(Text, nullable=True)
    status = Column(Text, nullable=False, default="received")  # received | pending | spent
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
