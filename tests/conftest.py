"""Pytest fixtures for testing"""

import pytest
from typing import Any, Dict, Generator
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from payment_manager.api.main import create_app
from payment_manager.infrastructure.database.models import Base
from payment_manager.infrastructure.database.session import get_db
from payment_manager.services.cash import CashPaymentService
from payment_manager.services.cheques import ChequeService


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def app(db: Session) -> FastAPI:
    """FastAPI application wired to the test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create FastAPI test client with test database"""
    return TestClient(app)


@pytest.fixture
def cheque_service(db: Session) -> ChequeService:
    return ChequeService(db)


@pytest.fixture
def cash_service(db: Session) -> CashPaymentService:
    return CashPaymentService(db)


@pytest.fixture
def cheque_payload() -> Dict[str, Any]:
    """A complete, valid cheque"""
    return {
        "payer": "Acme",
        "amount": 500,
        "cheque_no": "CHQ1",
        "bank_name": "HDFC",
        "pdc_date": "2025-01-10",
    }


@pytest.fixture
def cash_payload() -> Dict[str, Any]:
    """A complete, valid cash payment without optional fields"""
    return {
        "payer": "Bob",
        "amount": 200,
        "payment_date": "2025-02-01",
        "purpose": "rent",
    }
