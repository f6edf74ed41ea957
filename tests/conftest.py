"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timedelta
from typing import Callable, Generator, List
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from liquidity_gateway.api.main import create_app
from liquidity_gateway.infrastructure.database.models import Base
from liquidity_gateway.infrastructure.database.session import get_db
from liquidity_gateway.domain.models import Account, ExpenseTransaction, ARAPItem
from liquidity_gateway.domain.exceptions import DataGatewayError
from liquidity_gateway.utils.numeric import to_float


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Fixed reference time for deterministic month labels and lookback windows
FIXED_NOW = datetime(2026, 10, 17, 12, 0, 0)


class InMemoryGateway:
    """DataGateway fake holding a single user's ledger snapshot"""

    def __init__(
        self,
        accounts: List[Account] | None = None,
        transactions: List[ExpenseTransaction] | None = None,
        items: List[ARAPItem] | None = None,
    ):
        self.accounts = accounts or []
        self.transactions = transactions or []
        self.items = items or []
        self.calls: List[str] = []

    async def list_accounts(self, user_id: str) -> List[Account]:
        self.calls.append("accounts")
        return list(self.accounts)

    async def list_expense_transactions(self, user_id: str, since: datetime) -> List[ExpenseTransaction]:
        self.calls.append("transactions")
        return [t for t in self.transactions if t.occurred_at >= since and to_float(t.amount) <= 0]

    async def list_arap_items(self, user_id: str, kind: str) -> List[ARAPItem]:
        self.calls.append(kind)
        return [item for item in self.items if item.kind == kind]


class FailingGateway:
    """DataGateway fake whose every read fails"""

    async def list_accounts(self, user_id: str) -> List[Account]:
        raise DataGatewayError("connection refused")

    async def list_expense_transactions(self, user_id: str, since: datetime) -> List[ExpenseTransaction]:
        raise DataGatewayError("connection refused")

    async def list_arap_items(self, user_id: str, kind: str) -> List[ARAPItem]:
        raise DataGatewayError("connection refused")


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def make_gateway() -> Callable[..., InMemoryGateway]:
    """Factory for in-memory gateways"""
    return InMemoryGateway


@pytest.fixture
def failing_gateway() -> FailingGateway:
    return FailingGateway()


@pytest.fixture
def monthly_expenses() -> Callable[..., List[ExpenseTransaction]]:
    """Build one outflow per month, each inside the trailing 6-month window"""

    def build(amount: float, months: int = 6, now: datetime = FIXED_NOW) -> List[ExpenseTransaction]:
        return [
            ExpenseTransaction(amount=-abs(amount), occurred_at=now - timedelta(days=30 * i + 1))
            for i in range(months)
        ]

    return build


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
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)
