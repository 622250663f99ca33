"""Pytest fixtures for testing"""

import pytest
from dataclasses import dataclass, field
from typing import Callable, Generator, List, Optional
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from remit_reporting.api.main import create_app
from remit_reporting.api.dependencies import get_engine
from remit_reporting.domain.engine import ReportingEngine
from remit_reporting.domain.exceptions import CollaboratorError
from remit_reporting.domain.models import Bill, InsurancePolicy, SavingsGoal
from remit_reporting.infrastructure.database.models import Base
from remit_reporting.infrastructure.database.session import get_db


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

NOW = 1_700_000_000
DAY = 86_400
OWNER = "user_alice"
OTHER_OWNER = "user_bob"
ADMIN = "admin_root"


@dataclass
class FakeRemittanceSplit:
    percentages: List[int] = field(default_factory=lambda: [50, 30, 15, 5])
    amounts: Optional[List[int]] = None
    fail: bool = False
    calls: List[str] = field(default_factory=list)

    async def get_split(self) -> List[int]:
        self.calls.append("get_split")
        if self.fail:
            raise CollaboratorError("remittance_split", "HTTP 500")
        return self.percentages

    async def calculate_split(self, total_amount: int) -> List[int]:
        self.calls.append("calculate_split")
        if self.fail:
            raise CollaboratorError("remittance_split", "HTTP 500")
        if self.amounts is not None:
            return self.amounts
        return [total_amount * p // 100 for p in self.percentages]


@dataclass
class FakeSavingsGoals:
    goals: List[SavingsGoal] = field(default_factory=list)
    fail: bool = False
    calls: List[str] = field(default_factory=list)

    async def get_all_goals(self, owner: str) -> List[SavingsGoal]:
        self.calls.append("get_all_goals")
        if self.fail:
            raise CollaboratorError("savings_goals", "unreachable")
        return [g for g in self.goals if g.owner == owner]

    async def is_goal_completed(self, goal_id: int) -> bool:
        goal = next(g for g in self.goals if g.id == goal_id)
        return goal.current_amount >= goal.target_amount


@dataclass
class FakeBillPayments:
    bills: List[Bill] = field(default_factory=list)
    fail: bool = False
    calls: List[str] = field(default_factory=list)

    async def get_unpaid_bills(self, owner: str) -> List[Bill]:
        self.calls.append("get_unpaid_bills")
        if self.fail:
            raise CollaboratorError("bill_payments", "unreachable")
        return [b for b in self.bills if b.owner == owner and not b.paid]

    async def get_total_unpaid(self, owner: str) -> int:
        self.calls.append("get_total_unpaid")
        return sum(b.amount for b in self.bills if b.owner == owner and not b.paid)

    async def get_all_bills(self) -> List[Bill]:
        self.calls.append("get_all_bills")
        if self.fail:
            raise CollaboratorError("bill_payments", "unreachable")
        return list(self.bills)


@dataclass
class FakeInsurance:
    policies: List[InsurancePolicy] = field(default_factory=list)
    monthly_premium: Optional[int] = None
    fail: bool = False
    calls: List[str] = field(default_factory=list)

    async def get_active_policies(self, owner: str) -> List[InsurancePolicy]:
        self.calls.append("get_active_policies")
        if self.fail:
            raise CollaboratorError("insurance", "unreachable")
        return [p for p in self.policies if p.owner == owner and p.active]

    async def get_total_monthly_premium(self, owner: str) -> int:
        self.calls.append("get_total_monthly_premium")
        if self.fail:
            raise CollaboratorError("insurance", "unreachable")
        if self.monthly_premium is not None:
            return self.monthly_premium
        return sum(p.monthly_premium for p in self.policies if p.owner == owner and p.active)


@dataclass
class Collaborators:
    split: FakeRemittanceSplit = field(default_factory=FakeRemittanceSplit)
    savings: FakeSavingsGoals = field(default_factory=FakeSavingsGoals)
    bills: FakeBillPayments = field(default_factory=FakeBillPayments)
    insurance: FakeInsurance = field(default_factory=FakeInsurance)


@pytest.fixture
def collaborators() -> Collaborators:
    """In-memory stand-ins for the four upstream services"""
    return Collaborators()


@pytest.fixture
def reporting_engine(collaborators: Collaborators) -> ReportingEngine:
    """Engine over the fake collaborators with a frozen clock"""
    return ReportingEngine(
        remittance_split=collaborators.split,
        savings_goals=collaborators.savings,
        bill_payments=collaborators.bills,
        insurance=collaborators.insurance,
        clock=lambda: NOW,
    )


@pytest.fixture
def make_goal() -> Callable[..., SavingsGoal]:
    def _make(id: int = 1, target: int = 1000, current: int = 0, owner: str = OWNER) -> SavingsGoal:
        return SavingsGoal(
            id=id,
            owner=owner,
            name=f"Goal {id}",
            target_amount=target,
            current_amount=current,
            target_date=NOW + 180 * DAY,
            locked=False,
        )

    return _make


@pytest.fixture
def make_bill() -> Callable[..., Bill]:
    def _make(
        id: int = 1,
        amount: int = 100,
        paid: bool = False,
        due_date: int = NOW + 7 * DAY,
        created_at: int = NOW - 10 * DAY,
        owner: str = OWNER,
    ) -> Bill:
        return Bill(
            id=id,
            owner=owner,
            name=f"Bill {id}",
            amount=amount,
            due_date=due_date,
            recurring=False,
            frequency_days=0,
            paid=paid,
            created_at=created_at,
            paid_at=NOW - DAY if paid else None,
        )

    return _make


@pytest.fixture
def make_policy() -> Callable[..., InsurancePolicy]:
    def _make(
        id: int = 1,
        monthly_premium: int = 50,
        coverage: int = 10_000,
        active: bool = True,
        owner: str = OWNER,
    ) -> InsurancePolicy:
        return InsurancePolicy(
            id=id,
            owner=owner,
            name=f"Policy {id}",
            coverage_type="health",
            monthly_premium=monthly_premium,
            coverage_amount=coverage,
            active=active,
            next_payment_date=NOW + 30 * DAY,
        )

    return _make


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
def client(db: Session, reporting_engine: ReportingEngine) -> TestClient:
    """Create FastAPI test client with test database and fake collaborators"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_engine] = lambda: reporting_engine
    return TestClient(app)


@pytest.fixture
def unconfigured_client(db: Session) -> TestClient:
    """Test client that resolves collaborators from the (empty) stored configuration"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)
