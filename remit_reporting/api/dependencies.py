"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.orm import Session
from remit_reporting.domain.engine import ReportingEngine
from remit_reporting.domain.exceptions import ConfigurationMissingError
from remit_reporting.infrastructure.clients.bill_payments import BillPaymentsClient
from remit_reporting.infrastructure.clients.insurance import InsuranceClient
from remit_reporting.infrastructure.clients.remittance_split import RemittanceSplitClient
from remit_reporting.infrastructure.clients.savings_goals import SavingsGoalsClient
from remit_reporting.infrastructure.database.repositories import ConfigurationRepository
from remit_reporting.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_caller(x_caller_id: str | None = Header(default=None)) -> str:
    """Caller identity, already authenticated upstream of this service"""
    if not x_caller_id:
        raise HTTPException(status_code=401, detail="Missing X-Caller-Id header")
    return x_caller_id


def get_engine(db: Session = Depends(get_db)) -> ReportingEngine:
    """Provide a reporting engine wired to the configured collaborators"""
    addresses = ConfigurationRepository(db).get_addresses()
    if addresses is None:
        raise ConfigurationMissingError("Collaborator addresses not configured")

    return ReportingEngine(
        remittance_split=RemittanceSplitClient(addresses.remittance_split),
        savings_goals=SavingsGoalsClient(addresses.savings_goals),
        bill_payments=BillPaymentsClient(addresses.bill_payments),
        insurance=InsuranceClient(addresses.insurance),
    )
