"""Data access layer for stored reports, configuration singletons and events"""

from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from remit_reporting.infrastructure.database.models import (
    SINGLETON_ID,
    CollaboratorAddresses,
    ReportEventRecord,
    ReportingAdmin,
    StoredReport,
)
from remit_reporting.domain.models import ContractAddresses, FinancialHealthReport, ReportEvent


class ReportRepository:
    """Keyed store of financial health reports, one per (owner, period_key)"""

    def __init__(self, db: Session):
        self.db = db

    def store_report(self, owner: str, period_key: int, report: FinancialHealthReport) -> None:
        """Insert or overwrite the report for (owner, period_key); last write wins"""
        key = (owner, str(period_key))
        db_report = self.db.get(StoredReport, key)
        if db_report is None:
            db_report = StoredReport(owner=owner, period_key=str(period_key))
            self.db.add(db_report)
        db_report.report = report.to_dict()
        self.db.flush()

    def get_report(self, owner: str, period_key: int) -> Optional[FinancialHealthReport]:
        """Fetch a stored report, or None if nothing was stored under the key"""
        db_report = self.db.get(StoredReport, (owner, str(period_key)))
        if db_report is None:
            return None
        return FinancialHealthReport.from_dict(db_report.report)


class ConfigurationRepository:
    """Admin identity and collaborator addresses"""

    def __init__(self, db: Session):
        self.db = db

    def get_admin(self) -> Optional[str]:
        row = self.db.get(ReportingAdmin, SINGLETON_ID)
        return row.admin if row else None

    def set_admin(self, admin: str) -> None:
        self.db.add(ReportingAdmin(id=SINGLETON_ID, admin=admin))
        self.db.flush()

    def get_addresses(self) -> Optional[ContractAddresses]:
        row = self.db.get(CollaboratorAddresses, SINGLETON_ID)
        if row is None:
            return None
        return ContractAddresses(
            remittance_split=row.remittance_split,
            savings_goals=row.savings_goals,
            bill_payments=row.bill_payments,
            insurance=row.insurance,
            family_wallet=row.family_wallet,
        )

    def set_addresses(self, addresses: ContractAddresses, configured_by: str) -> None:
        """Replace the configured collaborator addresses"""
        row = self.db.get(CollaboratorAddresses, SINGLETON_ID)
        if row is None:
            row = CollaboratorAddresses(id=SINGLETON_ID)
            self.db.add(row)
        row.remittance_split = addresses.remittance_split
        row.savings_goals = addresses.savings_goals
        row.bill_payments = addresses.bill_payments
        row.insurance = addresses.insurance
        row.family_wallet = addresses.family_wallet
        row.configured_by = configured_by
        self.db.flush()


class EventRepository:
    """Outbox for reporting events"""

    def __init__(self, db: Session):
        self.db = db

    def record(self, event: ReportEvent, payload: Dict[str, Any]) -> ReportEventRecord:
        db_event = ReportEventRecord(event_type=event.value, payload=payload)
        self.db.add(db_event)
        self.db.flush()
        return db_event

    def list_events(self, event: Optional[ReportEvent] = None, limit: int = 100) -> List[ReportEventRecord]:
        query = self.db.query(ReportEventRecord)
        if event is not None:
            query = query.filter(ReportEventRecord.event_type == event.value)
        return query.order_by(ReportEventRecord.created_at.desc()).limit(limit).all()
