"""SQLAlchemy ORM models for stored reports and reporting configuration"""

import uuid
from sqlalchemy import Column, DateTime, Integer, Text, JSON
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()

SINGLETON_ID = 1


class StoredReport(Base):
    """Financial health report stored by its owner for a period"""

    __tablename__ = "stored_report"

    owner = Column(Text, primary_key=True)
    # Decimal string: the full u64 range does not fit a signed BIGINT
    period_key = Column(Text, primary_key=True)
    report = Column(JSON, nullable=False)
    stored_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())


class ReportingAdmin(Base):
    """Single-row table holding the admin identity"""

    __tablename__ = "reporting_admin"

    id = Column(Integer, primary_key=True, default=SINGLETON_ID)
    admin = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class CollaboratorAddresses(Base):
    """Single-row table holding the collaborator base URLs"""

    __tablename__ = "contract_addresses"

    id = Column(Integer, primary_key=True, default=SINGLETON_ID)
    remittance_split = Column(Text, nullable=False)
    savings_goals = Column(Text, nullable=False)
    bill_payments = Column(Text, nullable=False)
    insurance = Column(Text, nullable=False)
    family_wallet = Column(Text, nullable=True)
    configured_by = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())


class ReportEventRecord(Base):
    """Outbox of reporting events, written in the same transaction as the operation"""

    __tablename__ = "report_event"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    event_type = Column(Text, nullable=False, index=True)
    payload = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
