"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, asdict
from enum import Enum, IntEnum
from typing import Any, Dict, Optional, Tuple


class Category(IntEnum):
    """Remittance allocation bucket, in the order upstream split vectors use"""

    SPENDING = 1
    SAVINGS = 2
    BILLS = 3
    INSURANCE = 4


CATEGORY_ORDER: Tuple[Category, ...] = (
    Category.SPENDING,
    Category.SAVINGS,
    Category.BILLS,
    Category.INSURANCE,
)


class ReportEvent(str, Enum):
    """Side-channel events recorded by reporting operations"""

    REPORT_GENERATED = "report_generated"
    REPORT_STORED = "report_stored"
    ADDRESSES_CONFIGURED = "addresses_configured"


# Records owned by upstream collaborators (read-only here)


@dataclass(frozen=True)
class SavingsGoal:
    id: int
    owner: str
    name: str
    target_amount: int
    current_amount: int
    target_date: int
    locked: bool


@dataclass(frozen=True)
class Bill:
    id: int
    owner: str
    name: str
    amount: int
    due_date: int
    recurring: bool
    frequency_days: int
    paid: bool
    created_at: int
    paid_at: Optional[int] = None


@dataclass(frozen=True)
class InsurancePolicy:
    id: int
    owner: str
    name: str
    coverage_type: str
    monthly_premium: int
    coverage_amount: int
    active: bool
    next_payment_date: int


@dataclass(frozen=True)
class ContractAddresses:
    """Base URLs of the collaborator services"""

    remittance_split: str
    savings_goals: str
    bill_payments: str
    insurance: str
    family_wallet: Optional[str] = None


# Report records


@dataclass(frozen=True)
class CategoryBreakdown:
    category: Category
    amount: int
    percentage: int


@dataclass(frozen=True)
class RemittanceSummary:
    total_received: int
    total_allocated: int
    category_breakdown: Tuple[CategoryBreakdown, ...]
    period_start: int
    period_end: int


@dataclass(frozen=True)
class SavingsReport:
    total_goals: int
    completed_goals: int
    total_target: int
    total_saved: int
    completion_percentage: int
    period_start: int
    period_end: int


@dataclass(frozen=True)
class BillComplianceReport:
    total_bills: int
    paid_bills: int
    unpaid_bills: int
    overdue_bills: int
    total_amount: int
    paid_amount: int
    unpaid_amount: int
    compliance_percentage: int
    period_start: int
    period_end: int


@dataclass(frozen=True)
class InsuranceReport:
    active_policies: int
    total_coverage: int
    monthly_premium: int
    annual_premium: int
    coverage_to_premium_ratio: int
    period_start: int
    period_end: int


@dataclass(frozen=True)
class HealthScore:
    """Composite 0-100 score and the sub-scores it is summed from"""

    score: int
    savings_score: int
    bills_score: int
    insurance_score: int


@dataclass(frozen=True)
class TrendData:
    current_amount: int
    previous_amount: int
    change_amount: int
    change_percentage: int


@dataclass(frozen=True)
class FinancialHealthReport:
    """Composite report assembled by a single financial health request"""

    health_score: HealthScore
    remittance_summary: RemittanceSummary
    savings_report: SavingsReport
    bill_compliance: BillComplianceReport
    insurance_report: InsuranceReport
    generated_at: int

    def to_dict(self) -> Dict[str, Any]:
        """JSON-compatible representation (categories as their integer codes)"""
        data = asdict(self)
        data["remittance_summary"]["category_breakdown"] = [
            {**entry, "category": int(entry["category"])}
            for entry in data["remittance_summary"]["category_breakdown"]
        ]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FinancialHealthReport":
        summary = dict(data["remittance_summary"])
        summary["category_breakdown"] = tuple(
            CategoryBreakdown(
                category=Category(entry["category"]),
                amount=entry["amount"],
                percentage=entry["percentage"],
            )
            for entry in summary["category_breakdown"]
        )
        return cls(
            health_score=HealthScore(**data["health_score"]),
            remittance_summary=RemittanceSummary(**summary),
            savings_report=SavingsReport(**data["savings_report"]),
            bill_compliance=BillComplianceReport(**data["bill_compliance"]),
            insurance_report=InsuranceReport(**data["insurance_report"]),
            generated_at=data["generated_at"],
        )
