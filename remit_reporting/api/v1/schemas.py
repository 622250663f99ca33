"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, List, Optional
from remit_reporting.domain.models import Category
from remit_reporting.utils.int_math import I128_MAX, I128_MIN, I32_MAX, I32_MIN, U32_MAX, U64_MAX

# Fixed-width integer field shorthands
I128 = Annotated[int, Field(ge=I128_MIN, le=I128_MAX)]
U32 = Annotated[int, Field(ge=0, le=U32_MAX)]
U64 = Annotated[int, Field(ge=0, le=U64_MAX)]


class RecordSchema(BaseModel):
    """Base for schemas mirroring domain dataclasses"""

    model_config = ConfigDict(from_attributes=True)


class CategoryBreakdownSchema(RecordSchema):
    category: Category
    amount: I128
    percentage: U32


class RemittanceSummarySchema(RecordSchema):
    total_received: I128
    total_allocated: I128
    category_breakdown: List[CategoryBreakdownSchema] = Field(..., min_length=4, max_length=4)
    period_start: U64
    period_end: U64


class SavingsReportSchema(RecordSchema):
    total_goals: U32
    completed_goals: U32
    total_target: I128
    total_saved: I128
    completion_percentage: U32
    period_start: U64
    period_end: U64


class BillComplianceReportSchema(RecordSchema):
    total_bills: U32
    paid_bills: U32
    unpaid_bills: U32
    overdue_bills: U32
    total_amount: I128
    paid_amount: I128
    unpaid_amount: I128
    compliance_percentage: U32
    period_start: U64
    period_end: U64


class InsuranceReportSchema(RecordSchema):
    active_policies: U32
    total_coverage: I128
    monthly_premium: I128
    annual_premium: I128
    coverage_to_premium_ratio: U32
    period_start: U64
    period_end: U64


class HealthScoreSchema(RecordSchema):
    score: int = Field(..., ge=0, le=100)
    savings_score: int = Field(..., ge=0, le=40)
    bills_score: int = Field(..., ge=0, le=40)
    insurance_score: int = Field(..., ge=0, le=20)


class FinancialHealthReportSchema(RecordSchema):
    """Composite report; also the request body for storing a report"""

    health_score: HealthScoreSchema
    remittance_summary: RemittanceSummarySchema
    savings_report: SavingsReportSchema
    bill_compliance: BillComplianceReportSchema
    insurance_report: InsuranceReportSchema
    generated_at: U64


class TrendDataSchema(RecordSchema):
    current_amount: I128
    previous_amount: I128
    change_amount: I128
    change_percentage: int = Field(..., ge=I32_MIN, le=I32_MAX)


class StoreReportResponse(BaseModel):
    """Response for PUT /v1/reports/stored/{owner}/{period_key}"""

    stored: bool
    owner: str
    period_key: int


class InitRequest(BaseModel):
    """Request body for POST /v1/admin/init"""

    admin: str = Field(..., min_length=1, description="Admin identity")


class AdminResponse(BaseModel):
    admin: str


class ContractAddressesSchema(RecordSchema):
    """Collaborator base URLs; body of PUT /v1/admin/addresses"""

    remittance_split: str = Field(..., min_length=1)
    savings_goals: str = Field(..., min_length=1)
    bill_payments: str = Field(..., min_length=1)
    insurance: str = Field(..., min_length=1)
    family_wallet: Optional[str] = None
