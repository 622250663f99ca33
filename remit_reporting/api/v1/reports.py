"""GET /v1/reports/*, /v1/health-score, /v1/trends - report generation endpoints"""

import time
from typing import Annotated
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from remit_reporting.api.v1.schemas import (
    BillComplianceReportSchema,
    FinancialHealthReportSchema,
    HealthScoreSchema,
    InsuranceReportSchema,
    RemittanceSummarySchema,
    SavingsReportSchema,
    TrendDataSchema,
)
from remit_reporting.api.dependencies import get_engine, get_request_id
from remit_reporting.domain.engine import ReportingEngine
from remit_reporting.domain.models import ReportEvent
from remit_reporting.domain.trends import analyze_trend
from remit_reporting.infrastructure.database.repositories import EventRepository
from remit_reporting.infrastructure.database.session import get_db, unit_of_work
from remit_reporting.infrastructure.observability.logging import log_event, log_report_generated
from remit_reporting.infrastructure.observability.metrics import record_report
from remit_reporting.utils.int_math import I128_MAX, I128_MIN, U64_MAX

router = APIRouter()

Owner = Annotated[str, Query(min_length=1, description="Owner identity")]
PeriodStart = Annotated[int, Query(ge=0, le=U64_MAX, description="Period start (unix seconds)")]
PeriodEnd = Annotated[int, Query(ge=0, le=U64_MAX, description="Period end (unix seconds)")]
Amount = Annotated[int, Query(ge=I128_MIN, le=I128_MAX, description="Signed 128-bit amount")]


def _elapsed_ms(start_time: float) -> float:
    return (time.time() - start_time) * 1000


@router.get("/reports/remittance", response_model=RemittanceSummarySchema)
async def get_remittance_summary(
    request: Request,
    owner: Owner,
    total_amount: Amount,
    period_start: PeriodStart,
    period_end: PeriodEnd,
    engine: ReportingEngine = Depends(get_engine),
):
    """Split of a remittance across Spending, Savings, Bills and Insurance"""
    start_time = time.time()
    summary = await engine.get_remittance_summary(owner, total_amount, period_start, period_end)

    record_report("remittance")
    log_report_generated(get_request_id(request), owner, "remittance", _elapsed_ms(start_time))
    return RemittanceSummarySchema.model_validate(summary)


@router.get("/reports/savings", response_model=SavingsReportSchema)
async def get_savings_report(
    request: Request,
    owner: Owner,
    period_start: PeriodStart,
    period_end: PeriodEnd,
    engine: ReportingEngine = Depends(get_engine),
):
    """Savings goal progress (all goals; the period is not used as a filter)"""
    start_time = time.time()
    report = await engine.get_savings_report(owner, period_start, period_end)

    record_report("savings")
    log_report_generated(
        get_request_id(request), owner, "savings", _elapsed_ms(start_time),
        completion_percentage=report.completion_percentage,
    )
    return SavingsReportSchema.model_validate(report)


@router.get("/reports/bills", response_model=BillComplianceReportSchema)
async def get_bill_compliance_report(
    request: Request,
    owner: Owner,
    period_start: PeriodStart,
    period_end: PeriodEnd,
    engine: ReportingEngine = Depends(get_engine),
):
    """Bill payment compliance for bills created within the period"""
    start_time = time.time()
    report = await engine.get_bill_compliance_report(owner, period_start, period_end)

    record_report("bills")
    log_report_generated(
        get_request_id(request), owner, "bills", _elapsed_ms(start_time),
        compliance_percentage=report.compliance_percentage,
    )
    return BillComplianceReportSchema.model_validate(report)


@router.get("/reports/insurance", response_model=InsuranceReportSchema)
async def get_insurance_report(
    request: Request,
    owner: Owner,
    period_start: PeriodStart,
    period_end: PeriodEnd,
    engine: ReportingEngine = Depends(get_engine),
):
    """Insurance coverage over active policies (the period is not used as a filter)"""
    start_time = time.time()
    report = await engine.get_insurance_report(owner, period_start, period_end)

    record_report("insurance")
    log_report_generated(get_request_id(request), owner, "insurance", _elapsed_ms(start_time))
    return InsuranceReportSchema.model_validate(report)


@router.get("/health-score", response_model=HealthScoreSchema)
async def calculate_health_score(
    request: Request,
    owner: Owner,
    total_remittance: int = Query(0, ge=I128_MIN, le=I128_MAX),
    engine: ReportingEngine = Depends(get_engine),
):
    """0-100 financial health score with its savings, bills and insurance parts"""
    start_time = time.time()
    health_score = await engine.calculate_health_score(owner, total_remittance)

    record_report("health_score", health_score.score)
    log_report_generated(
        get_request_id(request), owner, "health_score", _elapsed_ms(start_time),
        score=health_score.score,
    )
    return HealthScoreSchema.model_validate(health_score)


@router.get("/reports/financial-health", response_model=FinancialHealthReportSchema)
async def get_financial_health_report(
    request: Request,
    owner: Owner,
    total_remittance: Amount,
    period_start: PeriodStart,
    period_end: PeriodEnd,
    db: Session = Depends(get_db),
    engine: ReportingEngine = Depends(get_engine),
):
    """
    Generate the composite financial health report.

    Flow:
    1. Build health score and every report section from collaborator data
    2. Record a report_generated event in the same transaction
    3. Return the report

    Any collaborator failure aborts the request before the event is written.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    with unit_of_work(db):
        report = await engine.get_financial_health_report(owner, total_remittance, period_start, period_end)
        payload = {"owner": owner, "generated_at": report.generated_at}
        EventRepository(db).record(ReportEvent.REPORT_GENERATED, payload)

    record_report("financial_health", report.health_score.score)
    log_event(request_id, ReportEvent.REPORT_GENERATED.value, payload)
    log_report_generated(
        request_id, owner, "financial_health", _elapsed_ms(start_time),
        score=report.health_score.score,
    )
    return FinancialHealthReportSchema.model_validate(report)


@router.get("/trends", response_model=TrendDataSchema)
def get_trend_analysis(
    owner: Owner,
    current_amount: Amount,
    previous_amount: Amount,
):
    """Change between two period amounts; needs no collaborator configuration"""
    trend = analyze_trend(current_amount, previous_amount)
    record_report("trend")
    return TrendDataSchema.model_validate(trend)
