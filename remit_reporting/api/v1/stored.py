"""/v1/reports/stored/{owner}/{period_key} - report store"""

from typing import Annotated
from fastapi import APIRouter, Depends, HTTPException, Path, Request
from sqlalchemy.orm import Session

from remit_reporting.api.v1.schemas import FinancialHealthReportSchema, StoreReportResponse
from remit_reporting.api.dependencies import get_caller, get_request_id
from remit_reporting.domain.access import require_caller
from remit_reporting.domain.models import FinancialHealthReport, ReportEvent
from remit_reporting.infrastructure.database.repositories import EventRepository, ReportRepository
from remit_reporting.infrastructure.database.session import get_db, unit_of_work
from remit_reporting.infrastructure.observability.logging import log_event
from remit_reporting.infrastructure.observability.metrics import stored_report_counter
from remit_reporting.utils.int_math import U64_MAX

router = APIRouter()

PeriodKey = Annotated[int, Path(ge=0, le=U64_MAX, description="Opaque reporting period key")]


@router.put("/reports/stored/{owner}/{period_key}", response_model=StoreReportResponse)
def store_report(
    owner: str,
    period_key: PeriodKey,
    request_body: FinancialHealthReportSchema,
    request: Request,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db),
):
    """
    Store a report for (owner, period_key); owner only.

    Overwrites whatever was stored under the same key. No merge, no history.
    """
    require_caller(caller, owner, "store reports for this owner")
    report = FinancialHealthReport.from_dict(request_body.model_dump())

    with unit_of_work(db):
        ReportRepository(db).store_report(owner, period_key, report)
        payload = {"owner": owner, "period_key": period_key}
        EventRepository(db).record(ReportEvent.REPORT_STORED, payload)

    stored_report_counter.inc()
    log_event(get_request_id(request), ReportEvent.REPORT_STORED.value, payload)
    return StoreReportResponse(stored=True, owner=owner, period_key=period_key)


@router.get("/reports/stored/{owner}/{period_key}", response_model=FinancialHealthReportSchema)
def get_stored_report(owner: str, period_key: PeriodKey, db: Session = Depends(get_db)):
    """Fetch a stored report; 404 when nothing was stored under the key"""
    report = ReportRepository(db).get_report(owner, period_key)
    if report is None:
        raise HTTPException(status_code=404, detail="Report not found")
    return FinancialHealthReportSchema.model_validate(report)
