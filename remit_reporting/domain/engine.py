"""Reporting engine - pulls collaborator records and runs the report calculators"""

from dataclasses import dataclass
from typing import Optional
from remit_reporting.domain.collaborators import BillPayments, Insurance, RemittanceSplit, SavingsGoals
from remit_reporting.domain.models import (
    BillComplianceReport,
    FinancialHealthReport,
    HealthScore,
    InsuranceReport,
    RemittanceSummary,
    SavingsReport,
)
from remit_reporting.domain.reports import (
    summarize_bill_compliance,
    summarize_insurance,
    summarize_remittance,
    summarize_savings,
)
from remit_reporting.domain.scoring import calculate_health_score
from remit_reporting.utils.date_utils import Clock, ledger_timestamp


@dataclass
class ReportingEngine:
    """
    Report operations over injected collaborators and clock.

    Collaborator calls are awaited one at a time and never retried; any
    failure propagates and no partial report is produced. Each report type
    fetches its own data, so the composite report queries collaborators again
    for every section.
    """

    remittance_split: RemittanceSplit
    savings_goals: SavingsGoals
    bill_payments: BillPayments
    insurance: Insurance
    clock: Clock = ledger_timestamp

    async def get_remittance_summary(
        self, owner: str, total_amount: int, period_start: int, period_end: int
    ) -> RemittanceSummary:
        percentages = await self.remittance_split.get_split()
        amounts = await self.remittance_split.calculate_split(total_amount)
        return summarize_remittance(total_amount, percentages, amounts, period_start, period_end)

    async def get_savings_report(self, owner: str, period_start: int, period_end: int) -> SavingsReport:
        goals = await self.savings_goals.get_all_goals(owner)
        return summarize_savings(goals, period_start, period_end)

    async def get_bill_compliance_report(
        self, owner: str, period_start: int, period_end: int, now: Optional[int] = None
    ) -> BillComplianceReport:
        bills = await self.bill_payments.get_all_bills()
        now = self.clock() if now is None else now
        return summarize_bill_compliance(bills, owner, period_start, period_end, now)

    async def get_insurance_report(self, owner: str, period_start: int, period_end: int) -> InsuranceReport:
        policies = await self.insurance.get_active_policies(owner)
        monthly_premium = await self.insurance.get_total_monthly_premium(owner)
        return summarize_insurance(policies, monthly_premium, period_start, period_end)

    async def calculate_health_score(
        self, owner: str, total_remittance: int = 0, now: Optional[int] = None
    ) -> HealthScore:
        # total_remittance does not feed any component
        goals = await self.savings_goals.get_all_goals(owner)
        unpaid_bills = await self.bill_payments.get_unpaid_bills(owner)
        policies = await self.insurance.get_active_policies(owner)
        now = self.clock() if now is None else now
        return calculate_health_score(goals, unpaid_bills, policies, now)

    async def get_financial_health_report(
        self, owner: str, total_remittance: int, period_start: int, period_end: int
    ) -> FinancialHealthReport:
        """
        Main entry point: assemble every report section plus the health score.

        Flow:
        1. Health score
        2. Remittance summary
        3. Savings, bill compliance and insurance reports
        4. Stamp generation time

        The clock is read once so every section agrees on "now".
        """
        now = self.clock()
        health_score = await self.calculate_health_score(owner, total_remittance, now)
        remittance_summary = await self.get_remittance_summary(owner, total_remittance, period_start, period_end)
        savings_report = await self.get_savings_report(owner, period_start, period_end)
        bill_compliance = await self.get_bill_compliance_report(owner, period_start, period_end, now)
        insurance_report = await self.get_insurance_report(owner, period_start, period_end)

        return FinancialHealthReport(
            health_score=health_score,
            remittance_summary=remittance_summary,
            savings_report=savings_report,
            bill_compliance=bill_compliance,
            insurance_report=insurance_report,
            generated_at=now,
        )

