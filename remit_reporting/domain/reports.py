"""Per-domain report calculators - pure reductions over collaborator records"""

from typing import List, Sequence, Tuple
from remit_reporting.domain.models import (
    CATEGORY_ORDER,
    Bill,
    BillComplianceReport,
    CategoryBreakdown,
    InsurancePolicy,
    InsuranceReport,
    RemittanceSummary,
    SavingsGoal,
    SavingsReport,
)
from remit_reporting.utils.int_math import check_i128, percentage_of, sum_i128, to_u32


def build_category_breakdown(
    percentages: Sequence[int],
    amounts: Sequence[int],
) -> Tuple[CategoryBreakdown, ...]:
    """
    Zip split percentages and amounts onto the fixed category order.

    Always returns one entry per category. A vector shorter than the category
    list contributes 0 for the missing positions; extra entries are ignored.
    """
    breakdown: List[CategoryBreakdown] = []
    for i, category in enumerate(CATEGORY_ORDER):
        breakdown.append(
            CategoryBreakdown(
                category=category,
                amount=amounts[i] if i < len(amounts) else 0,
                percentage=percentages[i] if i < len(percentages) else 0,
            )
        )
    return tuple(breakdown)


def summarize_remittance(
    total_amount: int,
    percentages: Sequence[int],
    amounts: Sequence[int],
    period_start: int,
    period_end: int,
) -> RemittanceSummary:
    """
    Build a remittance summary from the split collaborator's vectors.

    Received funds are treated as fully allocated, so total_allocated always
    equals total_received.
    """
    return RemittanceSummary(
        total_received=total_amount,
        total_allocated=total_amount,
        category_breakdown=build_category_breakdown(percentages, amounts),
        period_start=period_start,
        period_end=period_end,
    )


def summarize_savings(
    goals: Sequence[SavingsGoal],
    period_start: int,
    period_end: int,
) -> SavingsReport:
    """
    Aggregate savings goals into totals and a completion percentage.

    Every goal counts regardless of its target_date; the period is only
    echoed into the report.
    """
    total_target = sum_i128((g.target_amount for g in goals), "total_target")
    total_saved = sum_i128((g.current_amount for g in goals), "total_saved")
    completed = sum(1 for g in goals if g.current_amount >= g.target_amount)

    completion_percentage = (
        to_u32(percentage_of(total_saved, total_target), "completion_percentage")
        if total_target > 0
        else 0
    )

    return SavingsReport(
        total_goals=to_u32(len(goals), "total_goals"),
        completed_goals=completed,
        total_target=total_target,
        total_saved=total_saved,
        completion_percentage=completion_percentage,
        period_start=period_start,
        period_end=period_end,
    )


def summarize_bill_compliance(
    bills: Sequence[Bill],
    owner: str,
    period_start: int,
    period_end: int,
    now: int,
) -> BillComplianceReport:
    """
    Reduce the system-wide bill list to one owner's compliance for a period.

    Requirements:
    - Only bills owned by `owner` and created within [period_start, period_end]
    - Unpaid bills due strictly before `now` are overdue
    - No bills in scope means full (100%) compliance
    """
    in_scope = [
        b for b in bills
        if b.owner == owner and period_start <= b.created_at <= period_end
    ]
    paid = [b for b in in_scope if b.paid]
    unpaid = [b for b in in_scope if not b.paid]
    overdue_count = sum(1 for b in unpaid if b.due_date < now)

    total_bills = to_u32(len(in_scope), "total_bills")
    paid_bills = len(paid)

    compliance_percentage = (
        to_u32(paid_bills * 100, "compliance_percentage") // total_bills
        if total_bills > 0
        else 100
    )

    return BillComplianceReport(
        total_bills=total_bills,
        paid_bills=paid_bills,
        unpaid_bills=len(unpaid),
        overdue_bills=overdue_count,
        total_amount=sum_i128((b.amount for b in in_scope), "total_amount"),
        paid_amount=sum_i128((b.amount for b in paid), "paid_amount"),
        unpaid_amount=sum_i128((b.amount for b in unpaid), "unpaid_amount"),
        compliance_percentage=compliance_percentage,
        period_start=period_start,
        period_end=period_end,
    )


def summarize_insurance(
    policies: Sequence[InsurancePolicy],
    monthly_premium: int,
    period_start: int,
    period_end: int,
) -> InsuranceReport:
    """
    Aggregate active policies into total coverage and a coverage ratio.

    `monthly_premium` comes from its own collaborator call and is trusted as-is;
    it is not reconciled against the policy list.
    """
    total_coverage = sum_i128((p.coverage_amount for p in policies), "total_coverage")
    annual_premium = check_i128(monthly_premium * 12, "annual_premium")

    ratio = (
        to_u32(percentage_of(total_coverage, annual_premium), "coverage_to_premium_ratio")
        if annual_premium > 0
        else 0
    )

    return InsuranceReport(
        active_policies=to_u32(len(policies), "active_policies"),
        total_coverage=total_coverage,
        monthly_premium=monthly_premium,
        annual_premium=annual_premium,
        coverage_to_premium_ratio=ratio,
        period_start=period_start,
        period_end=period_end,
    )
