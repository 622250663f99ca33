"""Financial health scoring - core business logic for the composite score"""

from typing import Sequence
from remit_reporting.domain.models import Bill, HealthScore, InsurancePolicy, SavingsGoal
from remit_reporting.utils.int_math import percentage_of, sum_i128, to_u32

SAVINGS_MAX_POINTS = 40
SAVINGS_NEUTRAL_POINTS = 20
BILLS_CLEAR_POINTS = 40
BILLS_PENDING_POINTS = 35
BILLS_OVERDUE_POINTS = 20
INSURANCE_COVERED_POINTS = 20


def score_savings(goals: Sequence[SavingsGoal]) -> int:
    """
    Savings component, 0-40 points.

    - No target at all (no goals, or all zero targets): neutral 20 points
    - Progress above 100% of target: full 40 points
    - Otherwise proportional: progress * 40 / 100, truncated
    """
    total_target = sum_i128((g.target_amount for g in goals), "total_target")
    total_saved = sum_i128((g.current_amount for g in goals), "total_saved")

    if total_target <= 0:
        return SAVINGS_NEUTRAL_POINTS

    progress = percentage_of(total_saved, total_target, "savings_progress")
    if progress > 100:
        return SAVINGS_MAX_POINTS
    return (to_u32(progress, "savings_progress") * SAVINGS_MAX_POINTS) // 100


def score_bills(unpaid_bills: Sequence[Bill], now: int) -> int:
    """
    Bills component: 40 with nothing unpaid, 35 with unpaid but nothing
    overdue, 20 as soon as any unpaid bill is past due.
    """
    if not unpaid_bills:
        return BILLS_CLEAR_POINTS
    if any(b.due_date < now for b in unpaid_bills):
        return BILLS_OVERDUE_POINTS
    return BILLS_PENDING_POINTS


def score_insurance(active_policies: Sequence[InsurancePolicy]) -> int:
    """Insurance component: 20 with any active policy, else 0"""
    return INSURANCE_COVERED_POINTS if active_policies else 0


def calculate_health_score(
    goals: Sequence[SavingsGoal],
    unpaid_bills: Sequence[Bill],
    active_policies: Sequence[InsurancePolicy],
    now: int,
) -> HealthScore:
    """
    Combine the three components into the 0-100 health score.

    Weights are fixed by the component caps:
    - 40: Savings progress
    - 40: Bill payment standing
    - 20: Insurance coverage
    """
    savings_score = score_savings(goals)
    bills_score = score_bills(unpaid_bills, now)
    insurance_score = score_insurance(active_policies)

    return HealthScore(
        score=savings_score + bills_score + insurance_score,
        savings_score=savings_score,
        bills_score=bills_score,
        insurance_score=insurance_score,
    )
