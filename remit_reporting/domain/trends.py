"""Period-over-period trend comparison"""

from remit_reporting.domain.models import TrendData
from remit_reporting.utils.int_math import check_i128, percentage_of, to_i32


def analyze_trend(current_amount: int, previous_amount: int) -> TrendData:
    """
    Compare an amount against the previous period.

    With no positive baseline the percentage cannot be computed, so any move
    up from zero (or below) reports exactly +100% and anything else 0%.
    """
    change_amount = check_i128(current_amount - previous_amount, "change_amount")

    if previous_amount > 0:
        change_percentage = percentage_of(change_amount, previous_amount, "change_percentage")
    elif current_amount > 0:
        change_percentage = 100
    else:
        change_percentage = 0

    return TrendData(
        current_amount=current_amount,
        previous_amount=previous_amount,
        change_amount=change_amount,
        change_percentage=to_i32(change_percentage, "change_percentage"),
    )
