"""Interfaces of the upstream services the reporting engine reads from"""

from typing import List, Protocol
from remit_reporting.domain.models import Bill, InsurancePolicy, SavingsGoal


class RemittanceSplit(Protocol):
    async def get_split(self) -> List[int]: ...

    async def calculate_split(self, total_amount: int) -> List[int]: ...


class SavingsGoals(Protocol):
    async def get_all_goals(self, owner: str) -> List[SavingsGoal]: ...

    async def is_goal_completed(self, goal_id: int) -> bool: ...


class BillPayments(Protocol):
    async def get_unpaid_bills(self, owner: str) -> List[Bill]: ...

    async def get_total_unpaid(self, owner: str) -> int: ...

    async def get_all_bills(self) -> List[Bill]: ...


class Insurance(Protocol):
    async def get_active_policies(self, owner: str) -> List[InsurancePolicy]: ...

    async def get_total_monthly_premium(self, owner: str) -> int: ...
