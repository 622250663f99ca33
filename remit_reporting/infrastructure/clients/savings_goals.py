"""Savings goal tracker client"""

from typing import List
from remit_reporting.domain.models import SavingsGoal
from remit_reporting.infrastructure.clients.base import CollaboratorClient


class SavingsGoalsClient(CollaboratorClient):
    """Client for the savings goal tracker"""

    collaborator = "savings_goals"

    async def get_all_goals(self, owner: str) -> List[SavingsGoal]:
        data = await self._get("/goals", params={"owner": owner})
        try:
            return [
                SavingsGoal(
                    id=goal["id"],
                    owner=goal["owner"],
                    name=goal["name"],
                    target_amount=int(goal["target_amount"]),
                    current_amount=int(goal["current_amount"]),
                    target_date=int(goal["target_date"]),
                    locked=goal["locked"],
                )
                for goal in data.get("goals", [])
            ]
        except (KeyError, ValueError, TypeError) as e:
            raise self._invalid(e) from e

    async def is_goal_completed(self, goal_id: int) -> bool:
        data = await self._get(f"/goals/{goal_id}/completed")
        try:
            return bool(data["completed"])
        except (KeyError, TypeError) as e:
            raise self._invalid(e) from e
