"""Insurance policy tracker client"""

from typing import List
from remit_reporting.domain.models import InsurancePolicy
from remit_reporting.infrastructure.clients.base import CollaboratorClient


class InsuranceClient(CollaboratorClient):
    """Client for the insurance policy tracker"""

    collaborator = "insurance"

    async def get_active_policies(self, owner: str) -> List[InsurancePolicy]:
        data = await self._get("/policies/active", params={"owner": owner})
        try:
            return [
                InsurancePolicy(
                    id=policy["id"],
                    owner=policy["owner"],
                    name=policy["name"],
                    coverage_type=policy["coverage_type"],
                    monthly_premium=int(policy["monthly_premium"]),
                    coverage_amount=int(policy["coverage_amount"]),
                    active=policy["active"],
                    next_payment_date=int(policy["next_payment_date"]),
                )
                for policy in data.get("policies", [])
            ]
        except (KeyError, ValueError, TypeError) as e:
            raise self._invalid(e) from e

    async def get_total_monthly_premium(self, owner: str) -> int:
        data = await self._get("/policies/premium", params={"owner": owner})
        try:
            return int(data["total"])
        except (KeyError, ValueError, TypeError) as e:
            raise self._invalid(e) from e
