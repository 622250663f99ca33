"""Remittance split service client"""

from typing import List
from remit_reporting.infrastructure.clients.base import CollaboratorClient


class RemittanceSplitClient(CollaboratorClient):
    """Client for the remittance split calculator"""

    collaborator = "remittance_split"

    async def get_split(self) -> List[int]:
        """Configured split percentages, one per category"""
        data = await self._get("/split")
        try:
            return [int(p) for p in data["percentages"]]
        except (KeyError, ValueError, TypeError) as e:
            raise self._invalid(e) from e

    async def calculate_split(self, total_amount: int) -> List[int]:
        """Amounts per category for splitting `total_amount`"""
        data = await self._get("/split/calculate", params={"total_amount": str(total_amount)})
        try:
            return [int(a) for a in data["amounts"]]
        except (KeyError, ValueError, TypeError) as e:
            raise self._invalid(e) from e
