"""Bill payment tracker client"""

from typing import Any, Dict, List
from remit_reporting.domain.models import Bill
from remit_reporting.infrastructure.clients.base import CollaboratorClient


class BillPaymentsClient(CollaboratorClient):
    """Client for the bill payment tracker"""

    collaborator = "bill_payments"

    async def get_unpaid_bills(self, owner: str) -> List[Bill]:
        data = await self._get("/bills/unpaid", params={"owner": owner})
        return self._parse_bills(data)

    async def get_total_unpaid(self, owner: str) -> int:
        data = await self._get("/bills/unpaid/total", params={"owner": owner})
        try:
            return int(data["total"])
        except (KeyError, ValueError, TypeError) as e:
            raise self._invalid(e) from e

    async def get_all_bills(self) -> List[Bill]:
        """Every bill known to the tracker, across all owners"""
        data = await self._get("/bills")
        return self._parse_bills(data)

    def _parse_bills(self, data: Dict[str, Any]) -> List[Bill]:
        try:
            return [
                Bill(
                    id=bill["id"],
                    owner=bill["owner"],
                    name=bill["name"],
                    amount=int(bill["amount"]),
                    due_date=int(bill["due_date"]),
                    recurring=bill["recurring"],
                    frequency_days=bill["frequency_days"],
                    paid=bill["paid"],
                    created_at=int(bill["created_at"]),
                    paid_at=int(bill["paid_at"]) if bill.get("paid_at") is not None else None,
                )
                for bill in data.get("bills", [])
            ]
        except (KeyError, ValueError, TypeError) as e:
            raise self._invalid(e) from e
