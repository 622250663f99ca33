"""Unit tests for collaborator HTTP clients"""

import httpx
import pytest
from remit_reporting.domain.exceptions import CollaboratorError
from remit_reporting.infrastructure.clients.bill_payments import BillPaymentsClient
from remit_reporting.infrastructure.clients.insurance import InsuranceClient
from remit_reporting.infrastructure.clients.remittance_split import RemittanceSplitClient
from remit_reporting.infrastructure.clients.savings_goals import SavingsGoalsClient

BASE_URL = "http://collaborator.test"


def transport_for(routes: dict) -> httpx.MockTransport:
    """Serve canned JSON per path; unknown paths return 404"""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path not in routes:
            return httpx.Response(404, json={"detail": "not found"})
        body = routes[request.url.path]
        return body(request) if callable(body) else httpx.Response(200, json=body)

    return httpx.MockTransport(handler)


async def test_remittance_split_client():
    seen = {}

    def calculate(request: httpx.Request) -> httpx.Response:
        seen["total_amount"] = request.url.params["total_amount"]
        return httpx.Response(200, json={"amounts": [500, 300, 150, 50]})

    client = RemittanceSplitClient(
        BASE_URL,
        transport=transport_for({"/split": {"percentages": [50, 30, 15, 5]}, "/split/calculate": calculate}),
    )

    assert await client.get_split() == [50, 30, 15, 5]
    assert await client.calculate_split(1000) == [500, 300, 150, 50]
    assert seen["total_amount"] == "1000"


async def test_savings_goals_client_parses_goals():
    goal = {
        "id": 7,
        "owner": "user_alice",
        "name": "Emergency fund",
        "target_amount": str(2**100),  # i128 amounts may arrive as strings
        "current_amount": 250,
        "target_date": 1_800_000_000,
        "locked": True,
    }
    client = SavingsGoalsClient(
        BASE_URL,
        transport=transport_for({"/goals": {"goals": [goal]}, "/goals/7/completed": {"completed": False}}),
    )

    goals = await client.get_all_goals("user_alice")

    assert len(goals) == 1
    assert goals[0].target_amount == 2**100
    assert goals[0].locked is True
    assert await client.is_goal_completed(7) is False


async def test_bill_payments_client():
    bill = {
        "id": 1,
        "owner": "user_alice",
        "name": "Rent",
        "amount": 1200,
        "due_date": 1_700_000_000,
        "recurring": True,
        "frequency_days": 30,
        "paid": False,
        "created_at": 1_690_000_000,
        "paid_at": None,
    }
    client = BillPaymentsClient(
        BASE_URL,
        transport=transport_for({
            "/bills": {"bills": [bill, {**bill, "id": 2, "paid": True, "paid_at": 1_695_000_000}]},
            "/bills/unpaid": {"bills": [bill]},
            "/bills/unpaid/total": {"total": 1200},
        }),
    )

    all_bills = await client.get_all_bills()
    assert [b.paid_at for b in all_bills] == [None, 1_695_000_000]
    assert len(await client.get_unpaid_bills("user_alice")) == 1
    assert await client.get_total_unpaid("user_alice") == 1200


async def test_insurance_client():
    policy = {
        "id": 3,
        "owner": "user_alice",
        "name": "Family health",
        "coverage_type": "health",
        "monthly_premium": 80,
        "coverage_amount": 50_000,
        "active": True,
        "next_payment_date": 1_700_500_000,
    }
    client = InsuranceClient(
        BASE_URL,
        transport=transport_for({"/policies/active": {"policies": [policy]}, "/policies/premium": {"total": 80}}),
    )

    policies = await client.get_active_policies("user_alice")
    assert policies[0].coverage_amount == 50_000
    assert await client.get_total_monthly_premium("user_alice") == 80


async def test_http_error_raises_collaborator_error():
    client = InsuranceClient(BASE_URL, transport=transport_for({}))

    with pytest.raises(CollaboratorError) as exc_info:
        await client.get_active_policies("user_alice")

    assert exc_info.value.collaborator == "insurance"
    assert "404" in str(exc_info.value)


async def test_network_error_raises_collaborator_error():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = SavingsGoalsClient(BASE_URL, transport=httpx.MockTransport(refuse))

    with pytest.raises(CollaboratorError):
        await client.get_all_goals("user_alice")


async def test_malformed_payload_raises_collaborator_error():
    client = BillPaymentsClient(BASE_URL, transport=transport_for({"/bills": {"bills": [{"id": 1}]}}))

    with pytest.raises(CollaboratorError) as exc_info:
        await client.get_all_bills()

    assert "invalid data" in str(exc_info.value)


async def test_non_object_payload_raises_collaborator_error():
    client = RemittanceSplitClient(BASE_URL, transport=transport_for({"/split": [50, 50]}))

    with pytest.raises(CollaboratorError):
        await client.get_split()
