"""Loan Routes — origination, listing with embedded member, status changes.

Invariants:
    - POST /api/loans returns 201 with derived monthlyPayment/totalAmount as decimal strings
    - GET /api/loans/{id} embeds member and member.organization
    - PATCH status outside approved | rejected | active → 400 VALIDATION_ERROR
"""

from decimal import Decimal

from tests.factories import (
    FIXED_NOW, add_loan, add_member, add_organization, add_repayment,
)


async def test_create_loan_returns_derived_terms(client, store):
    member = add_member(store)
    res = await client.post("/api/loans", json={
        "memberId": member.id, "amount": "10000", "interestRate": 12,
        "termMonths": 12, "purpose": "  Irrigation pump ",
    })
    assert res.status_code == 201
    body = res.json()
    assert body["monthlyPayment"] == "888.49"
    assert body["totalAmount"] == "10661.88"
    assert body["remainingBalance"] == "10000.00"
    assert body["status"] == "pending"
    assert body["startDate"] is None
    assert body["purpose"] == "Irrigation pump"


async def test_create_loan_accepts_rate_above_one_hundred_percent(client, store):
    member = add_member(store)
    res = await client.post("/api/loans", json={
        "memberId": member.id, "amount": "1000", "interestRate": "150",
        "termMonths": 12, "purpose": "Bridge loan",
    })
    assert res.status_code == 201
    body = res.json()
    assert body["interestRate"] == "150"
    assert Decimal(body["totalAmount"]) >= Decimal(body["amount"])


async def test_create_loan_for_unknown_member_returns_404(client):
    res = await client.post("/api/loans", json={
        "memberId": 9, "amount": "100", "interestRate": 5,
        "termMonths": 6, "purpose": "Seeds",
    })
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_create_loan_with_invalid_terms_returns_400(client, store):
    member = add_member(store)
    res = await client.post("/api/loans", json={
        "memberId": member.id, "amount": "-5", "interestRate": 5,
        "termMonths": 0, "purpose": "",
    })
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    fields = {d["field"] for d in error["details"]}
    assert {"body.amount", "body.termMonths", "body.purpose"} <= fields


async def test_get_loan_embeds_member_organization(client, store):
    org = add_organization(store, "Valley Growers")
    member = add_member(store, name="Tomas", organization_id=org.id)
    loan = add_loan(store, member.id)

    res = await client.get(f"/api/loans/{loan.id}")
    assert res.status_code == 200
    body = res.json()
    assert body["member"]["name"] == "Tomas"
    assert body["member"]["organization"]["name"] == "Valley Growers"
    assert "passwordHash" not in body["member"]


async def test_get_missing_loan_returns_404(client):
    res = await client.get("/api/loans/77")
    assert res.status_code == 404


async def test_list_loans_filters(client, store):
    north = add_organization(store, "North")
    a = add_member(store, organization_id=north.id)
    b = add_member(store)
    loan_a = add_loan(store, a.id)
    loan_b = add_loan(store, b.id)

    all_ids = [row["id"] for row in (await client.get("/api/loans")).json()]
    by_member = (await client.get("/api/loans", params={"memberId": b.id})).json()
    by_org = (await client.get("/api/loans", params={"organizationId": north.id})).json()
    assert all_ids == [loan_a.id, loan_b.id]
    assert [row["id"] for row in by_member] == [loan_b.id]
    assert [row["id"] for row in by_org] == [loan_a.id]


async def test_activate_loan_sets_start_date_from_clock(client, store):
    member = add_member(store)
    loan = add_loan(store, member.id)

    res = await client.patch(f"/api/loans/{loan.id}/status", json={"status": "active"})
    assert res.status_code == 200
    assert res.json()["status"] == "active"
    assert store.get_loan(loan.id).start_date == FIXED_NOW


async def test_status_outside_allowed_set_returns_400(client, store):
    member = add_member(store)
    loan = add_loan(store, member.id)
    res = await client.patch(f"/api/loans/{loan.id}/status", json={"status": "completed"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_unreachable_status_returns_400(client, store):
    member = add_member(store)
    loan = add_loan(store, member.id)
    await client.patch(f"/api/loans/{loan.id}/status", json={"status": "rejected"})
    res = await client.patch(f"/api/loans/{loan.id}/status", json={"status": "approved"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_STATUS_TRANSITION"


async def test_update_pending_loan_recomputes_terms(client, store):
    member = add_member(store)
    loan = add_loan(store, member.id, amount="1200.00", rate="0", term=12)
    res = await client.put(f"/api/loans/{loan.id}", json={"termMonths": 4})
    assert res.status_code == 200
    assert res.json()["monthlyPayment"] == "300.00"


async def test_update_loan_rejects_blank_purpose(client, store):
    member = add_member(store)
    loan = add_loan(store, member.id)
    res = await client.put(f"/api/loans/{loan.id}", json={"purpose": "   "})
    assert res.status_code == 400
    assert store.get_loan(loan.id).purpose == "Seed capital"


async def test_delete_loan_with_repayments_returns_400(client, store):
    member = add_member(store)
    loan = add_loan(store, member.id)
    add_repayment(store, loan.id, "10.00", "2024-01")
    res = await client.delete(f"/api/loans/{loan.id}")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "ENTITY_IN_USE"


async def test_delete_loan_returns_204(client, store):
    member = add_member(store)
    loan = add_loan(store, member.id)
    res = await client.delete(f"/api/loans/{loan.id}")
    assert res.status_code == 204
    assert store.get_loan(loan.id) is None
