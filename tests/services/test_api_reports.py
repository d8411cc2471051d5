"""Statistics, Report, Profit & Contribution Routes."""

from datetime import datetime, timezone

from cooploan.core.domain_types import LoanStatus
from tests.factories import (
    add_contribution, add_loan, add_member, add_organization, add_profit,
    add_repayment,
)


async def test_statistics_on_empty_store(client):
    res = await client.get("/api/statistics")
    assert res.status_code == 200
    assert res.json() == {
        "totalOrganizations": 0,
        "totalMembers": 0,
        "activeLoans": 0,
        "totalProfit": "0.00",
        "activeLoanAmount": "0.00",
        "pendingApplications": 0,
        "overduePayments": 0,
    }


async def test_statistics_counts_overdue_against_clock(client, store):
    member = add_member(store)
    add_loan(
        store, member.id, status=LoanStatus.ACTIVE,
        start_date=datetime(2024, 3, 1, tzinfo=timezone.utc),
    )
    add_loan(store, member.id)
    body = (await client.get("/api/statistics")).json()
    assert body["activeLoans"] == 1
    assert body["pendingApplications"] == 1
    assert body["activeLoanAmount"] == "10000.00"
    assert body["overduePayments"] == 1


async def test_portfolio_summary(client, store):
    member = add_member(store)
    loan = add_loan(store, member.id, amount="500.00")
    add_repayment(store, loan.id, "50.00", "2024-05")
    body = (await client.get("/api/reports/summary")).json()
    assert body["totalLoans"] == 1
    assert body["totalLoanAmount"] == "500.00"
    assert body["totalRepaymentAmount"] == "50.00"


async def test_organization_breakdown(client, store):
    org = add_organization(store, "East")
    add_member(store, organization_id=org.id)
    rows = (await client.get("/api/reports/organizations")).json()
    assert rows[0]["organizationName"] == "East"
    assert rows[0]["memberCount"] == 1


async def test_monthly_trends_uses_clock(client, store):
    member = add_member(store)
    add_contribution(store, member.id, "2024-06", "20.00")
    rows = (await client.get("/api/reports/monthly-trends", params={"months": 2})).json()
    assert [r["month"] for r in rows] == ["2024-05", "2024-06"]
    assert rows[1]["contributionAmount"] == "20.00"


async def test_monthly_trends_rejects_out_of_range(client):
    res = await client.get("/api/reports/monthly-trends", params={"months": 0})
    assert res.status_code == 400


async def test_create_profit_and_duplicate_year(client):
    payload = {
        "totalProfit": "10000.00", "fixedPercent": "20",
        "sharedPercentPerMember": "5", "year": 2023,
    }
    first = await client.post("/api/profits", json=payload)
    assert first.status_code == 201
    assert first.json()["retainedAmount"] == "2000.00"
    assert first.json()["memberShareAmount"] == "500.00"
    second = await client.post("/api/profits", json=payload)
    assert second.status_code == 400
    assert second.json()["error"]["code"] == "DUPLICATE_PROFIT_YEAR"


async def test_list_profits_by_year(client, store):
    add_profit(store, 2022)
    add_profit(store, 2023)
    rows = (await client.get("/api/profits", params={"year": 2023})).json()
    assert [r["year"] for r in rows] == [2023]
    assert (await client.get("/api/profits", params={"year": 1999})).json() == []


async def test_profit_distribution(client, store):
    add_profit(store, 2023, total="1000.00", fixed="10", shared="10")
    add_member(store, name="Active")
    add_member(store, name="Gone", is_active=False)
    res = await client.get("/api/profits/2023/distribution")
    assert res.status_code == 200
    body = res.json()
    assert [s["memberName"] for s in body["shares"]] == ["Active"]
    assert body["distributedAmount"] == "100.00"
    assert (await client.get("/api/profits/2020/distribution")).status_code == 404


async def test_contributions_create_and_filter(client, store):
    member = add_member(store)
    other = add_member(store)
    res = await client.post("/api/contributions", json={
        "memberId": member.id, "month": "2024-02", "amountPaid": "30.00",
    })
    assert res.status_code == 201
    add_contribution(store, other.id, "2024-03")

    by_member = (await client.get("/api/contributions", params={"memberId": member.id})).json()
    by_month = (await client.get("/api/contributions", params={"month": "2024-03"})).json()
    assert [c["month"] for c in by_member] == ["2024-02"]
    assert [c["memberId"] for c in by_month] == [other.id]


async def test_duplicate_contribution_returns_400(client, store):
    member = add_member(store)
    add_contribution(store, member.id, "2024-02")
    res = await client.post("/api/contributions", json={
        "memberId": member.id, "month": "2024-02", "amountPaid": "30.00",
    })
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "DUPLICATE_CONTRIBUTION"
