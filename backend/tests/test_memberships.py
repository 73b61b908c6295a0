from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from backend.gymdesk import models
from backend.gymdesk.services import add_months


@pytest.mark.parametrize(
    ("start", "months", "expected"),
    [
        (date(2024, 12, 15), 1, date(2025, 1, 15)),
        (date(2024, 3, 10), 12, date(2025, 3, 10)),
        (date(2024, 1, 31), 1, date(2024, 2, 29)),
        (date(2023, 1, 31), 1, date(2023, 2, 28)),
        (date(2024, 8, 31), 1, date(2024, 9, 30)),
        (date(2024, 11, 30), 3, date(2025, 2, 28)),
    ],
)
def test_add_months_keeps_or_clamps_day(start, months, expected):
    assert add_months(start, months) == expected


@pytest.mark.parametrize("months", [0, -1, True, 1.5])
def test_add_months_rejects_non_positive_or_non_integer(months):
    with pytest.raises(ValueError):
        add_months(date(2024, 1, 1), months)


def test_create_membership_type(client):
    response = client.post(
        "/membership-types",
        json={"name": "  Quarterly  ", "duration_months": 3, "price": "135.00"},
    )
    assert response.status_code == 201, response.text

    data = response.json()
    assert data["name"] == "Quarterly"
    assert data["is_active"] is True
    assert Decimal(str(data["price"])) == Decimal("135.00")


def test_create_membership_type_rejects_zero_duration(client):
    response = client.post(
        "/membership-types",
        json={"name": "Broken", "duration_months": 0, "price": "10.00"},
    )

    assert response.status_code == 422


def test_get_membership_type_and_listing(client, membership_type):
    response = client.get(f"/membership-types/{membership_type.id}")
    assert response.status_code == 200
    assert response.json()["name"] == "Monthly"

    response = client.get("/membership-types")
    assert [item["id"] for item in response.json()] == [membership_type.id]


def test_get_unknown_membership_type_returns_not_found(client):
    response = client.get("/membership-types/55")

    assert response.status_code == 404
    assert response.json()["detail"] == "Membership type with id 55 not found"


def test_create_membership_computes_end_date_across_year_boundary(client, member, membership_type):
    response = client.post(
        "/memberships",
        json={
            "member_id": member.id,
            "membership_type_id": membership_type.id,
            "start_date": "2024-12-15",
        },
    )
    assert response.status_code == 201, response.text

    data = response.json()
    assert data["start_date"] == "2024-12-15"
    assert data["end_date"] == "2025-01-15"
    assert data["status"] == models.MembershipStatus.ACTIVE.value


def test_create_membership_clamps_end_date_to_month_end(client, member, membership_type):
    response = client.post(
        "/memberships",
        json={
            "member_id": member.id,
            "membership_type_id": membership_type.id,
            "start_date": "2024-01-31",
        },
    )
    assert response.status_code == 201, response.text

    assert response.json()["end_date"] == "2024-02-29"


def test_create_membership_defaults_start_date_to_today(client, member, membership_type):
    response = client.post(
        "/memberships",
        json={"member_id": member.id, "membership_type_id": membership_type.id},
    )
    assert response.status_code == 201, response.text

    data = response.json()
    today = date.today()
    assert data["start_date"] == today.isoformat()
    assert data["end_date"] == add_months(today, 1).isoformat()


def test_create_membership_for_unknown_member_inserts_nothing(client, db_session, membership_type):
    response = client.post(
        "/memberships",
        json={"member_id": 404, "membership_type_id": membership_type.id},
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Member with id 404 not found"
    assert db_session.query(models.Membership).count() == 0


def test_create_membership_for_unknown_type_inserts_nothing(client, db_session, member):
    response = client.post(
        "/memberships",
        json={"member_id": member.id, "membership_type_id": 404},
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Membership type with id 404 not found"
    assert db_session.query(models.Membership).count() == 0


def test_create_membership_rejects_inactive_type(client, db_session, member, membership_type):
    membership_type.is_active = False
    db_session.commit()

    response = client.post(
        "/memberships",
        json={"member_id": member.id, "membership_type_id": membership_type.id},
    )

    assert response.status_code == 400
    assert "not active" in response.json()["detail"]
    assert db_session.query(models.Membership).count() == 0


def test_get_membership(client, member, membership_type):
    created = client.post(
        "/memberships",
        json={
            "member_id": member.id,
            "membership_type_id": membership_type.id,
            "start_date": "2024-05-01",
        },
    ).json()

    response = client.get(f"/memberships/{created['id']}")
    assert response.status_code == 200
    assert response.json()["end_date"] == "2024-06-01"

    assert client.get("/memberships/9090").status_code == 404
    assert [item["id"] for item in client.get("/memberships").json()] == [created["id"]]
