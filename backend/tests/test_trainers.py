from __future__ import annotations

from datetime import date
from decimal import Decimal


def test_create_trainer_is_active_by_default(client):
    response = client.post(
        "/trainers",
        json={
            "first_name": "Elena",
            "last_name": "Soto",
            "email": "elena.soto@gymdesk.io",
            "specialization": "Yoga",
            "hourly_rate": "40.00",
        },
    )
    assert response.status_code == 201, response.text

    data = response.json()
    assert data["is_active"] is True
    assert data["hire_date"] == date.today().isoformat()
    assert Decimal(str(data["hourly_rate"])) == Decimal("40.00")


def test_create_trainer_rejects_non_positive_rate(client):
    response = client.post(
        "/trainers",
        json={
            "first_name": "Elena",
            "last_name": "Soto",
            "email": "elena.soto@gymdesk.io",
            "hourly_rate": "0",
        },
    )

    assert response.status_code == 422


def test_create_trainer_rejects_duplicate_email(client, trainer):
    response = client.post(
        "/trainers",
        json={"first_name": "Otra", "last_name": "Persona", "email": trainer.email},
    )

    assert response.status_code == 409


def test_get_trainer(client, trainer):
    response = client.get(f"/trainers/{trainer.id}")
    assert response.status_code == 200

    assert response.json()["email"] == trainer.email


def test_get_unknown_trainer_returns_not_found(client):
    response = client.get("/trainers/31337")

    assert response.status_code == 404
    assert response.json()["detail"] == "Trainer with id 31337 not found"


def test_deactivate_trainer(client, trainer):
    response = client.put(f"/trainers/{trainer.id}", json={"is_active": False})
    assert response.status_code == 200, response.text

    data = response.json()
    assert data["is_active"] is False
    assert data["specialization"] == "Strength"


def test_list_trainers(client, trainer):
    response = client.get("/trainers")
    assert response.status_code == 200

    assert [item["id"] for item in response.json()] == [trainer.id]
