from __future__ import annotations

from backend.gymdesk import models


def _class_payload(trainer_id: int, **overrides) -> dict:
    payload = {
        "name": "Evening Spin",
        "description": "Indoor cycling",
        "trainer_id": trainer_id,
        "max_capacity": 20,
        "duration_minutes": 50,
        "class_date": "2024-03-05",
        "start_time": "18:15",
    }
    payload.update(overrides)
    return payload


def test_create_class(client, trainer):
    response = client.post("/classes", json=_class_payload(trainer.id))
    assert response.status_code == 201, response.text

    data = response.json()
    assert data["trainer_id"] == trainer.id
    assert data["start_time"] == "18:15"
    assert data["is_cancelled"] is False


def test_create_class_accepts_single_digit_hour(client, trainer):
    response = client.post("/classes", json=_class_payload(trainer.id, start_time="7:05"))
    assert response.status_code == 201, response.text

    assert response.json()["start_time"] == "07:05"


def test_create_class_rejects_malformed_start_time(client, trainer):
    response = client.post("/classes", json=_class_payload(trainer.id, start_time="25:00"))

    assert response.status_code == 422


def test_create_class_rejects_non_positive_capacity(client, trainer):
    response = client.post("/classes", json=_class_payload(trainer.id, max_capacity=0))

    assert response.status_code == 422


def test_create_class_with_unknown_trainer_inserts_nothing(client, db_session):
    response = client.post("/classes", json=_class_payload(999))

    assert response.status_code == 404
    assert response.json()["detail"] == "Trainer with id 999 not found"
    assert db_session.query(models.GymClass).count() == 0


def test_list_classes_ordered_by_date_and_time(client, trainer):
    client.post("/classes", json=_class_payload(trainer.id, name="Late", start_time="19:00"))
    client.post("/classes", json=_class_payload(trainer.id, name="Early", start_time="06:00"))
    client.post(
        "/classes",
        json=_class_payload(trainer.id, name="Yesterday", class_date="2024-03-04"),
    )

    response = client.get("/classes")
    assert response.status_code == 200

    assert [item["name"] for item in response.json()] == ["Yesterday", "Early", "Late"]


def test_get_unknown_class_returns_not_found(client):
    response = client.get("/classes/321")

    assert response.status_code == 404
    assert response.json()["detail"] == "Class with id 321 not found"


def test_update_class_cancels_and_moves_start_time(client, gym_class):
    response = client.put(
        f"/classes/{gym_class.id}",
        json={"is_cancelled": True, "start_time": "08:00"},
    )
    assert response.status_code == 200, response.text

    data = response.json()
    assert data["is_cancelled"] is True
    assert data["start_time"] == "08:00"
    assert data["name"] == "Morning HIIT"


def test_update_class_with_unknown_trainer_leaves_class_unchanged(client, db_session, gym_class):
    original_trainer = gym_class.trainer_id

    response = client.put(f"/classes/{gym_class.id}", json={"trainer_id": 888, "name": "Changed"})

    assert response.status_code == 404
    db_session.expire_all()
    stored = db_session.get(models.GymClass, gym_class.id)
    assert stored.trainer_id == original_trainer
    assert stored.name == "Morning HIIT"


def test_class_attendance_listing_for_unknown_class(client):
    response = client.get("/classes/404/attendance")

    assert response.status_code == 404
