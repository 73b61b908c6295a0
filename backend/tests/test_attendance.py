from __future__ import annotations

from backend.gymdesk import models
from backend.gymdesk.services import AttendanceService


def test_record_attendance(client, gym_class, member):
    response = client.post(
        "/attendance",
        json={
            "class_id": gym_class.id,
            "member_id": member.id,
            "attended": True,
            "check_in_time": "2024-03-04T07:25:00",
        },
    )
    assert response.status_code == 201, response.text

    data = response.json()
    assert data["class_id"] == gym_class.id
    assert data["member_id"] == member.id
    assert data["attended"] is True

    listing = client.get(f"/classes/{gym_class.id}/attendance")
    assert listing.status_code == 200
    assert [item["id"] for item in listing.json()] == [data["id"]]


def test_duplicate_attendance_is_rejected(client, db_session, gym_class, member):
    payload = {"class_id": gym_class.id, "member_id": member.id, "attended": False}

    first = client.post("/attendance", json=payload)
    assert first.status_code == 201, first.text

    second = client.post("/attendance", json=payload)
    assert second.status_code == 409
    assert second.json()["detail"] == (
        f"Attendance record already exists for member {member.id} in class {gym_class.id}"
    )
    assert db_session.query(models.ClassAttendance).count() == 1


def test_duplicate_attendance_caught_by_unique_constraint(
    client, db_session, gym_class, member, monkeypatch
):
    payload = {"class_id": gym_class.id, "member_id": member.id, "attended": True}
    assert client.post("/attendance", json=payload).status_code == 201

    # Simulate a concurrent insert that slipped past the pre-check.
    monkeypatch.setattr(
        AttendanceService,
        "_ensure_not_registered",
        staticmethod(lambda *_args, **_kwargs: None),
    )

    response = client.post("/attendance", json=payload)

    assert response.status_code == 409
    assert db_session.query(models.ClassAttendance).count() == 1


def test_same_member_can_attend_different_classes(client, db_session, gym_class, member, trainer):
    other_class = models.GymClass(
        name="Lunch Pilates",
        trainer_id=trainer.id,
        max_capacity=8,
        duration_minutes=30,
        class_date=gym_class.class_date,
        start_time=gym_class.start_time.replace(hour=12),
    )
    db_session.add(other_class)
    db_session.commit()

    for class_id in (gym_class.id, other_class.id):
        response = client.post(
            "/attendance",
            json={"class_id": class_id, "member_id": member.id, "attended": True},
        )
        assert response.status_code == 201, response.text


def test_attendance_for_unknown_class_or_member(client, db_session, gym_class, member):
    missing_class = client.post(
        "/attendance",
        json={"class_id": 999, "member_id": member.id, "attended": True},
    )
    assert missing_class.status_code == 404
    assert missing_class.json()["detail"] == "Class with id 999 not found"

    missing_member = client.post(
        "/attendance",
        json={"class_id": gym_class.id, "member_id": 999, "attended": True},
    )
    assert missing_member.status_code == 404
    assert missing_member.json()["detail"] == "Member with id 999 not found"

    assert db_session.query(models.ClassAttendance).count() == 0


def test_update_attendance_marks_check_in(client, gym_class, member):
    created = client.post(
        "/attendance",
        json={"class_id": gym_class.id, "member_id": member.id, "attended": False},
    ).json()

    response = client.put(
        f"/attendance/{created['id']}",
        json={"attended": True, "check_in_time": "2024-03-04T07:31:00"},
    )
    assert response.status_code == 200, response.text

    data = response.json()
    assert data["attended"] is True
    assert data["check_in_time"].startswith("2024-03-04T07:31:00")

    fetched = client.get(f"/attendance/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["attended"] is True


def test_update_unknown_attendance_returns_not_found(client):
    response = client.put("/attendance/500", json={"attended": True})

    assert response.status_code == 404
    assert response.json()["detail"] == "Class attendance record with id 500 not found"
