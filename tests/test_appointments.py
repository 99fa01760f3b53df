# tests/test_appointments.py
import uuid

from sqlalchemy import func, select

from healthsync.db.models import AppointmentModel
from tests.conftest import signup


def appointment_payload(patient_id, doctor_id, start="2025-03-01T09:00:00Z", end="2025-03-01T09:30:00Z", **extra):
    payload = {
        "patientId": patient_id,
        "doctorId": doctor_id,
        "title": "Check-up",
        "startTime": start,
        "endTime": end,
        "appointmentType": "video",
    }
    payload.update(extra)
    return payload


async def _care_pair(client):
    doctor = await signup(client, "doctor", email="doc@example.com")
    patient = await signup(client, "patient", email="pat@example.com")
    return patient, doctor


async def test_create_appointment_is_always_scheduled(client):
    patient, doctor = await _care_pair(client)

    response = await client.post(
        "/api/appointments",
        json=appointment_payload(patient["profile"]["id"], doctor["profile"]["id"], status="completed"),
        headers=patient["headers"],
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "scheduled"
    assert data["appointmentType"] == "video"


async def test_missing_field_is_rejected_without_write(client, db):
    patient, doctor = await _care_pair(client)
    payload = appointment_payload(patient["profile"]["id"], doctor["profile"]["id"])
    del payload["title"]

    response = await client.post("/api/appointments", json=payload, headers=patient["headers"])

    assert response.status_code == 400
    assert response.json()["message"] == "Missing required fields"
    assert await db.scalar(select(func.count()).select_from(AppointmentModel)) == 0


async def test_end_before_start_is_rejected(client):
    patient, doctor = await _care_pair(client)

    response = await client.post(
        "/api/appointments",
        json=appointment_payload(
            patient["profile"]["id"],
            doctor["profile"]["id"],
            start="2025-03-01T10:00:00Z",
            end="2025-03-01T09:00:00Z",
        ),
        headers=patient["headers"],
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request"


async def test_requires_authentication(client):
    response = await client.get("/api/appointments")
    assert response.status_code == 401


async def test_list_filters_by_user_and_orders_by_start(client):
    patient, doctor = await _care_pair(client)
    other = await signup(client, "patient", email="other@example.com")
    headers = patient["headers"]

    for start, end in [
        ("2025-03-05T09:00:00Z", "2025-03-05T09:30:00Z"),
        ("2025-03-01T09:00:00Z", "2025-03-01T09:30:00Z"),
    ]:
        await client.post(
            "/api/appointments",
            json=appointment_payload(patient["profile"]["id"], doctor["profile"]["id"], start, end),
            headers=headers,
        )
    await client.post(
        "/api/appointments",
        json=appointment_payload(other["profile"]["id"], doctor["profile"]["id"]),
        headers=headers,
    )

    response = await client.get(
        "/api/appointments",
        params={"userId": patient["user"]["id"], "userType": "patient"},
        headers=headers,
    )
    mine = response.json()["data"]
    assert [a["startTime"][:10] for a in mine] == ["2025-03-01", "2025-03-05"]

    response = await client.get(
        "/api/appointments", params={"userId": doctor["user"]["id"]}, headers=headers
    )
    assert len(response.json()["data"]) == 3

    response = await client.get("/api/appointments", headers=headers)
    assert len(response.json()["data"]) == 3


async def test_user_without_matching_profile_gets_nothing(client):
    patient, doctor = await _care_pair(client)
    await client.post(
        "/api/appointments",
        json=appointment_payload(patient["profile"]["id"], doctor["profile"]["id"]),
        headers=patient["headers"],
    )

    response = await client.get(
        "/api/appointments",
        params={"userId": patient["user"]["id"], "userType": "doctor"},
        headers=patient["headers"],
    )

    assert response.status_code == 200
    assert response.json()["data"] == []


async def test_update_status_and_reject_unknown_status(client):
    patient, doctor = await _care_pair(client)
    created = await client.post(
        "/api/appointments",
        json=appointment_payload(patient["profile"]["id"], doctor["profile"]["id"]),
        headers=patient["headers"],
    )
    appointment_id = created.json()["data"]["id"]

    response = await client.patch(
        f"/api/appointments/{appointment_id}",
        json={"status": "cancelled", "notes": "Feeling better"},
        headers=patient["headers"],
    )
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "cancelled"
    assert response.json()["data"]["notes"] == "Feeling better"

    response = await client.patch(
        f"/api/appointments/{appointment_id}",
        json={"status": "postponed"},
        headers=patient["headers"],
    )
    assert response.status_code == 400


async def test_delete_is_soft(client, db):
    patient, doctor = await _care_pair(client)
    created = await client.post(
        "/api/appointments",
        json=appointment_payload(patient["profile"]["id"], doctor["profile"]["id"]),
        headers=patient["headers"],
    )
    appointment_id = created.json()["data"]["id"]

    response = await client.delete(f"/api/appointments/{appointment_id}", headers=patient["headers"])
    assert response.status_code == 200

    response = await client.get(f"/api/appointments/{appointment_id}", headers=patient["headers"])
    assert response.status_code == 404

    rows = (
        await db.execute(select(AppointmentModel).execution_options(include_deleted=True))
    ).scalars().all()
    assert len(rows) == 1
    assert rows[0].deleted_at is not None


async def test_naive_time_is_read_as_utc(client):
    patient, doctor = await _care_pair(client)

    response = await client.post(
        "/api/appointments",
        json=appointment_payload(
            patient["profile"]["id"],
            doctor["profile"]["id"],
            start="2025-03-01T09:00:00Z",
            end="2025-03-01T09:30:00",
        ),
        headers=patient["headers"],
    )
    assert response.status_code == 201

    backwards = await client.post(
        "/api/appointments",
        json=appointment_payload(
            patient["profile"]["id"],
            doctor["profile"]["id"],
            start="2025-03-01T10:00:00+00:00",
            end="2025-03-01T09:30:00",
        ),
        headers=patient["headers"],
    )
    assert backwards.status_code == 400


async def test_null_for_required_column_is_rejected(client, db):
    patient, doctor = await _care_pair(client)
    created = await client.post(
        "/api/appointments",
        json=appointment_payload(patient["profile"]["id"], doctor["profile"]["id"]),
        headers=patient["headers"],
    )
    appointment_id = created.json()["data"]["id"]

    for body in ({"title": None}, {"status": None}, {"startTime": None}):
        response = await client.patch(
            f"/api/appointments/{appointment_id}", json=body, headers=patient["headers"]
        )
        assert response.status_code == 400, body
        assert response.json()["message"] == "Invalid request"

    row = await db.scalar(select(AppointmentModel))
    assert row.title == "Check-up"
    assert row.status.value == "scheduled"


async def test_unknown_user_filter_matches_nothing(client):
    patient, doctor = await _care_pair(client)
    await client.post(
        "/api/appointments",
        json=appointment_payload(patient["profile"]["id"], doctor["profile"]["id"]),
        headers=patient["headers"],
    )

    response = await client.get(
        "/api/appointments", params={"userId": str(uuid.uuid4())}, headers=patient["headers"]
    )

    assert response.status_code == 200
    assert response.json()["data"] == []
