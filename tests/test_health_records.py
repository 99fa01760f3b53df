# tests/test_health_records.py
import uuid

from sqlalchemy import select

from healthsync.db.models import HealthRecordModel
from tests.conftest import signup


def record_payload(title="Blood pressure", date_recorded=None, **extra):
    payload = {
        "title": title,
        "recordType": "vital_signs",
        "data": {"systolic": 120, "diastolic": 80},
    }
    if date_recorded:
        payload["dateRecorded"] = date_recorded
    payload.update(extra)
    return payload


async def test_create_and_list_newest_first(client):
    patient = await signup(client, "patient")
    base = f"/api/patients/{patient['profile']['id']}/health-records"

    older = await client.post(base, json=record_payload("January", "2024-01-10T08:00:00Z"), headers=patient["headers"])
    newer = await client.post(base, json=record_payload("June", "2024-06-10T08:00:00Z"), headers=patient["headers"])
    assert older.status_code == 201
    assert newer.status_code == 201
    assert newer.json()["data"]["data"] == {"systolic": 120, "diastolic": 80}

    response = await client.get(base, headers=patient["headers"])

    assert response.status_code == 200
    assert [r["title"] for r in response.json()["data"]] == ["June", "January"]


async def test_date_recorded_defaults_to_now(client):
    patient = await signup(client, "patient")

    response = await client.post(
        f"/api/patients/{patient['profile']['id']}/health-records",
        json=record_payload(),
        headers=patient["headers"],
    )

    assert response.status_code == 201
    assert response.json()["data"]["dateRecorded"]


async def test_unknown_record_type_is_rejected(client, db):
    patient = await signup(client, "patient")

    response = await client.post(
        f"/api/patients/{patient['profile']['id']}/health-records",
        json=record_payload(recordType="x_ray"),
        headers=patient["headers"],
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request"
    assert (await db.execute(select(HealthRecordModel))).first() is None


async def test_data_is_required(client):
    patient = await signup(client, "patient")
    payload = record_payload()
    del payload["data"]

    response = await client.post(
        f"/api/patients/{patient['profile']['id']}/health-records",
        json=payload,
        headers=patient["headers"],
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Missing required fields"


async def test_unknown_patient_is_not_found(client):
    patient = await signup(client, "patient")

    response = await client.get(
        f"/api/patients/{uuid.uuid4()}/health-records", headers=patient["headers"]
    )

    assert response.status_code == 404
    assert response.json()["message"] == "Patient not found"


async def test_update_record(client):
    patient = await signup(client, "patient")
    base = f"/api/patients/{patient['profile']['id']}/health-records"
    created = await client.post(base, json=record_payload(), headers=patient["headers"])
    record_id = created.json()["data"]["id"]

    response = await client.patch(
        f"{base}/{record_id}",
        json={"description": "Taken after exercise", "tags": ["bp"]},
        headers=patient["headers"],
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["description"] == "Taken after exercise"
    assert data["tags"] == ["bp"]
    assert data["title"] == "Blood pressure"


async def test_soft_delete_hides_record_but_keeps_row(client, db):
    patient = await signup(client, "patient")
    base = f"/api/patients/{patient['profile']['id']}/health-records"
    created = await client.post(base, json=record_payload(), headers=patient["headers"])
    record_id = created.json()["data"]["id"]

    response = await client.delete(f"{base}/{record_id}", headers=patient["headers"])
    assert response.status_code == 200
    assert response.json()["status"] == "success"

    assert (await client.get(base, headers=patient["headers"])).json()["data"] == []
    assert (await client.get(f"{base}/{record_id}", headers=patient["headers"])).status_code == 404

    # default queries skip it, include_deleted still sees it
    assert (await db.execute(select(HealthRecordModel))).first() is None
    row = (
        await db.execute(
            select(HealthRecordModel).execution_options(include_deleted=True)
        )
    ).scalar_one()
    assert str(row.id) == record_id
    assert row.deleted_at is not None


async def test_null_for_required_column_is_rejected(client):
    patient = await signup(client, "patient")
    base = f"/api/patients/{patient['profile']['id']}/health-records"
    created = await client.post(base, json=record_payload(), headers=patient["headers"])
    record_id = created.json()["data"]["id"]

    for body in ({"title": None}, {"data": None}, {"recordType": None}):
        response = await client.patch(f"{base}/{record_id}", json=body, headers=patient["headers"])
        assert response.status_code == 400, body

    response = await client.get(f"{base}/{record_id}", headers=patient["headers"])
    assert response.json()["data"]["title"] == "Blood pressure"
