# tests/test_medications.py
from tests.conftest import signup


def medication_payload(name="Lisinopril", start_date="2025-01-01", **extra):
    payload = {
        "name": name,
        "dosage": "10mg",
        "frequency": "once daily",
        "startDate": start_date,
        "timeSchedule": ["08:00"],
        "refills": 3,
    }
    payload.update(extra)
    return payload


async def test_create_medication_defaults(client):
    patient = await signup(client, "patient")

    response = await client.post(
        f"/api/patients/{patient['profile']['id']}/medications",
        json=medication_payload(),
        headers=patient["headers"],
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "active"
    assert data["adherenceRate"] == 1.0
    assert data["refillsRemaining"] == 3


async def test_list_newest_start_date_first(client):
    patient = await signup(client, "patient")
    base = f"/api/patients/{patient['profile']['id']}/medications"
    await client.post(base, json=medication_payload("Old", "2024-02-01"), headers=patient["headers"])
    await client.post(base, json=medication_payload("New", "2025-02-01"), headers=patient["headers"])

    response = await client.get(base, headers=patient["headers"])

    assert [m["name"] for m in response.json()["data"]] == ["New", "Old"]


async def test_bad_schedule_and_dates_are_rejected(client):
    patient = await signup(client, "patient")
    base = f"/api/patients/{patient['profile']['id']}/medications"

    bad_time = await client.post(
        base, json=medication_payload(timeSchedule=["8am"]), headers=patient["headers"]
    )
    bad_range = await client.post(
        base, json=medication_payload(endDate="2024-12-31"), headers=patient["headers"]
    )

    assert bad_time.status_code == 400
    assert bad_range.status_code == 400


async def test_missing_dosage_is_rejected(client):
    patient = await signup(client, "patient")
    payload = medication_payload()
    del payload["dosage"]

    response = await client.post(
        f"/api/patients/{patient['profile']['id']}/medications",
        json=payload,
        headers=patient["headers"],
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Missing required fields"


async def test_update_and_soft_delete(client):
    patient = await signup(client, "patient")
    base = f"/api/patients/{patient['profile']['id']}/medications"
    created = await client.post(base, json=medication_payload(), headers=patient["headers"])
    medication_id = created.json()["data"]["id"]

    response = await client.patch(
        f"{base}/{medication_id}",
        json={"status": "on_hold", "adherenceRate": 0.75},
        headers=patient["headers"],
    )
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "on_hold"
    assert response.json()["data"]["adherenceRate"] == 0.75

    response = await client.patch(
        f"{base}/{medication_id}", json={"adherenceRate": 1.5}, headers=patient["headers"]
    )
    assert response.status_code == 400

    response = await client.delete(f"{base}/{medication_id}", headers=patient["headers"])
    assert response.status_code == 200
    assert (await client.get(base, headers=patient["headers"])).json()["data"] == []


async def test_null_for_required_column_is_rejected(client, db):
    patient = await signup(client, "patient")
    base = f"/api/patients/{patient['profile']['id']}/medications"
    created = await client.post(
        base, json=medication_payload(endDate="2025-06-01"), headers=patient["headers"]
    )
    medication_id = created.json()["data"]["id"]

    for body in ({"startDate": None}, {"name": None}, {"status": None}):
        response = await client.patch(f"{base}/{medication_id}", json=body, headers=patient["headers"])
        assert response.status_code == 400, body
        assert response.json()["message"] == "Invalid request"

    # clearing a nullable column is still allowed
    response = await client.patch(f"{base}/{medication_id}", json={"endDate": None}, headers=patient["headers"])
    assert response.status_code == 200
    assert response.json()["data"]["endDate"] is None
    assert response.json()["data"]["startDate"] == "2025-01-01"
