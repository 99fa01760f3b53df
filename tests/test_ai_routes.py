# tests/test_ai_routes.py
from healthsync.config import prompts
from healthsync.core.errors import ProviderError
from healthsync.core.models import get_biogpt_service, get_vision_service
from healthsync.main import app
from healthsync.services.biogpt import BioGPTService
from healthsync.services.vision import VisionService
from tests.test_vision_service import FakeCompletions, fake_openai


class BrokenClient:
    async def generate(self, model, prompt, **parameters):
        raise ProviderError("503 Service Unavailable")


async def test_biogpt_status_reports_limited_mode(client):
    response = await client.get("/api/biogpt/status")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "operational"
    assert "limited mode" in body["message"]


async def test_medical_query_without_key(client):
    response = await client.post("/api/biogpt/medical-query", json={"text": "What is asthma?"})

    assert response.status_code == 200
    assert response.json() == {
        "status": "success",
        "message": None,
        "response": prompts.LIMITED_MEDICAL_QUERY_RESPONSE,
    }


async def test_emotional_support_without_key(client):
    response = await client.post("/api/biogpt/emotional-support", json={"text": "I feel alone"})

    assert response.status_code == 200
    assert response.json()["response"] == prompts.LIMITED_EMOTIONAL_SUPPORT_RESPONSE


async def test_medical_query_requires_text(client):
    response = await client.post("/api/biogpt/medical-query", json={})

    assert response.status_code == 400
    assert response.json()["status"] == "error"


async def test_check_symptoms_urgency(client):
    response = await client.post(
        "/api/biogpt/check-symptoms", json={"symptoms": ["severe headache", "nausea"]}
    )

    assert response.status_code == 200
    analysis = response.json()["analysis"]
    assert analysis["urgencyLevel"] == "medium"
    assert analysis["possibleCategories"] == [prompts.API_KEY_REQUIRED]

    response = await client.post("/api/biogpt/check-symptoms", json={"symptoms": ["runny nose"]})
    assert response.json()["analysis"]["urgencyLevel"] == "low"


async def test_check_symptoms_rejects_empty_list(client):
    for payload in ({"symptoms": []}, {"symptoms": ["  "]}):
        response = await client.post("/api/biogpt/check-symptoms", json=payload)
        assert response.status_code == 400


async def test_medication_info_structure(client):
    response = await client.post("/api/biogpt/medication-info", json={"medicationName": "metformin"})

    assert response.status_code == 200
    information = response.json()["information"]
    assert information["medicationName"] == "metformin"
    assert information["generalUses"] == [prompts.API_KEY_REQUIRED]
    assert information["generalConsiderations"] == list(prompts.MEDICATION_CONSIDERATIONS)
    assert information["disclaimer"] == prompts.MEDICATION_DISCLAIMER


async def test_provider_failure_uses_error_envelope(client):
    app.dependency_overrides[get_biogpt_service] = lambda: BioGPTService(BrokenClient())

    response = await client.post("/api/biogpt/medical-query", json={"text": "What is asthma?"})

    assert response.status_code == 500
    body = response.json()
    assert body["status"] == "error"
    assert body["message"] == "Failed to process your request with BioGPT"
    assert "503 Service Unavailable" in body["error"]

    response = await client.get("/api/biogpt/status")
    assert response.status_code == 500
    assert response.json()["message"] == "Unable to connect to BioGPT service"


async def test_openai_status_without_key(client):
    response = await client.get("/api/openai/status")

    assert response.status_code == 503
    assert response.json() == {"status": "unavailable", "message": "OpenAI API key is not configured"}


async def test_analyze_image_without_key(client):
    response = await client.post("/api/openai/analyze-image", json={"base64Image": "aGVsbG8="})

    assert response.status_code == 503
    assert response.json()["message"] == "OpenAI API key is not configured"


async def test_analyze_image_requires_image(client):
    response = await client.post("/api/openai/analyze-image", json={"prompt": "What is this?"})

    assert response.status_code == 400
    assert response.json()["message"] == "Missing required fields"


async def test_analyze_image_with_client(client):
    completions = FakeCompletions(content="Mild redness around the wound.")
    app.dependency_overrides[get_vision_service] = lambda: VisionService(fake_openai(completions))

    response = await client.post(
        "/api/openai/analyze-image", json={"base64Image": "aGVsbG8=", "prompt": "Describe it"}
    )

    assert response.status_code == 200
    assert response.json()["response"] == "Mild redness around the wound."

    response = await client.get("/api/openai/status")
    assert response.status_code == 200
    assert response.json()["status"] == "operational"
