# tests/test_biogpt_service.py
import json

import httpx
import pytest

from healthsync.config import prompts
from healthsync.config.constants import UrgencyLevel
from healthsync.core.errors import ProviderError
from healthsync.services.biogpt import (
    BioGPTService,
    FallbackBioGPTService,
    HuggingFaceTextClient,
    classify_urgency,
)


class RecordingClient:
    """Stands in for HuggingFaceTextClient and remembers every call."""

    def __init__(self, answer="generated text"):
        self.answer = answer
        self.calls = []

    async def generate(self, model, prompt, **parameters):
        self.calls.append({"model": model, "prompt": prompt, **parameters})
        return self.answer


class FailingClient:
    async def generate(self, model, prompt, **parameters):
        raise ProviderError("model is loading")


@pytest.mark.parametrize(
    "symptoms, expected",
    [
        (["mild headache", "runny nose"], UrgencyLevel.LOW),
        (["Severe headache"], UrgencyLevel.MEDIUM),
        (["cough", "chest PAIN"], UrgencyLevel.MEDIUM),
        (["difficulty breathing"], UrgencyLevel.MEDIUM),
    ],
)
def test_classify_urgency(symptoms, expected):
    assert classify_urgency(symptoms) == expected


async def test_fallback_returns_fixed_answers():
    service = FallbackBioGPTService()

    assert await service.analyze_medical_query("what is asthma?") == prompts.LIMITED_MEDICAL_QUERY_RESPONSE
    assert await service.provide_emotional_support("I feel low") == prompts.LIMITED_EMOTIONAL_SUPPORT_RESPONSE
    assert await service.check_status() is True


async def test_fallback_symptoms_and_medication_structures():
    service = FallbackBioGPTService()

    analysis = await service.check_symptoms(["severe headache"])
    assert analysis["general_assessment"] == prompts.LIMITED_SYMPTOM_ASSESSMENT
    assert analysis["possible_categories"] == [prompts.API_KEY_REQUIRED]
    assert analysis["urgency_level"] == UrgencyLevel.MEDIUM
    assert analysis["disclaimer"] == prompts.SYMPTOM_DISCLAIMER

    info = await service.get_medication_info("ibuprofen")
    assert info["medication_name"] == "ibuprofen"
    assert info["description"] == prompts.LIMITED_MEDICATION_DESCRIPTION
    assert info["general_uses"] == [prompts.API_KEY_REQUIRED]
    assert info["common_side_effects"] == [prompts.API_KEY_REQUIRED]
    assert info["general_considerations"] == list(prompts.MEDICATION_CONSIDERATIONS)


async def test_medical_query_prompt_and_disclaimer():
    client = RecordingClient("Asthma is a chronic condition.")
    service = BioGPTService(client)

    answer = await service.analyze_medical_query("What is asthma?")

    assert answer == f"Asthma is a chronic condition.\n\n{prompts.MEDICAL_DISCLAIMER}"
    call = client.calls[0]
    assert call["model"] == "microsoft/biogpt"
    assert call["prompt"] == "Medical Question: What is asthma?\n\nMedical Answer:"
    assert call["max_new_tokens"] == 200
    assert call["temperature"] == 0.3
    assert call["top_p"] == 0.95


async def test_emotional_support_uses_general_model():
    client = RecordingClient("You are not alone.")
    service = BioGPTService(client, general_model="gpt2")

    answer = await service.provide_emotional_support("I am anxious about surgery")

    assert answer.startswith("You are not alone.")
    assert answer.endswith(prompts.EMOTIONAL_SUPPORT_SUFFIX)
    assert client.calls[0]["model"] == "gpt2"
    assert client.calls[0]["max_new_tokens"] == 150
    assert client.calls[0]["temperature"] == 0.7


async def test_check_symptoms_structure():
    client = RecordingClient("Likely a viral infection.")
    service = BioGPTService(client)

    analysis = await service.check_symptoms(["fever", "cough"])

    assert client.calls[0]["prompt"] == "Patient Symptoms: fever, cough\n\nGeneral Medical Assessment:"
    assert analysis["general_assessment"] == "Likely a viral infection."
    assert analysis["possible_categories"] == list(prompts.SYMPTOM_CATEGORIES)
    assert analysis["recommendations"] == list(prompts.SYMPTOM_RECOMMENDATIONS)
    assert analysis["urgency_level"] == UrgencyLevel.LOW


async def test_medication_info_keyword_heuristics():
    service = BioGPTService(RecordingClient("It is used for pain. A common side effect is nausea."))
    info = await service.get_medication_info("ibuprofen")
    assert info["general_uses"] == [prompts.CONSULT_OFFICIAL_SOURCES]
    assert info["common_side_effects"] == [prompts.CONSULT_OFFICIAL_SOURCES]

    service = BioGPTService(RecordingClient("A nonsteroidal compound."))
    info = await service.get_medication_info("ibuprofen")
    assert info["general_uses"] == []
    assert info["common_side_effects"] == []
    assert info["disclaimer"] == prompts.MEDICATION_DISCLAIMER


async def test_provider_failure_is_wrapped():
    service = BioGPTService(FailingClient())

    with pytest.raises(ProviderError, match="Failed to analyze medical query"):
        await service.analyze_medical_query("anything")
    with pytest.raises(ProviderError):
        await service.check_status()


async def test_http_client_posts_inputs_and_parameters():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=[{"generated_text": "hello"}])

    client = HuggingFaceTextClient(
        "hf_test", "https://hf.example/models/", transport=httpx.MockTransport(handler)
    )

    text = await client.generate("microsoft/biogpt", "prompt", max_new_tokens=5)

    assert text == "hello"
    assert seen["url"] == "https://hf.example/models/microsoft/biogpt"
    assert seen["auth"] == "Bearer hf_test"
    assert seen["body"] == {"inputs": "prompt", "parameters": {"max_new_tokens": 5}}


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(503, json={"error": "Model is currently loading"}),
        httpx.Response(200, json={"error": "Rate limit reached"}),
        httpx.Response(200, json={"unexpected": True}),
    ],
)
async def test_http_client_errors_become_provider_errors(response):
    client = HuggingFaceTextClient(
        "hf_test", "https://hf.example/models", transport=httpx.MockTransport(lambda request: response)
    )

    with pytest.raises(ProviderError):
        await client.generate("microsoft/biogpt", "prompt")
