# healthsync/services/biogpt.py
"""
BioGPT text generation behind a small service interface.

Two implementations share the same coroutine surface:

* `BioGPTService`         - one Hugging Face inference call per operation
* `FallbackBioGPTService` - used when HUGGINGFACE_API_KEY is not set; returns
                            fixed responses and never raises

Routes only see whichever one `healthsync.core.models.get_biogpt_service`
hands out.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

import httpx

from healthsync.config import prompts
from healthsync.config.constants import UrgencyLevel
from healthsync.core.errors import ProviderError

logger = logging.getLogger(__name__)


def classify_urgency(symptoms: Iterable[str]) -> UrgencyLevel:
    """'medium' as soon as one symptom mentions an urgent keyword, else 'low'."""
    for symptom in symptoms:
        lowered = symptom.lower()
        if any(keyword in lowered for keyword in prompts.URGENT_SYMPTOM_KEYWORDS):
            return UrgencyLevel.MEDIUM
    return UrgencyLevel.LOW


class HuggingFaceTextClient:
    """Thin async client for the Hugging Face text-generation inference endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def generate(self, model: str, prompt: str, **parameters: Any) -> str:
        url = f"{self.base_url}/{model}"
        payload = {"inputs": prompt, "parameters": parameters}
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(url, json=payload, headers=headers)
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"Hugging Face returned {e.response.status_code} for model '{model}'"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise ProviderError(f"Hugging Face request failed: {e}") from e

        # the endpoint answers with [{"generated_text": ...}] or {"error": ...}
        if isinstance(body, list) and body and isinstance(body[0], dict):
            return body[0].get("generated_text", "")
        if isinstance(body, dict):
            if "error" in body:
                raise ProviderError(str(body["error"]))
            if "generated_text" in body:
                return body["generated_text"]
        raise ProviderError(f"Unexpected response shape from model '{model}'")


class BioGPTService:
    limited_mode = False

    def __init__(
        self,
        client: HuggingFaceTextClient,
        biogpt_model: str = "microsoft/biogpt",
        general_model: str = "gpt2",
    ) -> None:
        self.client = client
        self.biogpt_model = biogpt_model
        # BioGPT is too clinical for empathetic replies
        self.general_model = general_model

    async def analyze_medical_query(self, text: str) -> str:
        prompt = prompts.MEDICAL_QUERY_PROMPT.format(text=text)
        try:
            answer = await self.client.generate(
                self.biogpt_model,
                prompt,
                max_new_tokens=200,
                temperature=0.3,
                top_p=0.95,
                do_sample=True,
            )
        except ProviderError as e:
            logger.error(f"BioGPT medical query error: {e}")
            raise ProviderError(f"Failed to analyze medical query: {e}") from e
        return f"{answer}\n\n{prompts.MEDICAL_DISCLAIMER}"

    async def provide_emotional_support(self, text: str) -> str:
        prompt = prompts.EMOTIONAL_SUPPORT_PROMPT.format(text=text)
        try:
            answer = await self.client.generate(
                self.general_model,
                prompt,
                max_new_tokens=150,
                temperature=0.7,
                top_p=0.95,
                do_sample=True,
            )
        except ProviderError as e:
            logger.error(f"Emotional support generation error: {e}")
            raise ProviderError(f"Failed to generate emotional support: {e}") from e
        return f"{answer}\n\n{prompts.EMOTIONAL_SUPPORT_SUFFIX}"

    async def check_symptoms(self, symptoms: List[str]) -> Dict[str, Any]:
        prompt = prompts.SYMPTOM_ANALYSIS_PROMPT.format(symptoms=", ".join(symptoms))
        try:
            assessment = await self.client.generate(
                self.biogpt_model,
                prompt,
                max_new_tokens=250,
                temperature=0.3,
                top_p=0.95,
                do_sample=True,
            )
        except ProviderError as e:
            logger.error(f"Symptom analysis error: {e}")
            raise ProviderError(f"Failed to analyze symptoms: {e}") from e

        # generated text is free-form; the rest of the structure is fixed
        return {
            "general_assessment": assessment,
            "possible_categories": list(prompts.SYMPTOM_CATEGORIES),
            "recommendations": list(prompts.SYMPTOM_RECOMMENDATIONS),
            "urgency_level": classify_urgency(symptoms),
            "disclaimer": prompts.SYMPTOM_DISCLAIMER,
        }

    async def get_medication_info(self, medication_name: str) -> Dict[str, Any]:
        prompt = prompts.MEDICATION_INFO_PROMPT.format(medication_name=medication_name)
        try:
            description = await self.client.generate(
                self.biogpt_model,
                prompt,
                max_new_tokens=250,
                temperature=0.3,
                top_p=0.95,
                do_sample=True,
            )
        except ProviderError as e:
            logger.error(f"Medication info error: {e}")
            raise ProviderError(f"Failed to get medication information: {e}") from e

        general_uses: List[str] = []
        common_side_effects: List[str] = []
        if "used for" in description or "treats" in description:
            general_uses = [prompts.CONSULT_OFFICIAL_SOURCES]
        if "side effect" in description or "adverse" in description:
            common_side_effects = [prompts.CONSULT_OFFICIAL_SOURCES]

        return {
            "medication_name": medication_name,
            "description": description,
            "general_uses": general_uses,
            "common_side_effects": common_side_effects,
            "general_considerations": list(prompts.MEDICATION_CONSIDERATIONS),
            "disclaimer": prompts.MEDICATION_DISCLAIMER,
        }

    async def check_status(self) -> bool:
        try:
            await self.client.generate(
                self.biogpt_model,
                prompts.STATUS_CHECK_PROMPT,
                max_new_tokens=5,
                do_sample=False,
            )
        except ProviderError:
            logger.exception("BioGPT status check failed")
            raise
        return True


class FallbackBioGPTService:
    """Offline stand-in with the same interface as BioGPTService."""

    limited_mode = True

    async def analyze_medical_query(self, text: str) -> str:
        logger.info(f"BioGPT medical query request (LIMITED MODE): '{text}'")
        return prompts.LIMITED_MEDICAL_QUERY_RESPONSE

    async def provide_emotional_support(self, text: str) -> str:
        logger.info(f"Emotional support request (LIMITED MODE): '{text}'")
        return prompts.LIMITED_EMOTIONAL_SUPPORT_RESPONSE

    async def check_symptoms(self, symptoms: List[str]) -> Dict[str, Any]:
        logger.info(f"Symptom analysis request (LIMITED MODE): '{', '.join(symptoms)}'")
        return {
            "general_assessment": prompts.LIMITED_SYMPTOM_ASSESSMENT,
            "possible_categories": [prompts.API_KEY_REQUIRED],
            "recommendations": list(prompts.LIMITED_SYMPTOM_RECOMMENDATIONS),
            "urgency_level": classify_urgency(symptoms),
            "disclaimer": prompts.SYMPTOM_DISCLAIMER,
        }

    async def get_medication_info(self, medication_name: str) -> Dict[str, Any]:
        logger.info(f"Medication info request (LIMITED MODE): '{medication_name}'")
        return {
            "medication_name": medication_name,
            "description": prompts.LIMITED_MEDICATION_DESCRIPTION,
            "general_uses": [prompts.API_KEY_REQUIRED],
            "common_side_effects": [prompts.API_KEY_REQUIRED],
            "general_considerations": list(prompts.MEDICATION_CONSIDERATIONS),
            "disclaimer": prompts.MEDICATION_DISCLAIMER,
        }

    async def check_status(self) -> bool:
        logger.info(
            "BioGPT is running in LIMITED MODE without an API key. "
            "Set HUGGINGFACE_API_KEY for full functionality."
        )
        return True
