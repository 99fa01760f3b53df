# healthsync/services/vision.py
import logging
from typing import Optional

from openai import AsyncOpenAI, OpenAIError

from healthsync.config import prompts
from healthsync.core.errors import ProviderError, ProviderUnavailable

logger = logging.getLogger(__name__)

NOT_CONFIGURED = "OpenAI API key is not configured"


class VisionService:
    """Medical image description through an OpenAI vision model."""

    def __init__(
        self,
        client: Optional[AsyncOpenAI],
        model: str = "gpt-4o",
        status_model: str = "gpt-4o-mini",
    ) -> None:
        self.client = client
        self.model = model
        self.status_model = status_model

    @property
    def configured(self) -> bool:
        return self.client is not None

    async def analyze_medical_image(
        self, base64_image: str, prompt: Optional[str] = None
    ) -> str:
        if self.client is None:
            raise ProviderUnavailable(NOT_CONFIGURED)

        text = prompt or prompts.DEFAULT_IMAGE_PROMPT
        messages = [
            {"role": "system", "content": prompts.IMAGE_ANALYSIS_SYSTEM_PROMPT},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": text},
                    {
                        "type": "image_url",
                        "image_url": {"url": f"data:image/jpeg;base64,{base64_image}"},
                    },
                ],
            },
        ]
        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=600,
                temperature=0.3,
            )
        except OpenAIError as e:
            logger.error(f"OpenAI image analysis error: {e}")
            raise ProviderError(f"Failed to analyze medical image: {e}") from e

        content = completion.choices[0].message.content
        return content or ""

    async def check_status(self) -> bool:
        if self.client is None:
            raise ProviderUnavailable(NOT_CONFIGURED)
        try:
            await self.client.chat.completions.create(
                model=self.status_model,
                messages=[{"role": "user", "content": prompts.VISION_STATUS_PROMPT}],
                max_tokens=5,
            )
        except OpenAIError as e:
            logger.error(f"OpenAI status check failed: {e}")
            raise ProviderError(f"OpenAI API is not reachable: {e}") from e
        return True
