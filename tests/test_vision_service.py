# tests/test_vision_service.py
from types import SimpleNamespace

import pytest
from openai import OpenAIError

from healthsync.config import prompts
from healthsync.core.errors import ProviderError, ProviderUnavailable
from healthsync.services.vision import NOT_CONFIGURED, VisionService


class FakeCompletions:
    def __init__(self, content="A small healed scar.", error=None):
        self.content = content
        self.error = error
        self.requests = []

    async def create(self, **kwargs):
        self.requests.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_openai(completions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


async def test_analyze_sends_system_prompt_and_inline_image():
    completions = FakeCompletions()
    service = VisionService(fake_openai(completions))

    answer = await service.analyze_medical_image("aGVsbG8=", "Is this infected?")

    assert answer == "A small healed scar."
    request = completions.requests[0]
    assert request["model"] == "gpt-4o"
    assert request["max_tokens"] == 600
    system, user = request["messages"]
    assert system == {"role": "system", "content": prompts.IMAGE_ANALYSIS_SYSTEM_PROMPT}
    text_part, image_part = user["content"]
    assert text_part == {"type": "text", "text": "Is this infected?"}
    assert image_part["image_url"]["url"] == "data:image/jpeg;base64,aGVsbG8="


async def test_default_prompt_is_used_when_missing():
    completions = FakeCompletions()
    service = VisionService(fake_openai(completions))

    await service.analyze_medical_image("aGVsbG8=")

    text_part = completions.requests[0]["messages"][1]["content"][0]
    assert text_part["text"] == prompts.DEFAULT_IMAGE_PROMPT


async def test_empty_content_becomes_empty_string():
    service = VisionService(fake_openai(FakeCompletions(content=None)))

    assert await service.analyze_medical_image("aGVsbG8=") == ""


async def test_unconfigured_service_raises_unavailable():
    service = VisionService(None)

    assert service.configured is False
    with pytest.raises(ProviderUnavailable, match=NOT_CONFIGURED):
        await service.analyze_medical_image("aGVsbG8=")
    with pytest.raises(ProviderUnavailable):
        await service.check_status()


async def test_sdk_errors_become_provider_errors():
    completions = FakeCompletions(error=OpenAIError("quota exceeded"))
    service = VisionService(fake_openai(completions))

    with pytest.raises(ProviderError, match="quota exceeded"):
        await service.analyze_medical_image("aGVsbG8=")
    with pytest.raises(ProviderError):
        await service.check_status()


async def test_status_uses_small_model():
    completions = FakeCompletions(content="OK")
    service = VisionService(fake_openai(completions), status_model="gpt-4o-mini")

    assert await service.check_status() is True
    assert completions.requests[0]["model"] == "gpt-4o-mini"
    assert completions.requests[0]["max_tokens"] == 5
