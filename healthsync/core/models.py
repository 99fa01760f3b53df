import logging
from typing import Dict, Union

from openai import AsyncOpenAI

from healthsync.config.settings import settings
from healthsync.services.biogpt import (
    BioGPTService,
    FallbackBioGPTService,
    HuggingFaceTextClient,
)
from healthsync.services.vision import VisionService

logger = logging.getLogger(__name__)

_model_cache: Dict[str, object] = {}


def get_biogpt_service() -> Union[BioGPTService, FallbackBioGPTService]:
    """Gets the BioGPT service, falling back to limited mode without an API key"""
    cache_key = "biogpt"
    if cache_key not in _model_cache:
        if settings.huggingface_api_key:
            client = HuggingFaceTextClient(
                api_key=settings.huggingface_api_key,
                base_url=settings.huggingface_api_url,
                timeout=settings.provider_timeout,
            )
            _model_cache[cache_key] = BioGPTService(
                client,
                biogpt_model=settings.biogpt_model,
                general_model=settings.general_model,
            )
            logger.info(f"Initialized BioGPT service with model '{settings.biogpt_model}'")
        else:
            logger.warning(
                "HUGGINGFACE_API_KEY is not set. BioGPT service running in LIMITED MODE"
            )
            _model_cache[cache_key] = FallbackBioGPTService()
    return _model_cache[cache_key]


def get_vision_service() -> VisionService:
    """Gets the OpenAI vision service; unconfigured when OPENAI_API_KEY is missing"""
    cache_key = "vision"
    if cache_key not in _model_cache:
        client = None
        if settings.openai_api_key:
            client = AsyncOpenAI(
                api_key=settings.openai_api_key, timeout=settings.provider_timeout
            )
            logger.info(f"Initialized OpenAI client for model '{settings.openai_vision_model}'")
        else:
            logger.warning("OPENAI_API_KEY is not set. Image analysis is unavailable")
        _model_cache[cache_key] = VisionService(
            client,
            model=settings.openai_vision_model,
            status_model=settings.openai_status_model,
        )
    return _model_cache[cache_key]


def clear_model_cache():
    """Clears the model cache"""
    _model_cache.clear()
