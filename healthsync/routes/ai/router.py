import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from healthsync.core.errors import ApiError, ProviderError, ProviderUnavailable
from healthsync.core.models import get_biogpt_service, get_vision_service
from healthsync.schemas.ai import (
    ImageAnalysisRequest,
    MedicationInfo,
    MedicationInfoResponse,
    MedicationQuery,
    ProviderStatus,
    SymptomAnalysis,
    SymptomAnalysisResponse,
    SymptomsQuery,
    TextQuery,
    TextResponse,
)

logger = logging.getLogger(__name__)

biogpt_router = APIRouter(prefix="/biogpt", tags=["biogpt"])
openai_router = APIRouter(prefix="/openai", tags=["openai"])


# ----------------------------------------------------------------------------
# BioGPT
# ----------------------------------------------------------------------------
@biogpt_router.get("/status", response_model=ProviderStatus)
async def biogpt_status(service=Depends(get_biogpt_service)):
    try:
        await service.check_status()
    except ProviderError as e:
        logger.error(f"BioGPT API connectivity test failed: {e}")
        raise ApiError(500, "Unable to connect to BioGPT service", str(e))

    if service.limited_mode:
        message = "BioGPT is running in limited mode; set HUGGINGFACE_API_KEY for full functionality"
    else:
        message = "BioGPT API is accessible and functioning correctly"
    return ProviderStatus(status="operational", message=message)


@biogpt_router.post("/medical-query", response_model=TextResponse)
async def medical_query(query: TextQuery, service=Depends(get_biogpt_service)):
    try:
        response = await service.analyze_medical_query(query.text)
    except ProviderError as e:
        raise ApiError(500, "Failed to process your request with BioGPT", str(e))
    return TextResponse(response=response)


@biogpt_router.post("/emotional-support", response_model=TextResponse)
async def emotional_support(query: TextQuery, service=Depends(get_biogpt_service)):
    try:
        response = await service.provide_emotional_support(query.text)
    except ProviderError as e:
        raise ApiError(500, "Failed to process your request with BioGPT", str(e))
    return TextResponse(response=response)


@biogpt_router.post("/check-symptoms", response_model=SymptomAnalysisResponse)
async def check_symptoms(query: SymptomsQuery, service=Depends(get_biogpt_service)):
    try:
        analysis = await service.check_symptoms(query.symptoms)
    except ProviderError as e:
        raise ApiError(500, "Failed to analyze symptoms", str(e))
    return SymptomAnalysisResponse(analysis=SymptomAnalysis(**analysis))


@biogpt_router.post("/medication-info", response_model=MedicationInfoResponse)
async def medication_info(query: MedicationQuery, service=Depends(get_biogpt_service)):
    try:
        information = await service.get_medication_info(query.medication_name)
    except ProviderError as e:
        raise ApiError(500, "Failed to get medication information", str(e))
    return MedicationInfoResponse(information=MedicationInfo(**information))


# ----------------------------------------------------------------------------
# OpenAI vision
# ----------------------------------------------------------------------------
@openai_router.get("/status", response_model=ProviderStatus)
async def openai_status(service=Depends(get_vision_service)):
    try:
        await service.check_status()
    except ProviderUnavailable as e:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "message": str(e)},
        )
    except ProviderError as e:
        raise ApiError(500, "Unable to connect to OpenAI service", str(e))
    return ProviderStatus(
        status="operational",
        message="OpenAI API is accessible and functioning correctly",
    )


@openai_router.post("/analyze-image", response_model=TextResponse)
async def analyze_image(request: ImageAnalysisRequest, service=Depends(get_vision_service)):
    try:
        response = await service.analyze_medical_image(request.base64_image, request.prompt)
    except ProviderUnavailable as e:
        raise ApiError(status.HTTP_503_SERVICE_UNAVAILABLE, str(e))
    except ProviderError as e:
        raise ApiError(500, "Failed to analyze the image", str(e))
    return TextResponse(response=response)
