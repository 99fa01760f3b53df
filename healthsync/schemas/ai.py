# healthsync/schemas/ai.py
from __future__ import annotations

from typing import List, Optional

from pydantic import Field, field_validator

from healthsync.config.constants import UrgencyLevel
from healthsync.schemas.shared import CamelModel, SuccessResponse


# --------------------------------------------------------------------------
# Requests
# --------------------------------------------------------------------------
class TextQuery(CamelModel):
    """Free text sent to /biogpt/medical-query and /biogpt/emotional-support."""

    text: str = Field(..., min_length=1)


class SymptomsQuery(CamelModel):
    symptoms: List[str] = Field(..., min_length=1)

    @field_validator("symptoms")
    @classmethod
    def _strip_blank(cls, value: List[str]) -> List[str]:
        cleaned = [s.strip() for s in value if s and s.strip()]
        if not cleaned:
            raise ValueError("at least one non-empty symptom is required")
        return cleaned


class MedicationQuery(CamelModel):
    medication_name: str = Field(..., min_length=1)


class ImageAnalysisRequest(CamelModel):
    """
    * `base64_image` - raw base64 (no data: prefix), sent as `base64Image`
    * `prompt`       - optional instruction; a generic one is used if omitted
    """

    base64_image: str = Field(..., min_length=1)
    prompt: Optional[str] = None


# --------------------------------------------------------------------------
# Structured results
# --------------------------------------------------------------------------
class SymptomAnalysis(CamelModel):
    general_assessment: str
    possible_categories: List[str]
    recommendations: List[str]
    urgency_level: UrgencyLevel
    disclaimer: str


class MedicationInfo(CamelModel):
    medication_name: str
    description: str
    general_uses: List[str]
    common_side_effects: List[str]
    general_considerations: List[str]
    disclaimer: str


# --------------------------------------------------------------------------
# Responses
# --------------------------------------------------------------------------
class TextResponse(SuccessResponse):
    response: str


class SymptomAnalysisResponse(SuccessResponse):
    analysis: SymptomAnalysis


class MedicationInfoResponse(SuccessResponse):
    information: MedicationInfo


class ProviderStatus(CamelModel):
    status: str
    message: str
