# =================================================================================================================================
# BioGPT prompt templates
# =================================================================================================================================

MEDICAL_QUERY_PROMPT = "Medical Question: {text}\n\nMedical Answer:"

EMOTIONAL_SUPPORT_PROMPT = "Patient Concern: {text}\n\nEmotional Support Response:"

SYMPTOM_ANALYSIS_PROMPT = "Patient Symptoms: {symptoms}\n\nGeneral Medical Assessment:"

MEDICATION_INFO_PROMPT = "Medication: {medication_name}\n\nMedication Information:"

STATUS_CHECK_PROMPT = "This is a test."

# =================================================================================================================================
# Disclaimers and suffixes appended to provider output
# =================================================================================================================================

MEDICAL_DISCLAIMER = (
    "DISCLAIMER: This information is provided by an AI model and should not replace "
    "professional medical advice. Always consult with a qualified healthcare provider "
    "for medical concerns."
)

EMOTIONAL_SUPPORT_SUFFIX = (
    "I'm here to support you. Remember that speaking with a healthcare professional "
    "or counselor can also provide valuable guidance for your concerns."
)

SYMPTOM_DISCLAIMER = (
    "This analysis is for informational purposes only and does not constitute medical "
    "advice. Please consult with a healthcare professional for an accurate diagnosis."
)

MEDICATION_DISCLAIMER = (
    "This information is for educational purposes only. Always consult medication "
    "package inserts, pharmacists, and healthcare providers for accurate medication "
    "information."
)

# =================================================================================================================================
# Limited mode (no HUGGINGFACE_API_KEY)
# =================================================================================================================================

LIMITED_MEDICAL_QUERY_RESPONSE = """I'm unable to process specific medical queries at this time as a Hugging Face API key is required for the BioGPT model.

To enable full functionality, please set up a HUGGINGFACE_API_KEY in your environment variables.

DISCLAIMER: AI-generated information should not replace professional medical advice. Always consult with a qualified healthcare provider for medical concerns."""

LIMITED_EMOTIONAL_SUPPORT_RESPONSE = """I understand you're looking for emotional support. While I can't analyze your specific concern without a Hugging Face API key, please know that your feelings are valid.

To enable full functionality, please set up a HUGGINGFACE_API_KEY in your environment variables.

Remember that speaking with a healthcare professional or counselor can provide valuable guidance for your concerns."""

LIMITED_SYMPTOM_ASSESSMENT = (
    "I'm unable to analyze your specific symptoms at this time as a Hugging Face API key "
    "is required for the BioGPT model. To enable full functionality, please set up a "
    "HUGGINGFACE_API_KEY in your environment variables."
)

LIMITED_MEDICATION_DESCRIPTION = (
    "I'm unable to provide specific information about this medication at this time as a "
    "Hugging Face API key is required for the BioGPT model. To enable full functionality, "
    "please set up a HUGGINGFACE_API_KEY in your environment variables."
)

API_KEY_REQUIRED = "API Key Required"

# =================================================================================================================================
# Fixed structured content
# =================================================================================================================================

SYMPTOM_CATEGORIES = ["General wellness concern", "Requires further evaluation"]

SYMPTOM_RECOMMENDATIONS = [
    "Track your symptoms and their frequency",
    "Maintain a healthy lifestyle with balanced diet and exercise",
    "Consult with a healthcare provider for proper evaluation",
]

LIMITED_SYMPTOM_RECOMMENDATIONS = [
    "Set up HUGGINGFACE_API_KEY environment variable",
    "Consult with a healthcare provider for proper evaluation",
]

MEDICATION_CONSIDERATIONS = [
    "Always take medications as prescribed by your doctor",
    "Do not stop taking medication without consulting your healthcare provider",
    "Store according to package instructions",
]

CONSULT_OFFICIAL_SOURCES = "Please consult official medical resources for accurate information"

# substrings that bump a symptom list to "medium" urgency
URGENT_SYMPTOM_KEYWORDS = ("severe", "pain", "breathing")

# =================================================================================================================================
# Vision (OpenAI) prompts
# =================================================================================================================================

IMAGE_ANALYSIS_SYSTEM_PROMPT = """You are an AI medical assistant that analyzes medical images.
Describe what you see in the image with medical accuracy but in terms
a patient can understand. Always add a disclaimer at the end that this
is not a formal medical diagnosis and should not replace professional
medical evaluation."""

DEFAULT_IMAGE_PROMPT = "Analyze this medical image and describe what you observe."

VISION_STATUS_PROMPT = "This is a test request. Respond with OK."
