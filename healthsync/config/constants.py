from enum import Enum


class Role(str, Enum):
    PATIENT = "patient"
    DOCTOR = "doctor"
    CARETAKER = "caretaker"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class BloodType(str, Enum):
    A_POS = "A+"
    A_NEG = "A-"
    B_POS = "B+"
    B_NEG = "B-"
    AB_POS = "AB+"
    AB_NEG = "AB-"
    O_POS = "O+"
    O_NEG = "O-"
    UNKNOWN = "unknown"


class VerificationStatus(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


class RecordType(str, Enum):
    VITAL_SIGNS = "vital_signs"
    LAB_RESULT = "lab_result"
    DIAGNOSTIC_IMAGE = "diagnostic_image"
    DOCTOR_NOTE = "doctor_note"
    PRESCRIPTION = "prescription"
    PROCEDURE = "procedure"
    ALLERGY = "allergy"
    VACCINATION = "vaccination"
    SYMPTOM_REPORT = "symptom_report"
    AI_ANALYSIS = "ai_analysis"


class MedicationStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    DISCONTINUED = "discontinued"
    ON_HOLD = "on_hold"


class AppointmentStatus(str, Enum):
    SCHEDULED = "scheduled"
    CANCELLED = "cancelled"
    COMPLETED = "completed"
    NO_SHOW = "no_show"
    RESCHEDULED = "rescheduled"


class AppointmentType(str, Enum):
    IN_PERSON = "in_person"
    VIDEO = "video"
    PHONE = "phone"


class UrgencyLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"


DEFAULT_CARETAKER_PERMISSIONS = ["view_basic_info"]

API_VERSION = "1.0.0"
