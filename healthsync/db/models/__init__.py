from .associations import PatientCaretakerModel, patient_doctors
from .user import UserModel
from .patient import PatientModel
from .doctor import DoctorModel
from .caretaker import CaretakerModel
from .health_record import HealthRecordModel
from .medication import MedicationModel
from .appointment import AppointmentModel

__all__ = [
    "UserModel",
    "PatientModel",
    "DoctorModel",
    "CaretakerModel",
    "PatientCaretakerModel",
    "patient_doctors",
    "HealthRecordModel",
    "MedicationModel",
    "AppointmentModel",
]
