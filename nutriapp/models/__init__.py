from .nutritionist import Nutritionist
from .patient import Patient
from .diagnosis import Diagnosis
from .medical_record import MedicalRecordControl
from .anthropometry import Anthropometry
from .appointment import Appointment
from .consultation import Consultation
from .meal_plan import MealPlan
from .progress import ProgressTracking

__all__ = [
    "Nutritionist",
    "Patient",
    "Diagnosis",
    "MedicalRecordControl",
    "Anthropometry",
    "Appointment",
    "Consultation",
    "MealPlan",
    "ProgressTracking",
]
