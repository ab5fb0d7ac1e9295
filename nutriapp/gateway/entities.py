"""
Entity descriptions consumed by the generic gateway.

An ``Entity`` says which table to use, how to validate writes, how to order
and search rows, and how records hang off their parent patient.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from marshmallow import Schema

from nutriapp.gateway.backends.base import Order
from nutriapp.schemas.appointment_schema import AppointmentSchema
from nutriapp.schemas.auth_schema import NutritionistSchema
from nutriapp.schemas.clinical_schema import AnthropometrySchema, DiagnosisSchema, MedicalRecordControlSchema
from nutriapp.schemas.consultation_schema import ConsultationSchema
from nutriapp.schemas.meal_plan_schema import MealPlanSchema
from nutriapp.schemas.patient_schema import PatientSchema
from nutriapp.schemas.progress_schema import ProgressTrackingSchema
from nutriapp.services.bmi_service import with_anthropometry_bmi, with_patient_bmi
from nutriapp.utils.enums import BmiSource

# (values, current_row_or_None) -> values
PrepareHook = Callable[[Dict[str, Any], Optional[Dict[str, Any]]], Dict[str, Any]]

OWNER_COLUMN = "nutritionist_id"


@dataclass(frozen=True)
class Entity:
    name: str
    table: str
    label: str
    create_schema: Schema
    update_schema: Schema
    order: Tuple[Order, ...]
    search_columns: Tuple[str, ...] = ()
    parent_column: Optional[str] = None
    parent_order: Tuple[Order, ...] = ()
    latest_order: Tuple[Order, ...] = ()
    soft_delete_column: Optional[str] = None
    owner_column: Optional[str] = OWNER_COLUMN
    hidden_fields: Tuple[str, ...] = ()
    timestamp_column: str = "updated_at"
    prepare: Optional[PrepareHook] = field(default=None, compare=False)


def _child_schemas(schema_cls):
    return schema_cls(), schema_cls(exclude=("patient_id",))


def build_entities(bmi_source: str = BmiSource.APPLICATION.value) -> Dict[str, Entity]:
    """Entity registry for the canonical (English, normalized) schema."""
    anthropometry_prepare = with_anthropometry_bmi if bmi_source == BmiSource.APPLICATION.value else None

    diagnosis_create, diagnosis_update = _child_schemas(DiagnosisSchema)
    control_create, control_update = _child_schemas(MedicalRecordControlSchema)
    anthro_create, anthro_update = _child_schemas(AnthropometrySchema)
    appointment_create, appointment_update = _child_schemas(AppointmentSchema)
    consultation_create, consultation_update = _child_schemas(ConsultationSchema)
    plan_create, plan_update = _child_schemas(MealPlanSchema)
    progress_create, progress_update = _child_schemas(ProgressTrackingSchema)

    entities = [
        Entity(
            name="nutritionists",
            table="nutritionists",
            label="Nutritionist",
            create_schema=NutritionistSchema(),
            update_schema=NutritionistSchema(exclude=("email", "password_hash")),
            order=(("created_at", False),),
            owner_column=None,
            hidden_fields=("password_hash",),
        ),
        Entity(
            name="patients",
            table="patients",
            label="Patient",
            create_schema=PatientSchema(),
            update_schema=PatientSchema(),
            order=(("created_at", False),),
            search_columns=("full_name", "email", "control_number"),
            soft_delete_column="active",
            prepare=with_patient_bmi,
        ),
        Entity(
            name="diagnoses",
            table="diagnoses",
            label="Diagnosis",
            create_schema=diagnosis_create,
            update_schema=diagnosis_update,
            order=(("diagnosed_at", False),),
            parent_column="patient_id",
            latest_order=(("diagnosed_at", False),),
        ),
        Entity(
            name="medical_records",
            table="medical_record_controls",
            label="Medical records control",
            create_schema=control_create,
            update_schema=control_update,
            order=(("created_at", False),),
            parent_column="patient_id",
            latest_order=(("created_at", False),),
        ),
        Entity(
            name="anthropometry",
            table="anthropometries",
            label="Anthropometry",
            create_schema=anthro_create,
            update_schema=anthro_update,
            order=(("measured_at", False),),
            parent_column="patient_id",
            latest_order=(("measured_at", False),),
            prepare=anthropometry_prepare,
        ),
        Entity(
            name="appointments",
            table="appointments",
            label="Appointment",
            create_schema=appointment_create,
            update_schema=appointment_update,
            order=(("date", True), ("time", True)),
            parent_column="patient_id",
            parent_order=(("date", False), ("time", True)),
        ),
        Entity(
            name="consultations",
            table="consultations",
            label="Consultation",
            create_schema=consultation_create,
            update_schema=consultation_update,
            order=(("consultation_date", False),),
            parent_column="patient_id",
        ),
        Entity(
            name="meal_plans",
            table="meal_plans",
            label="Meal plan",
            create_schema=plan_create,
            update_schema=plan_update,
            order=(("created_at", False),),
            parent_column="patient_id",
        ),
        Entity(
            name="progress",
            table="progress_trackings",
            label="Progress tracking",
            create_schema=progress_create,
            update_schema=progress_update,
            order=(("tracking_date", False),),
            parent_column="patient_id",
            latest_order=(("tracking_date", False),),
        ),
    ]
    return {entity.name: entity for entity in entities}
