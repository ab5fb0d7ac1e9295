from datetime import datetime
from nutriapp.extensions import db
from nutriapp.models.base import SerializerMixin, new_id

DIAGNOSIS_FLAGS = (
    "malnutrition",
    "underweight",
    "healthy_weight",
    "overweight",
    "obesity_1",
    "obesity_2",
    "obesity_3",
    "diabetes",
    "hypertension",
    "dyslipidemia",
    "nephropathy",
)


class Diagnosis(SerializerMixin, db.Model):
    __tablename__ = "diagnoses"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    patient_id = db.Column(db.String(36), db.ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True)
    nutritionist_id = db.Column(db.String(36), db.ForeignKey("nutritionists.id", ondelete="CASCADE"), nullable=True, index=True)

    malnutrition = db.Column(db.Boolean, nullable=False, default=False)
    underweight = db.Column(db.Boolean, nullable=False, default=False)
    healthy_weight = db.Column(db.Boolean, nullable=False, default=False)
    overweight = db.Column(db.Boolean, nullable=False, default=False)
    obesity_1 = db.Column(db.Boolean, nullable=False, default=False)
    obesity_2 = db.Column(db.Boolean, nullable=False, default=False)
    obesity_3 = db.Column(db.Boolean, nullable=False, default=False)
    diabetes = db.Column(db.Boolean, nullable=False, default=False)
    hypertension = db.Column(db.Boolean, nullable=False, default=False)
    dyslipidemia = db.Column(db.Boolean, nullable=False, default=False)
    nephropathy = db.Column(db.Boolean, nullable=False, default=False)
    other = db.Column(db.Text, nullable=True)

    diagnosed_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
