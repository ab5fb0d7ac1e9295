from datetime import datetime
from nutriapp.extensions import db
from nutriapp.models.base import SerializerMixin, new_id


class MedicalRecordControl(SerializerMixin, db.Model):
    __tablename__ = "medical_record_controls"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    patient_id = db.Column(db.String(36), db.ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True)
    nutritionist_id = db.Column(db.String(36), db.ForeignKey("nutritionists.id", ondelete="CASCADE"), nullable=True, index=True)
    orientations = db.Column(db.Text, nullable=True)
    hcn = db.Column(db.Text, nullable=True)
    meal_plan_type = db.Column(db.Text, nullable=True)
    first_visit = db.Column(db.Boolean, nullable=False, default=False)
    follow_up = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
