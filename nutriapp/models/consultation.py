from datetime import datetime
from nutriapp.extensions import db
from nutriapp.models.base import SerializerMixin, new_id


class Consultation(SerializerMixin, db.Model):
    __tablename__ = "consultations"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    patient_id = db.Column(db.String(36), db.ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True)
    nutritionist_id = db.Column(db.String(36), db.ForeignKey("nutritionists.id", ondelete="CASCADE"), nullable=True, index=True)
    consultation_date = db.Column(db.Date, nullable=False)
    consultation_type = db.Column(db.String(20), nullable=False)  # initial, follow_up, emergency
    weight_kg = db.Column(db.Float, nullable=True)
    height_cm = db.Column(db.Float, nullable=True)
    body_fat_percentage = db.Column(db.Float, nullable=True)
    muscle_mass_kg = db.Column(db.Float, nullable=True)
    blood_pressure = db.Column(db.String(20), nullable=True)
    notes = db.Column(db.Text, nullable=True)
    recommendations = db.Column(db.Text, nullable=True)
    next_appointment = db.Column(db.Date, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
