from datetime import datetime
from nutriapp.extensions import db
from nutriapp.models.base import SerializerMixin, new_id


class ProgressTracking(SerializerMixin, db.Model):
    __tablename__ = "progress_trackings"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    patient_id = db.Column(db.String(36), db.ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True)
    nutritionist_id = db.Column(db.String(36), db.ForeignKey("nutritionists.id", ondelete="CASCADE"), nullable=True, index=True)
    tracking_date = db.Column(db.Date, nullable=False, index=True)

    # Body metrics
    weight_kg = db.Column(db.Float, nullable=True)
    body_fat_percentage = db.Column(db.Float, nullable=True)
    muscle_mass_kg = db.Column(db.Float, nullable=True)
    waist_cm = db.Column(db.Float, nullable=True)
    hip_cm = db.Column(db.Float, nullable=True)
    chest_cm = db.Column(db.Float, nullable=True)
    arm_cm = db.Column(db.Float, nullable=True)
    thigh_cm = db.Column(db.Float, nullable=True)

    # Lifestyle
    water_intake_ml = db.Column(db.Integer, nullable=True)
    sleep_hours = db.Column(db.Float, nullable=True)
    exercise_minutes = db.Column(db.Integer, nullable=True)
    mood = db.Column(db.String(20), nullable=True)  # excellent, good, neutral, bad, terrible
    energy_level = db.Column(db.Integer, nullable=True)  # 1-10

    notes = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
