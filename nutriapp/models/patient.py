from datetime import datetime
from nutriapp.extensions import db
from nutriapp.models.base import SerializerMixin, new_id


class Patient(SerializerMixin, db.Model):
    __tablename__ = "patients"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    nutritionist_id = db.Column(db.String(36), db.ForeignKey("nutritionists.id", ondelete="CASCADE"), nullable=True, index=True)
    full_name = db.Column(db.String(150), nullable=False)
    control_number = db.Column(db.String(50), nullable=True, index=True)
    email = db.Column(db.String(120), nullable=True)
    phone = db.Column(db.String(30), nullable=True)
    date_of_birth = db.Column(db.Date, nullable=True)
    age = db.Column(db.Integer, nullable=True)
    gender = db.Column(db.String(10), nullable=True)  # male, female, other
    career = db.Column(db.String(120), nullable=True)

    # Anthropometry snapshot
    height_cm = db.Column(db.Float, nullable=True)
    weight_kg = db.Column(db.Float, nullable=True)
    bmi = db.Column(db.Float, nullable=True)
    body_fat_percentage = db.Column(db.Float, nullable=True)
    muscle_mass_kg = db.Column(db.Float, nullable=True)
    waist_cm = db.Column(db.Float, nullable=True)
    hip_cm = db.Column(db.Float, nullable=True)

    medical_conditions = db.Column(db.Text, nullable=True)
    allergies = db.Column(db.Text, nullable=True)
    dietary_restrictions = db.Column(db.Text, nullable=True)
    goals = db.Column(db.Text, nullable=True)
    notes = db.Column(db.Text, nullable=True)
    photo_path = db.Column(db.String(500), nullable=True)

    active = db.Column(db.Boolean, nullable=False, default=True, index=True)  # Soft delete
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
