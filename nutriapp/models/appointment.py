from datetime import datetime
from nutriapp.extensions import db
from nutriapp.models.base import SerializerMixin, new_id
from nutriapp.utils.enums import AppointmentStatus


class Appointment(SerializerMixin, db.Model):
    __tablename__ = "appointments"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    patient_id = db.Column(db.String(36), db.ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True)
    nutritionist_id = db.Column(db.String(36), db.ForeignKey("nutritionists.id", ondelete="CASCADE"), nullable=True, index=True)
    date = db.Column(db.Date, nullable=False, index=True)
    time = db.Column(db.String(8), nullable=False)  # HH:MM[:SS]
    doctor_area = db.Column(db.String(150), nullable=True)
    reason = db.Column(db.Text, nullable=True)
    status = db.Column(db.String(20), nullable=False, default=AppointmentStatus.PENDING.value)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
