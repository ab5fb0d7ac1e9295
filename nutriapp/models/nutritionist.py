from datetime import datetime
from nutriapp.extensions import db
from nutriapp.models.base import SerializerMixin, new_id


class Nutritionist(SerializerMixin, db.Model):
    __tablename__ = "nutritionists"
    __hidden__ = ("password_hash",)

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    full_name = db.Column(db.String(150), nullable=False)
    password_hash = db.Column(db.String(255), nullable=True)
    license_number = db.Column(db.String(50), nullable=True)
    specialization = db.Column(db.String(120), nullable=True)
    phone = db.Column(db.String(30), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
