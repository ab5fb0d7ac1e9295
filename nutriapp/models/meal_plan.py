from datetime import datetime
from nutriapp.extensions import db
from nutriapp.models.base import SerializerMixin, new_id


class MealPlan(SerializerMixin, db.Model):
    __tablename__ = "meal_plans"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    patient_id = db.Column(db.String(36), db.ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True)
    nutritionist_id = db.Column(db.String(36), db.ForeignKey("nutritionists.id", ondelete="CASCADE"), nullable=True, index=True)
    name = db.Column(db.String(150), nullable=False)
    description = db.Column(db.Text, nullable=True)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=True)
    daily_calories = db.Column(db.Integer, nullable=True)
    daily_protein_g = db.Column(db.Float, nullable=True)
    daily_carbs_g = db.Column(db.Float, nullable=True)
    daily_fat_g = db.Column(db.Float, nullable=True)
    meals = db.Column(db.JSON, nullable=False, default=list)  # [{meal_type, time, foods: [...], notes}]
    notes = db.Column(db.Text, nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=False, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
