from datetime import datetime
from sqlalchemy import DDL, event
from nutriapp.extensions import db
from nutriapp.models.base import SerializerMixin, new_id


class Anthropometry(SerializerMixin, db.Model):
    __tablename__ = "anthropometries"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    patient_id = db.Column(db.String(36), db.ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True)
    nutritionist_id = db.Column(db.String(36), db.ForeignKey("nutritionists.id", ondelete="CASCADE"), nullable=True, index=True)
    weight = db.Column(db.Float, nullable=False)  # kg
    height = db.Column(db.Float, nullable=False)  # meters
    bmi = db.Column(db.Float, nullable=True)  # maintained by trg_anthropometries_bmi
    measured_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.CheckConstraint("weight > 0", name="ck_anthropometries_weight_positive"),
        db.CheckConstraint("height > 0", name="ck_anthropometries_height_positive"),
    )


# BMI = weight / height^2 rounded to 2 decimals, same formula as services.bmi_service
SQLITE_BMI_TRIGGERS = (
    """
    CREATE TRIGGER IF NOT EXISTS trg_anthropometries_bmi_insert
    AFTER INSERT ON anthropometries
    BEGIN
        UPDATE anthropometries SET bmi = ROUND(NEW.weight / (NEW.height * NEW.height), 2)
        WHERE id = NEW.id;
    END
    """,
    """
    CREATE TRIGGER IF NOT EXISTS trg_anthropometries_bmi_update
    AFTER UPDATE OF weight, height ON anthropometries
    BEGIN
        UPDATE anthropometries SET bmi = ROUND(NEW.weight / (NEW.height * NEW.height), 2)
        WHERE id = NEW.id;
    END
    """,
)

POSTGRES_BMI_TRIGGER = (
    """
    CREATE OR REPLACE FUNCTION anthropometries_compute_bmi() RETURNS trigger AS $$
    BEGIN
        NEW.bmi := ROUND((NEW.weight / (NEW.height * NEW.height))::numeric, 2);
        RETURN NEW;
    END;
    $$ LANGUAGE plpgsql
    """,
    """
    CREATE TRIGGER trg_anthropometries_bmi
    BEFORE INSERT OR UPDATE OF weight, height ON anthropometries
    FOR EACH ROW EXECUTE FUNCTION anthropometries_compute_bmi()
    """,
)

for _statement in SQLITE_BMI_TRIGGERS:
    event.listen(Anthropometry.__table__, "after_create", DDL(_statement).execute_if(dialect="sqlite"))
for _statement in POSTGRES_BMI_TRIGGER:
    event.listen(Anthropometry.__table__, "after_create", DDL(_statement).execute_if(dialect="postgresql"))
