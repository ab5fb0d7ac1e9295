from datetime import date, timedelta

from nutriapp import create_app
from nutriapp.extensions import db
from nutriapp.models import Anthropometry, Appointment, MealPlan, Nutritionist, Patient
from nutriapp.services.bmi_service import calculate_bmi
from nutriapp.utils.auth import hash_password

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    nutritionist = Nutritionist.query.filter_by(email="demo@nutriapp.local").first()
    if not nutritionist:
        nutritionist = Nutritionist(
            email="demo@nutriapp.local",
            full_name="Demo Nutritionist",
            password_hash=hash_password("secret123"),
            specialization="Clinical nutrition",
        )
        db.session.add(nutritionist)
        db.session.flush()
        print("Created demo nutritionist demo@nutriapp.local / secret123")

    def add_patient(full_name, control_number, height_cm, weight_kg, **extra):
        patient = Patient.query.filter_by(control_number=control_number).first()
        if patient:
            return patient
        patient = Patient(
            nutritionist_id=nutritionist.id,
            full_name=full_name,
            control_number=control_number,
            height_cm=height_cm,
            weight_kg=weight_kg,
            bmi=calculate_bmi(weight_kg, height_cm / 100),
            **extra,
        )
        db.session.add(patient)
        db.session.flush()
        db.session.add(Anthropometry(
            patient_id=patient.id,
            nutritionist_id=nutritionist.id,
            weight=weight_kg,
            height=height_cm / 100,
            bmi=calculate_bmi(weight_kg, height_cm / 100),
        ))
        return patient

    ana = add_patient("Ana Torres", "NC-0001", 165, 65.5, gender="female", age=34, email="ana@example.com")
    luis = add_patient("Luis Pérez", "NC-0002", 178, 92.0, gender="male", age=45, goals="Lose 8 kg")

    if not Appointment.query.filter_by(patient_id=ana.id).first():
        db.session.add(Appointment(
            patient_id=ana.id,
            nutritionist_id=nutritionist.id,
            date=date.today() + timedelta(days=3),
            time="10:30",
            doctor_area="Nutrition",
            reason="Follow-up",
        ))

    if not MealPlan.query.filter_by(patient_id=luis.id).first():
        db.session.add(MealPlan(
            patient_id=luis.id,
            nutritionist_id=nutritionist.id,
            name="Weight loss phase 1",
            start_date=date.today(),
            daily_calories=1800,
            meals=[
                {"meal_type": "breakfast", "time": "08:00", "foods": [{"name": "Oatmeal", "quantity": 60, "unit": "g"}]},
                {"meal_type": "lunch", "time": "14:00", "foods": [{"name": "Grilled chicken", "quantity": 150, "unit": "g"}]},
            ],
            is_active=True,
        ))

    db.session.commit()
    print("Seed completed")
