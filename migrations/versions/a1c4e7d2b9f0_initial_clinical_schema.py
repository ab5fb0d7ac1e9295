"""initial clinical schema

Revision ID: a1c4e7d2b9f0
Revises: 
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'a1c4e7d2b9f0'
down_revision = None
branch_labels = None
depends_on = None


def _id():
    return sa.Column('id', sa.String(length=36), primary_key=True)


def _patient_fk():
    return sa.Column('patient_id', sa.String(length=36), sa.ForeignKey('patients.id', ondelete='CASCADE'), nullable=False, index=True)


def _owner_fk():
    return sa.Column('nutritionist_id', sa.String(length=36), sa.ForeignKey('nutritionists.id', ondelete='CASCADE'), nullable=True, index=True)


def _timestamps(created='created_at'):
    return [
        sa.Column(created, sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('nutritionists'):
        op.create_table(
            'nutritionists',
            _id(),
            sa.Column('email', sa.String(length=120), nullable=False, unique=True, index=True),
            sa.Column('full_name', sa.String(length=150), nullable=False),
            sa.Column('password_hash', sa.String(length=255), nullable=True),
            sa.Column('license_number', sa.String(length=50), nullable=True),
            sa.Column('specialization', sa.String(length=120), nullable=True),
            sa.Column('phone', sa.String(length=30), nullable=True),
            *_timestamps(),
        )

    if not insp.has_table('patients'):
        op.create_table(
            'patients',
            _id(),
            _owner_fk(),
            sa.Column('full_name', sa.String(length=150), nullable=False),
            sa.Column('control_number', sa.String(length=50), nullable=True, index=True),
            sa.Column('email', sa.String(length=120), nullable=True),
            sa.Column('phone', sa.String(length=30), nullable=True),
            sa.Column('date_of_birth', sa.Date(), nullable=True),
            sa.Column('age', sa.Integer(), nullable=True),
            sa.Column('gender', sa.String(length=10), nullable=True),
            sa.Column('career', sa.String(length=120), nullable=True),
            sa.Column('height_cm', sa.Float(), nullable=True),
            sa.Column('weight_kg', sa.Float(), nullable=True),
            sa.Column('bmi', sa.Float(), nullable=True),
            sa.Column('body_fat_percentage', sa.Float(), nullable=True),
            sa.Column('muscle_mass_kg', sa.Float(), nullable=True),
            sa.Column('waist_cm', sa.Float(), nullable=True),
            sa.Column('hip_cm', sa.Float(), nullable=True),
            sa.Column('medical_conditions', sa.Text(), nullable=True),
            sa.Column('allergies', sa.Text(), nullable=True),
            sa.Column('dietary_restrictions', sa.Text(), nullable=True),
            sa.Column('goals', sa.Text(), nullable=True),
            sa.Column('notes', sa.Text(), nullable=True),
            sa.Column('photo_path', sa.String(length=500), nullable=True),
            sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.true(), index=True),
            *_timestamps(),
        )

    if not insp.has_table('diagnoses'):
        flags = [
            'malnutrition', 'underweight', 'healthy_weight', 'overweight',
            'obesity_1', 'obesity_2', 'obesity_3',
            'diabetes', 'hypertension', 'dyslipidemia', 'nephropathy',
        ]
        op.create_table(
            'diagnoses',
            _id(),
            _patient_fk(),
            _owner_fk(),
            *[sa.Column(flag, sa.Boolean(), nullable=False, server_default=sa.false()) for flag in flags],
            sa.Column('other', sa.Text(), nullable=True),
            *_timestamps(created='diagnosed_at'),
        )

    if not insp.has_table('medical_record_controls'):
        op.create_table(
            'medical_record_controls',
            _id(),
            _patient_fk(),
            _owner_fk(),
            sa.Column('orientations', sa.Text(), nullable=True),
            sa.Column('hcn', sa.Text(), nullable=True),
            sa.Column('meal_plan_type', sa.Text(), nullable=True),
            sa.Column('first_visit', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('follow_up', sa.Boolean(), nullable=False, server_default=sa.false()),
            *_timestamps(),
        )

    if not insp.has_table('anthropometries'):
        op.create_table(
            'anthropometries',
            _id(),
            _patient_fk(),
            _owner_fk(),
            sa.Column('weight', sa.Float(), nullable=False),
            sa.Column('height', sa.Float(), nullable=False),
            sa.Column('bmi', sa.Float(), nullable=True),
            sa.Column('measured_at', sa.DateTime(), server_default=sa.func.now(), nullable=False, index=True),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.CheckConstraint('weight > 0', name='ck_anthropometries_weight_positive'),
            sa.CheckConstraint('height > 0', name='ck_anthropometries_height_positive'),
        )
        if conn.dialect.name == 'postgresql':
            from nutriapp.models.anthropometry import POSTGRES_BMI_TRIGGER
            for statement in POSTGRES_BMI_TRIGGER:
                op.execute(statement)
        elif conn.dialect.name == 'sqlite':
            from nutriapp.models.anthropometry import SQLITE_BMI_TRIGGERS
            for statement in SQLITE_BMI_TRIGGERS:
                op.execute(statement)

    if not insp.has_table('appointments'):
        op.create_table(
            'appointments',
            _id(),
            _patient_fk(),
            _owner_fk(),
            sa.Column('date', sa.Date(), nullable=False, index=True),
            sa.Column('time', sa.String(length=8), nullable=False),
            sa.Column('doctor_area', sa.String(length=150), nullable=True),
            sa.Column('reason', sa.Text(), nullable=True),
            sa.Column('status', sa.String(length=20), nullable=False, server_default='Pending'),
            *_timestamps(),
        )

    if not insp.has_table('consultations'):
        op.create_table(
            'consultations',
            _id(),
            _patient_fk(),
            _owner_fk(),
            sa.Column('consultation_date', sa.Date(), nullable=False),
            sa.Column('consultation_type', sa.String(length=20), nullable=False),
            sa.Column('weight_kg', sa.Float(), nullable=True),
            sa.Column('height_cm', sa.Float(), nullable=True),
            sa.Column('body_fat_percentage', sa.Float(), nullable=True),
            sa.Column('muscle_mass_kg', sa.Float(), nullable=True),
            sa.Column('blood_pressure', sa.String(length=20), nullable=True),
            sa.Column('notes', sa.Text(), nullable=True),
            sa.Column('recommendations', sa.Text(), nullable=True),
            sa.Column('next_appointment', sa.Date(), nullable=True),
            *_timestamps(),
        )

    if not insp.has_table('meal_plans'):
        op.create_table(
            'meal_plans',
            _id(),
            _patient_fk(),
            _owner_fk(),
            sa.Column('name', sa.String(length=150), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('start_date', sa.Date(), nullable=False),
            sa.Column('end_date', sa.Date(), nullable=True),
            sa.Column('daily_calories', sa.Integer(), nullable=True),
            sa.Column('daily_protein_g', sa.Float(), nullable=True),
            sa.Column('daily_carbs_g', sa.Float(), nullable=True),
            sa.Column('daily_fat_g', sa.Float(), nullable=True),
            sa.Column('meals', sa.JSON(), nullable=False),
            sa.Column('notes', sa.Text(), nullable=True),
            sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.false(), index=True),
            *_timestamps(),
        )

    if not insp.has_table('progress_trackings'):
        op.create_table(
            'progress_trackings',
            _id(),
            _patient_fk(),
            _owner_fk(),
            sa.Column('tracking_date', sa.Date(), nullable=False, index=True),
            sa.Column('weight_kg', sa.Float(), nullable=True),
            sa.Column('body_fat_percentage', sa.Float(), nullable=True),
            sa.Column('muscle_mass_kg', sa.Float(), nullable=True),
            sa.Column('waist_cm', sa.Float(), nullable=True),
            sa.Column('hip_cm', sa.Float(), nullable=True),
            sa.Column('chest_cm', sa.Float(), nullable=True),
            sa.Column('arm_cm', sa.Float(), nullable=True),
            sa.Column('thigh_cm', sa.Float(), nullable=True),
            sa.Column('water_intake_ml', sa.Integer(), nullable=True),
            sa.Column('sleep_hours', sa.Float(), nullable=True),
            sa.Column('exercise_minutes', sa.Integer(), nullable=True),
            sa.Column('mood', sa.String(length=20), nullable=True),
            sa.Column('energy_level', sa.Integer(), nullable=True),
            sa.Column('notes', sa.Text(), nullable=True),
            *_timestamps(),
        )


def downgrade():
    conn = op.get_bind()
    if conn.dialect.name == 'postgresql':
        op.execute('DROP TRIGGER IF EXISTS trg_anthropometries_bmi ON anthropometries')
        op.execute('DROP FUNCTION IF EXISTS anthropometries_compute_bmi()')
    for table in (
        'progress_trackings', 'meal_plans', 'consultations', 'appointments',
        'anthropometries', 'medical_record_controls', 'diagnoses', 'patients', 'nutritionists',
    ):
        op.execute(f'DROP TABLE IF EXISTS {table}')
