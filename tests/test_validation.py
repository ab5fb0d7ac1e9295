from datetime import date

from nutriapp.gateway.backends.base import TextSearch, escape_like
from nutriapp.schemas.appointment_schema import AppointmentSchema
from nutriapp.schemas.base import load_payload
from nutriapp.schemas.clinical_schema import AnthropometrySchema
from nutriapp.schemas.meal_plan_schema import MealPlanSchema
from nutriapp.schemas.patient_schema import PatientSchema
from nutriapp.services.bmi_service import calculate_bmi, with_anthropometry_bmi, with_patient_bmi
from nutriapp.utils.http import parse_iso_date


def test_calculate_bmi_rounds_half_up():
    assert calculate_bmi(65.5, 1.65) == 24.06
    assert calculate_bmi(70, 1.75) == 22.86
    assert calculate_bmi(None, 1.7) is None
    assert calculate_bmi(70, 0) is None


def test_anthropometry_bmi_merges_current_values():
    current = {"weight": 65.5, "height": 1.65, "bmi": 24.06}
    assert with_anthropometry_bmi({"weight": 70}, current)["bmi"] == 25.71
    # untouched when neither weight nor height changes
    assert "bmi" not in with_anthropometry_bmi({"patient_id": "p"}, current)


def test_patient_bmi_uses_centimeters():
    assert with_patient_bmi({"weight_kg": 65.5, "height_cm": 165}, None)["bmi"] == 24.06
    assert with_patient_bmi({"full_name": "Ana"}, None)["bmi"] is None


def test_patient_name_is_required_and_trimmed():
    data, errors = load_payload(PatientSchema(), {"full_name": "  Ana  "})
    assert errors is None and data["full_name"] == "Ana"

    data, errors = load_payload(PatientSchema(), {"full_name": "   "})
    assert data is None
    assert "full_name" in errors


def test_partial_update_keeps_absent_fields_out():
    data, errors = load_payload(PatientSchema(), {}, partial=True)
    assert errors is None and data == {}

    data, errors = load_payload(PatientSchema(), {"notes": "  "}, partial=True)
    assert data == {"notes": None}


def test_unknown_fields_are_dropped():
    data, errors = load_payload(PatientSchema(), {"full_name": "Ana", "id": "x", "created_at": "2024-01-01"})
    assert errors is None
    assert set(data) == {"full_name"}


def test_anthropometry_requires_positive_measurements():
    _, errors = load_payload(AnthropometrySchema(), {"patient_id": "p", "weight": 0, "height": 1.7})
    assert "weight" in errors
    _, errors = load_payload(AnthropometrySchema(), {"patient_id": "p", "weight": 60})
    assert "height" in errors


def test_appointment_defaults_to_pending():
    data, errors = load_payload(AppointmentSchema(), {"patient_id": "p", "date": "2030-01-02", "time": "09:30"})
    assert errors is None
    assert data["status"] == "Pending"
    assert data["date"] == date(2030, 1, 2)

    _, errors = load_payload(AppointmentSchema(), {"patient_id": "p", "date": "2030-01-02", "time": "9am"})
    assert "time" in errors


def test_meal_plan_end_date_not_before_start():
    payload = {"patient_id": "p", "name": "Plan", "start_date": "2024-02-01", "end_date": "2024-01-01"}
    _, errors = load_payload(MealPlanSchema(), payload)
    assert "end_date" in errors


def test_meal_plan_meals_are_validated():
    payload = {
        "patient_id": "p",
        "name": "Plan",
        "start_date": "2024-01-01",
        "meals": [{"meal_type": "brunch", "foods": []}],
    }
    _, errors = load_payload(MealPlanSchema(), payload)
    assert "meals" in errors


def test_like_metacharacters_are_escaped():
    assert escape_like("100%") == "100\\%"
    assert escape_like("a_b") == "a\\_b"
    assert escape_like("c:\\x") == "c:\\\\x"
    assert TextSearch(("full_name",), "50%").pattern == "%50\\%%"


def test_iso_dates_must_parse_completely():
    assert parse_iso_date("2024-01-31") == date(2024, 1, 31)
    assert parse_iso_date(" 2024-01-31 ") == date(2024, 1, 31)
    assert parse_iso_date("2024-01-01junk") is None
    assert parse_iso_date("2024-02-30") is None
    assert parse_iso_date(None) is None
