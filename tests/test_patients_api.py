from nutriapp.extensions import db
from nutriapp.models import Patient

from conftest import auth_headers, create_patient


def test_patient_crud(client):
    headers = auth_headers(client, "crud@example.com")

    patient = create_patient(client, headers, full_name="  Carlos Ruiz ", height_cm=165, weight_kg=65.5)
    assert patient["full_name"] == "Carlos Ruiz"
    assert patient["bmi"] == 24.06
    assert patient["active"] is True
    assert len(patient["id"]) == 36

    r = client.get(f"/api/patients/{patient['id']}", headers=headers)
    assert r.status_code == 200
    assert r.get_json()["full_name"] == "Carlos Ruiz"

    r = client.put(f"/api/patients/{patient['id']}", headers=headers, json={"weight_kg": 70})
    assert r.status_code == 200
    updated = r.get_json()
    assert updated["weight_kg"] == 70
    assert updated["bmi"] == 25.71
    assert updated["full_name"] == "Carlos Ruiz"

    r = client.get("/api/patients", headers=headers)
    assert [p["id"] for p in r.get_json()] == [patient["id"]]


def test_create_requires_name(client):
    headers = auth_headers(client, "crud@example.com")
    r = client.post("/api/patients", headers=headers, json={"full_name": "   "})
    assert r.status_code == 400
    assert "full_name" in r.get_json()["error"]["details"]

    r = client.post("/api/patients", headers=headers, json={"full_name": "Ok", "email": "bad"})
    assert r.status_code == 400


def test_empty_update_leaves_record_unchanged(client):
    headers = auth_headers(client, "crud@example.com")
    patient = create_patient(client, headers, full_name="Same Name", phone="555-1234")

    r = client.put(f"/api/patients/{patient['id']}", headers=headers, json={})
    assert r.status_code == 200
    body = r.get_json()
    for key in ("full_name", "phone", "bmi", "active", "created_at"):
        assert body[key] == patient[key]


def test_update_missing_patient(client):
    headers = auth_headers(client, "crud@example.com")
    r = client.put("/api/patients/00000000-0000-0000-0000-000000000000", headers=headers, json={"notes": "x"})
    assert r.status_code == 404
    assert r.get_json()["error"]["message"] == "Patient not found"


def test_soft_delete(client, app):
    headers = auth_headers(client, "crud@example.com")
    patient = create_patient(client, headers, full_name="To Remove")

    r = client.delete(f"/api/patients/{patient['id']}", headers=headers)
    assert r.status_code == 204
    assert r.data == b""

    r = client.get("/api/patients", headers=headers)
    assert patient["id"] not in [p["id"] for p in r.get_json()]

    # the row is kept, only flagged inactive
    with app.app_context():
        row = db.session.get(Patient, patient["id"])
        assert row is not None and row.active is False

    assert client.delete("/api/patients/00000000-0000-0000-0000-000000000000", headers=headers).status_code == 404


def test_search_is_case_insensitive_and_literal(client):
    headers = auth_headers(client, "search@example.com")
    promo = create_patient(client, headers, full_name="Promo 100% off")
    create_patient(client, headers, full_name="Promo 1000 off")
    under = create_patient(client, headers, full_name="Jose_Luis")
    create_patient(client, headers, full_name="JoseXLuis")
    by_email = create_patient(client, headers, full_name="Email Match", email="Lucia@Clinic.com")

    r = client.get("/api/patients/search?term=100%25", headers=headers)
    assert r.status_code == 200
    assert [p["id"] for p in r.get_json()] == [promo["id"]]

    r = client.get("/api/patients/search?term=jose_", headers=headers)
    assert [p["id"] for p in r.get_json()] == [under["id"]]

    r = client.get("/api/patients/search?term=lucia@clinic", headers=headers)
    assert [p["id"] for p in r.get_json()] == [by_email["id"]]

    r = client.get("/api/patients/search?term=%20%20", headers=headers)
    assert r.status_code == 400
