from datetime import date, timedelta

from conftest import auth_headers, create_patient


def _setup(client, email="clinic@example.com", **patient_fields):
    headers = auth_headers(client, email)
    patient = create_patient(client, headers, **patient_fields)
    return headers, patient


def test_diagnosis_upsert(client):
    headers, patient = _setup(client)
    url = f"/api/patients/{patient['id']}/diagnosis"

    r = client.get(url, headers=headers)
    assert r.status_code == 200
    assert r.get_json() is None

    r = client.put(url, headers=headers, json={"diabetes": True, "other": "Anemia"})
    assert r.status_code == 201
    first = r.get_json()
    assert first["diabetes"] is True and first["hypertension"] is False
    assert first["patient_id"] == patient["id"]

    r = client.put(url, headers=headers, json={"hypertension": True})
    assert r.status_code == 200
    second = r.get_json()
    assert second["id"] == first["id"]
    assert second["diabetes"] is True and second["hypertension"] is True

    r = client.get(url, headers=headers)
    assert r.get_json()["id"] == first["id"]


def test_medical_records_upsert(client):
    headers, patient = _setup(client)
    url = f"/api/patients/{patient['id']}/medical-records"

    r = client.put(url, headers=headers, json={"first_visit": True, "orientations": "Drink water"})
    assert r.status_code == 201
    r = client.put(url, headers=headers, json={"follow_up": True})
    assert r.status_code == 200
    body = r.get_json()
    assert body["first_visit"] is True and body["follow_up"] is True
    assert body["orientations"] == "Drink water"


def test_anthropometry_bmi_from_application(client):
    headers, patient = _setup(client)
    base = f"/api/patients/{patient['id']}/anthropometry"

    r = client.post(base, headers=headers, json={"weight": 65.5, "height": 1.65})
    assert r.status_code == 201
    measurement = r.get_json()
    assert measurement["bmi"] == 24.06

    r = client.put(f"/api/anthropometry/{measurement['id']}", headers=headers, json={"weight": 70})
    assert r.status_code == 200
    assert r.get_json()["bmi"] == 25.71
    assert r.get_json()["height"] == 1.65

    r = client.post(base, headers=headers, json={"weight": 0, "height": 1.65})
    assert r.status_code == 400

    r = client.get(f"{base}/history", headers=headers)
    assert r.status_code == 200
    assert [m["id"] for m in r.get_json()] == [measurement["id"]]

    r = client.get(base, headers=headers)
    assert r.get_json()["id"] == measurement["id"]


def test_anthropometry_upsert(client):
    headers, patient = _setup(client)
    base = f"/api/patients/{patient['id']}/anthropometry"

    r = client.put(base, headers=headers, json={"weight": 80, "height": 1.8})
    assert r.status_code == 201
    r = client.put(base, headers=headers, json={"height": 1.75})
    assert r.status_code == 200
    assert r.get_json()["bmi"] == 26.12


def test_appointments(client):
    headers, patient = _setup(client)
    today = date.today()
    past = (today - timedelta(days=10)).isoformat()
    soon = (today + timedelta(days=2)).isoformat()
    later = (today + timedelta(days=9)).isoformat()

    created = {}
    for label, day, time in (("past", past, "09:00"), ("later", later, "08:00"), ("soon_b", soon, "16:00"), ("soon_a", soon, "10:30")):
        r = client.post("/api/appointments", headers=headers, json={
            "patient_id": patient["id"], "date": day, "time": time, "reason": label,
        })
        assert r.status_code == 201, r.get_json()
        created[label] = r.get_json()

    assert created["past"]["status"] == "Pending"

    r = client.get("/api/appointments/upcoming", headers=headers)
    assert r.status_code == 200
    upcoming = [a["reason"] for a in r.get_json() if a["patient_id"] == patient["id"]]
    assert upcoming == ["soon_a", "soon_b", "later"]

    r = client.get(f"/api/patients/{patient['id']}/appointments", headers=headers)
    assert [a["reason"] for a in r.get_json()] == ["later", "soon_a", "soon_b", "past"]

    appointment_id = created["soon_a"]["id"]
    r = client.put(f"/api/appointments/{appointment_id}", headers=headers, json={"status": "Confirmed"})
    assert r.status_code == 200
    assert r.get_json()["status"] == "Confirmed"
    assert r.get_json()["time"] == "10:30"

    r = client.put(f"/api/appointments/{appointment_id}", headers=headers, json={"status": "Maybe"})
    assert r.status_code == 400

    r = client.delete(f"/api/appointments/{appointment_id}", headers=headers)
    assert r.status_code == 204
    assert client.get(f"/api/appointments/{appointment_id}", headers=headers).status_code == 404


def test_child_of_unknown_patient(client):
    headers = auth_headers(client, "clinic@example.com")
    r = client.post("/api/consultations", headers=headers, json={
        "patient_id": "00000000-0000-0000-0000-000000000000",
        "consultation_date": "2024-05-01",
        "consultation_type": "initial",
    })
    assert r.status_code == 404


def test_consultations(client):
    headers, patient = _setup(client)
    for day in ("2024-01-10", "2024-03-10"):
        r = client.post("/api/consultations", headers=headers, json={
            "patient_id": patient["id"],
            "consultation_date": day,
            "consultation_type": "follow_up",
            "weight_kg": 70.2,
            "blood_pressure": "120/80",
        })
        assert r.status_code == 201

    r = client.get(f"/api/patients/{patient['id']}/consultations", headers=headers)
    assert [c["consultation_date"] for c in r.get_json()] == ["2024-03-10", "2024-01-10"]

    r = client.post("/api/consultations", headers=headers, json={
        "patient_id": patient["id"], "consultation_date": "2024-01-10", "consultation_type": "checkup",
    })
    assert r.status_code == 400


def _plan(client, headers, patient_id, name, active):
    r = client.post("/api/meal-plans", headers=headers, json={
        "patient_id": patient_id,
        "name": name,
        "start_date": "2024-01-01",
        "daily_calories": 1800,
        "meals": [{"meal_type": "breakfast", "time": "08:00", "foods": [{"name": "Oats", "quantity": 60, "unit": "g"}]}],
        "is_active": active,
    })
    assert r.status_code == 201, r.get_json()
    return r.get_json()


def test_single_active_meal_plan(client):
    headers, patient = _setup(client)
    other_headers, other_patient = _setup(client, email="clinic@example.com", full_name="Other Patient")

    first = _plan(client, headers, patient["id"], "Phase 1", True)
    untouched = _plan(client, other_headers, other_patient["id"], "Other plan", True)
    second = _plan(client, headers, patient["id"], "Phase 2", True)

    plans = {p["id"]: p for p in client.get(f"/api/patients/{patient['id']}/meal-plans", headers=headers).get_json()}
    assert plans[first["id"]]["is_active"] is False
    assert plans[second["id"]]["is_active"] is True

    r = client.get(f"/api/patients/{patient['id']}/meal-plans/active", headers=headers)
    assert r.get_json()["id"] == second["id"]

    r = client.patch(f"/api/meal-plans/{first['id']}/activate", headers=headers)
    assert r.status_code == 200
    assert r.get_json()["is_active"] is True
    assert client.get(f"/api/meal-plans/{second['id']}", headers=headers).get_json()["is_active"] is False

    # other patients' plans are not affected
    assert client.get(f"/api/meal-plans/{untouched['id']}", headers=headers).get_json()["is_active"] is True

    r = client.put(f"/api/meal-plans/{second['id']}", headers=headers, json={"is_active": True})
    assert r.status_code == 200
    assert client.get(f"/api/meal-plans/{first['id']}", headers=headers).get_json()["is_active"] is False


def test_invalid_meal_plan_does_not_deactivate(client):
    headers, patient = _setup(client)
    active = _plan(client, headers, patient["id"], "Current", True)

    r = client.post("/api/meal-plans", headers=headers, json={
        "patient_id": patient["id"], "name": "", "start_date": "2024-01-01", "is_active": True,
    })
    assert r.status_code == 400
    assert client.get(f"/api/meal-plans/{active['id']}", headers=headers).get_json()["is_active"] is True


def test_active_meal_plan_missing(client):
    headers, patient = _setup(client)
    r = client.get(f"/api/patients/{patient['id']}/meal-plans/active", headers=headers)
    assert r.status_code == 404


def test_progress(client):
    headers, patient = _setup(client)
    base = f"/api/patients/{patient['id']}/progress"

    r = client.get(f"{base}/latest", headers=headers)
    assert r.status_code == 404

    for day, weight in (("2024-03-01", 68.0), ("2024-01-01", 72.5), ("2024-02-01", 70.1)):
        r = client.post("/api/progress", headers=headers, json={
            "patient_id": patient["id"], "tracking_date": day, "weight_kg": weight, "mood": "good",
        })
        assert r.status_code == 201, r.get_json()

    r = client.get(f"{base}/latest", headers=headers)
    assert r.get_json()["tracking_date"] == "2024-03-01"

    r = client.get(f"{base}/range?start=2024-01-15&end=2024-03-01", headers=headers)
    assert r.status_code == 200
    assert [p["tracking_date"] for p in r.get_json()] == ["2024-02-01", "2024-03-01"]

    r = client.get(base, headers=headers)
    assert [p["tracking_date"] for p in r.get_json()] == ["2024-03-01", "2024-02-01", "2024-01-01"]

    assert client.get(f"{base}/range?start=2024-03-01&end=2024-01-01", headers=headers).status_code == 400
    assert client.get(f"{base}/range?start=2024-03-01", headers=headers).status_code == 400
    assert client.get(f"{base}/range?start=yesterday&end=2024-01-01", headers=headers).status_code == 400

    r = client.post("/api/progress", headers=headers, json={
        "patient_id": patient["id"], "tracking_date": "2024-04-01", "energy_level": 11,
    })
    assert r.status_code == 400


def test_meal_plan_update_keeps_date_range(client):
    headers, patient = _setup(client)
    r = client.post("/api/meal-plans", headers=headers, json={
        "patient_id": patient["id"], "name": "Summer", "start_date": "2024-05-01", "end_date": "2024-06-01",
    })
    assert r.status_code == 201
    plan = r.get_json()

    r = client.put(f"/api/meal-plans/{plan['id']}", headers=headers, json={"end_date": "2024-01-01"})
    assert r.status_code == 400
    assert "end_date" in r.get_json()["error"]["details"]

    r = client.put(f"/api/meal-plans/{plan['id']}", headers=headers, json={"start_date": "2024-07-01"})
    assert r.status_code == 400

    stored = client.get(f"/api/meal-plans/{plan['id']}", headers=headers).get_json()
    assert stored["start_date"] == "2024-05-01" and stored["end_date"] == "2024-06-01"

    r = client.put(f"/api/meal-plans/{plan['id']}", headers=headers, json={"end_date": "2024-05-15"})
    assert r.status_code == 200
    assert r.get_json()["end_date"] == "2024-05-15"

    r = client.put(f"/api/meal-plans/{plan['id']}", headers=headers, json={"end_date": None})
    assert r.status_code == 200
    assert r.get_json()["end_date"] is None


def test_upcoming_consultations(client):
    headers, patient = _setup(client)
    today = date.today()
    for offset in (-1, 10, 2, 0):
        r = client.post("/api/consultations", headers=headers, json={
            "patient_id": patient["id"],
            "consultation_date": (today + timedelta(days=offset)).isoformat(),
            "consultation_type": "follow_up",
        })
        assert r.status_code == 201

    def upcoming(query=""):
        r = client.get(f"/api/consultations/upcoming{query}", headers=headers)
        assert r.status_code == 200
        return [c["consultation_date"] for c in r.get_json() if c["patient_id"] == patient["id"]]

    expected_week = [today.isoformat(), (today + timedelta(days=2)).isoformat()]
    assert upcoming() == expected_week
    assert upcoming("?days=14") == expected_week + [(today + timedelta(days=10)).isoformat()]
    assert upcoming("?days=soon") == expected_week
    assert upcoming("?days=-5") == [today.isoformat()]

    assert client.get("/api/consultations/upcoming").status_code == 401


def test_progress_range_rejects_trailing_garbage(client):
    headers, patient = _setup(client)
    r = client.get(
        f"/api/patients/{patient['id']}/progress/range?start=2024-01-01junk&end=2024-02-01xyz",
        headers=headers,
    )
    assert r.status_code == 400
