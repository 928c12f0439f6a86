import pytest
import api

@pytest.fixture
def client():
    api.app.config["TESTING"] = True
    with api.app.test_client() as client:
        resp = client.post("/api/initialize")
        assert resp.status_code == 200
        yield client
    api.service = None

def admit(client, **body):
    return client.post("/api/patient/admit", json=body)

def test_health_and_index(client):
    resp = client.get("/api/health")
    assert resp.get_json() == {"status": "healthy", "service_initialized": True}
    assert "endpoints" in client.get("/").get_json()

def test_requires_initialization(monkeypatch):
    monkeypatch.setattr(api, "service", None)
    client = api.app.test_client()
    assert client.post("/api/patient/treat-next").status_code == 400
    assert client.get("/api/patients/waiting").status_code == 400
    assert client.get("/api/health").get_json()["service_initialized"] is False

def test_admit_returns_record(client):
    resp = admit(client, name="Alice", age=30, severity=5, case_type="normal")
    assert resp.status_code == 201
    patient = resp.get_json()["patient"]
    assert patient["priority"] == 80
    assert patient["case_type"] == "normal"
    assert patient["case_display"] == "Normal"
    assert patient["status"] == "waiting"

def test_emergency_flag_and_treat_order(client):
    admit(client, name="Alice", age=30, severity=5)
    bob = admit(client, name="Bob", age=20, severity=5, emergency=True).get_json()["patient"]
    assert bob["priority"] == 120
    resp = client.post("/api/patient/treat-next")
    body = resp.get_json()
    assert body["status"] == "treated"
    assert body["patient"]["id"] == bob["id"]
    assert body["patient"]["status"] == "discharged"

def test_treat_next_on_empty_queue(client):
    resp = client.post("/api/patient/treat-next")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "empty"
    assert body["patient"] is None
    assert client.get("/api/patients/history").get_json()["count"] == 0

def test_lookup_found_and_missing(client):
    pid = admit(client, name="Carol", age=10, severity=3).get_json()["patient"]["id"]
    resp = client.get(f"/api/patient/{pid}")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "waiting"
    client.post("/api/patient/treat-next")
    assert client.get(f"/api/patient/{pid}").get_json()["status"] == "discharged"
    assert client.get("/api/patient/-1").status_code == 404
    assert client.get("/api/patient/424242").status_code == 404

def test_waiting_and_history_listings(client):
    admit(client, name="Dave", age=30, severity=1)
    admit(client, name="Erin", age=10, severity=3)
    admit(client, name="Finn", age=50, severity=2, case_type="emergency")
    waiting = client.get("/api/patients/waiting").get_json()
    assert waiting["count"] == 3
    assert [p["name"] for p in waiting["patients"]] == ["Finn", "Dave", "Erin"]
    assert client.get("/api/patients/waiting").get_json() == waiting
    client.post("/api/patient/treat-next")
    client.post("/api/patient/treat-next")
    history = client.get("/api/patients/history").get_json()
    assert [p["name"] for p in history["patients"]] == ["Finn", "Dave"]

@pytest.mark.parametrize("body", [
    {"age": 30, "severity": 5},
    {"name": "X", "severity": 5},
    {"name": "X", "age": "thirty", "severity": 5},
    {"name": "X", "age": 30, "severity": 2.5},
    {"name": "X", "age": 30, "severity": 5, "case_type": "vip"},
    {"name": None, "age": 30, "severity": 5},
    {"name": 123, "age": 30, "severity": 5},
    {"name": "X", "age": 30, "severity": 5, "emergency": 1},
])
def test_admit_rejects_bad_payloads(client, body):
    resp = admit(client, **body)
    assert resp.status_code == 400
    assert "error" in resp.get_json()
    assert client.get("/api/statistics").get_json()["total_admitted"] == 0

def test_admit_rejects_non_json(client):
    resp = client.post("/api/patient/admit", data="name=X", content_type="text/plain")
    assert resp.status_code == 400

def test_statistics_and_reinitialize(client):
    admit(client, name="Gina", age=30, severity=5)
    stats = client.get("/api/statistics").get_json()
    assert stats["total_admitted"] == 1
    assert stats["highest_waiting_priority"] == 80
    resp = client.post("/api/initialize")
    assert resp.get_json()["statistics"]["total_admitted"] == 0

@pytest.mark.parametrize("flag, expected", [
    ("no", "normal"),
    ("false", "normal"),
    ("0", "normal"),
    (" YES ", "emergency"),
    ("true", "emergency"),
    (False, "normal"),
    (True, "emergency"),
])
def test_emergency_flag_values(client, flag, expected):
    resp = admit(client, name="Kim", age=30, severity=5, emergency=flag)
    assert resp.status_code == 201
    patient = resp.get_json()["patient"]
    assert patient["case_type"] == expected
    assert patient["priority"] == (130 if expected == "emergency" else 80)
