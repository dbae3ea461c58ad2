import uuid
from fastapi.testclient import TestClient
from liftlog.main import app
from helpers import auth_headers, new_user_id

client = TestClient(app)

def test_library_is_shared_and_sorted_by_name():
    tag = uuid.uuid4().hex[:8]
    alice = new_user_id()
    zz = client.post("/exercises", headers=auth_headers(alice), json={"name": f"zz {tag}"}).json()["exercise_id"]
    aa = client.post("/exercises", headers=auth_headers(new_user_id()), json={"name": f"aa {tag}"}).json()["exercise_id"]

    listed = client.get("/exercises", headers=auth_headers(new_user_id())).json()
    ids = [e["id"] for e in listed]
    assert ids.index(aa) < ids.index(zz)
    assert next(e for e in listed if e["id"] == zz)["created_by"] == alice

def test_duplicate_names_allowed():
    h = auth_headers(new_user_id())
    name = f"Deadlift {uuid.uuid4().hex[:6]}"
    first = client.post("/exercises", headers=h, json={"name": name})
    second = client.post("/exercises", headers=h, json={"name": name})
    assert first.status_code == second.status_code == 201
    assert first.json()["exercise_id"] != second.json()["exercise_id"]
    names = [e["name"] for e in client.get("/exercises", headers=h).json()]
    assert names.count(name) == 2

def test_create_exercise_validation():
    h = auth_headers(new_user_id())
    r = client.post("/exercises", headers=h, json={"name": ""})
    assert r.status_code == 422
    assert r.json() == {"success": False, "error": "Exercise name is required"}

    r = client.post("/exercises", headers=h, json={"name": "x" * 101})
    assert r.json()["error"] == "Exercise name must be 100 characters or less"

def test_create_exercise_without_identity():
    r = client.post("/exercises", json={"name": "Plank"})
    assert r.status_code == 401
    assert r.json() == {"success": False, "error": "Unauthorized"}

def test_create_exercise_body_must_be_an_object():
    h = auth_headers(new_user_id())
    r = client.post("/exercises", headers=h, json=["Plank"])
    assert r.status_code == 422
    assert r.json() == {"success": False, "error": "Invalid form data"}
