import uuid
from fastapi.testclient import TestClient
from liftlog.main import app
from helpers import auth_headers, new_user_id

client = TestClient(app)

def mk_workout(h):
    r = client.post("/workouts", headers=h, json={"name": "Full body", "started_at": "2025-01-15"})
    assert r.status_code == 201, r.text
    return r.json()["workout_id"]

def mk_exercise(h, name):
    r = client.post("/exercises", headers=h, json={"name": name})
    assert r.status_code == 201, r.text
    return r.json()["exercise_id"]

def add(h, wid, eid):
    return client.post(f"/workouts/{wid}/exercises", headers=h, json={"exercise_id": eid})

def test_exercises_listed_in_order_added():
    h = auth_headers(new_user_id())
    wid = mk_workout(h)
    bench = mk_exercise(h, "Bench Press")
    squat = mk_exercise(h, "Squats")

    r = add(h, wid, bench)
    assert r.status_code == 201, r.text
    assert r.json()["order"] == 0
    assert r.headers["X-Revalidate"] == f"/dashboard/workout/{wid}"
    assert add(h, wid, squat).json()["order"] == 1

    listed = client.get(f"/workouts/{wid}/exercises", headers=h).json()
    assert [(we["exercise"]["name"], we["order"]) for we in listed] == [("Bench Press", 0), ("Squats", 1)]

    detail = client.get(f"/workouts/{wid}", headers=h).json()
    assert [we["exercise_id"] for we in detail["workout_exercises"]] == [bench, squat]

def test_same_exercise_twice_is_allowed():
    h = auth_headers(new_user_id())
    wid = mk_workout(h)
    eid = mk_exercise(h, "Pull-up")
    assert add(h, wid, eid).json()["order"] == 0
    assert add(h, wid, eid).json()["order"] == 1

def test_orders_keep_gaps_after_removal():
    h = auth_headers(new_user_id())
    wid = mk_workout(h)
    eid = mk_exercise(h, "Row")
    ids = [add(h, wid, eid).json()["workout_exercise_id"] for _ in range(3)]

    r = client.delete(f"/workout-exercises/{ids[1]}", headers=h)
    assert r.status_code == 200
    assert r.json() == {"success": True}
    assert r.headers["X-Revalidate"] == f"/dashboard/workout/{wid}"

    assert add(h, wid, eid).json()["order"] == 3
    listed = client.get(f"/workouts/{wid}/exercises", headers=h).json()
    assert [we["order"] for we in listed] == [0, 2, 3]

def test_add_to_someone_elses_workout():
    owner = auth_headers(new_user_id())
    wid = mk_workout(owner)
    intruder = auth_headers(new_user_id())
    eid = mk_exercise(intruder, "Curl")

    r = add(intruder, wid, eid)
    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "Workout not found"}
    assert client.get(f"/workouts/{wid}/exercises", headers=owner).json() == []

def test_list_someone_elses_workout_exercises():
    wid = mk_workout(auth_headers(new_user_id()))
    r = client.get(f"/workouts/{wid}/exercises", headers=auth_headers(new_user_id()))
    assert r.status_code == 404

def test_add_unknown_exercise():
    h = auth_headers(new_user_id())
    wid = mk_workout(h)
    r = add(h, wid, str(uuid.uuid4()))
    assert r.status_code == 404
    assert r.json()["error"] == "Exercise not found"

def test_add_validates_ids():
    h = auth_headers(new_user_id())
    wid = mk_workout(h)
    r = add(h, wid, "bench")
    assert r.status_code == 422
    assert r.json() == {"success": False, "error": "Invalid exercise ID"}

    r = client.post(f"/workouts/{wid}/exercises", headers=h, json={})
    assert r.json()["error"] == "Invalid exercise ID"

def test_missing_identity_is_a_result_not_a_fault():
    h = auth_headers(new_user_id())
    wid = mk_workout(h)
    eid = mk_exercise(h, "Dip")
    r = client.post(f"/workouts/{wid}/exercises", json={"exercise_id": eid})
    assert r.status_code == 401
    assert r.json() == {"success": False, "error": "Unauthorized"}

def test_remove_someone_elses_workout_exercise():
    owner = auth_headers(new_user_id())
    wid = mk_workout(owner)
    we_id = add(owner, wid, mk_exercise(owner, "Lunge")).json()["workout_exercise_id"]

    r = client.delete(f"/workout-exercises/{we_id}", headers=auth_headers(new_user_id()))
    assert r.status_code == 404
    assert r.json()["error"] == "Workout exercise not found"
    assert len(client.get(f"/workouts/{wid}/exercises", headers=owner).json()) == 1

def test_remove_takes_sets_with_it():
    h = auth_headers(new_user_id())
    wid = mk_workout(h)
    we_id = add(h, wid, mk_exercise(h, "Press")).json()["workout_exercise_id"]
    set_id = client.post(f"/workout-exercises/{we_id}/sets", headers=h, json={"reps": 5}).json()["set_id"]

    assert client.delete(f"/workout-exercises/{we_id}", headers=h).status_code == 200
    r = client.patch(f"/sets/{set_id}", headers=h, json={"reps": 6})
    assert r.status_code == 404
    assert r.json()["error"] == "Set not found"
