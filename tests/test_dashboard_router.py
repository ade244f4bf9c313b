from datetime import datetime

import jobboard.routers.dashboard as dash_mod


def test_stats(monkeypatch, client):
    monkeypatch.setattr(
        dash_mod,
        "get_user_stats",
        lambda db, uid: {"applications": 4, "saved_jobs": 2, "pending": 3, "interviews": 1},
    )
    resp = client.get("/api/dashboard/stats")
    assert resp.status_code == 200
    assert resp.json() == {"applications": 4, "saved_jobs": 2, "pending": 3, "interviews": 1}


def test_stats_500(monkeypatch, client):
    monkeypatch.setattr(dash_mod, "get_user_stats", lambda db, uid: (_ for _ in ()).throw(RuntimeError("x")))
    resp = client.get("/api/dashboard/stats")
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to fetch dashboard stats"


def test_activity_end_to_end(db_client, make_company, make_job):
    job = make_job(company_id=make_company("Initech").id)
    db_client.post("/api/applications", json={"job_id": job.id})
    db_client.post("/api/saved-jobs", json={"job_id": job.id})

    stats = db_client.get("/api/dashboard/stats").json()
    assert stats == {"applications": 1, "saved_jobs": 1, "pending": 1, "interviews": 0}

    items = db_client.get("/api/dashboard/activity").json()
    assert {i["type"] for i in items} == {"application", "save"}
    assert all(i["job_title"] == "Backend Engineer" for i in items)
    assert all(i["company_name"] == "Initech" for i in items)
    assert next(i for i in items if i["type"] == "application")["status"] == "pending"


def test_activity_shape(monkeypatch, client):
    monkeypatch.setattr(
        dash_mod,
        "get_recent_activity",
        lambda db, uid: [
            {
                "type": "save",
                "id": 9,
                "job_title": "SRE",
                "company_name": None,
                "status": None,
                "timestamp": datetime(2024, 5, 1),
            }
        ],
    )
    body = client.get("/api/dashboard/activity").json()
    assert body[0]["type"] == "save"
    assert body[0]["timestamp"].startswith("2024-05-01")
