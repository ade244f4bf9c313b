from datetime import datetime

import jobboard.routers.jobs as jobs_mod
from jobboard.repos.job_repo import JobQueryError
from jobboard.schemas.job import JobForUser


class _Job:
    def __init__(self, job_id=1, title="Backend Engineer", company=None):
        self.id = job_id
        self.title = title
        self.description = "Build APIs"
        self.company_id = None
        self.location = "Remote"
        self.type = "full-time"
        self.salary_min = None
        self.salary_max = None
        self.skills = None
        self.requirements = None
        self.is_active = True
        self.posted_at = datetime(2024, 1, 1)
        self.created_at = None
        self.company = company


def test_list_jobs_passes_filters_through(monkeypatch, client):
    seen = {}

    def fake_get_jobs_for_user(db, user_id, **filters):
        seen["user_id"] = user_id
        seen.update(filters)
        return [JobForUser.model_validate(_Job()).model_copy(update={"is_saved": True})]

    monkeypatch.setattr(jobs_mod, "get_jobs_for_user", fake_get_jobs_for_user)
    resp = client.get(
        "/api/jobs",
        params={"location": "Berlin", "type": "contract", "salaryMin": 50000, "keywords": "python"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body[0]["is_saved"] is True
    assert body[0]["has_applied"] is False
    assert body[0]["skills"] == []
    assert seen == {
        "user_id": "user-1",
        "location": "Berlin",
        "job_type": "contract",
        "salary_min": 50000,
        "keywords": "python",
        "limit": None,
        "offset": 0,
    }


def test_list_jobs_returns_503_when_query_fails(monkeypatch, client):
    def broken(db, user_id, **filters):
        raise JobQueryError("Job search is temporarily unavailable")

    monkeypatch.setattr(jobs_mod, "get_jobs_for_user", broken)
    resp = client.get("/api/jobs")
    assert resp.status_code == 503
    assert "temporarily unavailable" in resp.json()["detail"]


def test_list_jobs_rejects_negative_salary(client):
    resp = client.get("/api/jobs", params={"salaryMin": -1})
    assert resp.status_code == 400


def test_get_job_not_found(monkeypatch, client):
    monkeypatch.setattr(jobs_mod, "get_job_by_id", lambda db, job_id: None)
    resp = client.get("/api/jobs/42")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Job not found"


def test_get_job_carries_user_flags(monkeypatch, client):
    monkeypatch.setattr(jobs_mod, "get_job_by_id", lambda db, job_id: _Job(job_id=job_id))
    monkeypatch.setattr(jobs_mod, "is_saved", lambda db, uid, job_id: True)
    monkeypatch.setattr(jobs_mod, "get_by_user_and_job", lambda db, uid, job_id: None)
    resp = client.get("/api/jobs/7")
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == 7
    assert body["is_saved"] is True
    assert body["has_applied"] is False


def test_get_job_flags_end_to_end(db_client, make_job):
    job = make_job()
    assert db_client.get(f"/api/jobs/{job.id}").json()["has_applied"] is False
    db_client.post("/api/applications", json={"job_id": job.id})
    body = db_client.get(f"/api/jobs/{job.id}").json()
    assert body["has_applied"] is True
    assert body["is_saved"] is False


def test_create_job(monkeypatch, client):
    captured = {}

    def fake_create(db, **fields):
        captured.update(fields)
        return _Job(job_id=3, title=fields["title"])

    monkeypatch.setattr(jobs_mod, "create_job", fake_create)
    resp = client.post(
        "/api/jobs",
        json={"title": "Data Engineer", "description": "Pipelines", "type": "full-time", "skills": [" SQL ", ""]},
    )
    assert resp.status_code == 201
    assert resp.json()["title"] == "Data Engineer"
    assert captured["skills"] == ["SQL"]


def test_create_job_with_unknown_company(monkeypatch, client):
    monkeypatch.setattr(jobs_mod, "get_company_by_id", lambda db, company_id: None)
    resp = client.post(
        "/api/jobs",
        json={"title": "Data Engineer", "description": "Pipelines", "type": "full-time", "company_id": 99},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Company not found"


def test_create_job_validation(client):
    bad_type = client.post("/api/jobs", json={"title": "X", "description": "Y", "type": "freelance"})
    inverted = client.post(
        "/api/jobs",
        json={"title": "X", "description": "Y", "type": "full-time", "salary_min": 90000, "salary_max": 50000},
    )
    assert bad_type.status_code == 400
    assert inverted.status_code == 400


def test_search_flags_follow_user_state(db_client, make_company, make_job):
    acme = make_company()
    saved = make_job(title="Saved Role", company_id=acme.id, posted_at=datetime(2024, 3, 1))
    applied = make_job(title="Applied Role", posted_at=datetime(2024, 2, 1))
    make_job(title="Hidden", is_active=False)

    assert db_client.post("/api/saved-jobs", json={"job_id": saved.id}).status_code == 201
    assert db_client.post("/api/applications", json={"job_id": applied.id}).status_code == 201

    resp = db_client.get("/api/jobs", params={"location": "All Locations", "type": "all"})
    assert resp.status_code == 200
    body = resp.json()
    assert [j["title"] for j in body] == ["Saved Role", "Applied Role"]
    assert body[0]["is_saved"] is True and body[0]["has_applied"] is False
    assert body[0]["company"]["name"] == "ACME"
    assert body[1]["is_saved"] is False and body[1]["has_applied"] is True
