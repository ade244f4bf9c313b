import jobboard.routers.sync as sync_mod
from jobboard.models.external_job_source import ExternalJobSource


def test_sync_imports_matching_postings(db_client, db_session):
    resp = db_client.post("/api/stepstone/sync", json={"keywords": "Designer"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Successfully synced 1 jobs from Stepstone"
    assert [j["title"] for j in body["jobs"]] == ["UX Designer"]
    assert body["jobs"][0]["company"]["name"] == "Stepstone Partner Company"
    assert db_session.query(ExternalJobSource).count() == 1


def test_sync_with_location(db_client):
    body = db_client.post("/api/stepstone/sync", json={"location": "Vienna"}).json()
    assert len(body["jobs"]) == 3
    assert {j["location"] for j in body["jobs"]} == {"Vienna"}


def test_sync_failure_is_500(monkeypatch, client):
    def broken(db, provider, location=None, keywords=None):
        raise RuntimeError("feed down")

    monkeypatch.setattr(sync_mod, "sync_external_jobs", broken)
    resp = client.post("/api/stepstone/sync", json={})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to sync Stepstone jobs"
