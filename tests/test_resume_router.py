import jobboard.routers.resumes as resumes_mod


def _resume_body(title="Main", **extra):
    body = {
        "title": title,
        "personal_info": {"full_name": "Ada Lovelace", "email": "ada@example.com"},
        "experience": [{"company": "ACME", "position": "Engineer", "start_date": "2021-01"}],
        "skills": ["Python"],
    }
    body.update(extra)
    return body


def test_resume_lifecycle(db_client):
    created = db_client.post("/api/resumes", json=_resume_body(is_default=True))
    assert created.status_code == 201
    resume = created.json()
    assert resume["experience"][0]["id"]
    assert resume["is_default"] is True

    other = db_client.post("/api/resumes", json=_resume_body("Alt")).json()
    resp = db_client.put(f"/api/resumes/{other['id']}/default")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Default resume updated successfully"}

    listed = {r["id"]: r["is_default"] for r in db_client.get("/api/resumes").json()}
    assert listed == {resume["id"]: False, other["id"]: True}

    updated = db_client.put(f"/api/resumes/{resume['id']}", json={"title": "Renamed"}).json()
    assert updated["title"] == "Renamed"
    assert updated["skills"] == ["Python"]

    assert db_client.delete(f"/api/resumes/{resume['id']}").json() == {"message": "Resume deleted successfully"}
    assert db_client.get(f"/api/resumes/{resume['id']}").status_code == 404


def test_missing_resume_is_404(monkeypatch, client):
    monkeypatch.setattr(resumes_mod, "get_resume_by_id", lambda db, rid, uid: None)
    monkeypatch.setattr(resumes_mod, "update_resume", lambda db, rid, uid, changes: None)
    monkeypatch.setattr(resumes_mod, "delete_resume", lambda db, rid, uid: False)
    monkeypatch.setattr(resumes_mod, "set_default", lambda db, rid, uid: None)
    assert client.get("/api/resumes/1").status_code == 404
    assert client.put("/api/resumes/1", json={"title": "x"}).status_code == 404
    assert client.delete("/api/resumes/1").status_code == 404
    assert client.put("/api/resumes/1/default").status_code == 404


def test_resume_title_required(client):
    resp = client.post("/api/resumes", json={"skills": ["Go"]})
    assert resp.status_code == 400


def test_create_resume_500(monkeypatch, client):
    def broken(db, user_id, data):
        raise RuntimeError("disk full")

    monkeypatch.setattr(resumes_mod, "create_resume", broken)
    resp = client.post("/api/resumes", json=_resume_body())
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to create resume"


def test_put_with_explicit_nulls_is_rejected_and_resume_stays_readable(db_client):
    resume = db_client.post("/api/resumes", json={"title": "CV", "skills": ["Py"]}).json()

    for field in ("skills", "title", "template", "is_default", "experience"):
        resp = db_client.put(f"/api/resumes/{resume['id']}", json={field: None})
        assert resp.status_code == 400, field

    listed = db_client.get("/api/resumes")
    assert listed.status_code == 200
    assert listed.json()[0]["skills"] == ["Py"]
    assert listed.json()[0]["title"] == "CV"


def test_put_can_clear_personal_info(db_client):
    resume = db_client.post("/api/resumes", json=_resume_body()).json()
    resp = db_client.put(f"/api/resumes/{resume['id']}", json={"personal_info": None})
    assert resp.status_code == 200
    assert resp.json()["personal_info"] is None


def test_default_resume_route(db_client):
    assert db_client.get("/api/resumes/default").status_code == 404
    db_client.post("/api/resumes", json=_resume_body("Plain"))
    chosen = db_client.post("/api/resumes", json=_resume_body("Chosen", is_default=True)).json()
    resp = db_client.get("/api/resumes/default")
    assert resp.status_code == 200
    assert resp.json()["id"] == chosen["id"]
