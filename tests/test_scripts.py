import pytest

import jobboard.scripts.ensure_tables as ensure_mod
import jobboard.scripts.seed_jobs as seed_mod
from jobboard.models.company import Company
from jobboard.models.job import Job


class _Session:
    def __init__(self, db):
        self.db = db
        self.closed = False

    def __getattr__(self, name):
        return getattr(self.db, name)

    def close(self):
        self.closed = True


def test_seed_creates_jobs_and_companies(db_session):
    created = seed_mod.seed(db_session)
    assert created == len(seed_mod.SEED_JOBS)
    assert db_session.query(Job).count() == created
    assert db_session.query(Company).count() == len(seed_mod.SEED_COMPANIES)


def test_seed_main_skips_when_jobs_exist(monkeypatch, db_session, make_job, capsys):
    make_job()
    session = _Session(db_session)
    monkeypatch.setattr(seed_mod, "ensure_tables_exist", lambda: None)
    monkeypatch.setattr(seed_mod, "SessionLocal", lambda: session)
    monkeypatch.setattr(seed_mod.sys, "argv", ["seed_jobs"])
    seed_mod.main()
    assert "nothing seeded" in capsys.readouterr().out
    assert db_session.query(Job).count() == 1
    assert session.closed is True


def test_seed_main_force(monkeypatch, db_session, make_job):
    make_job()
    monkeypatch.setattr(seed_mod, "ensure_tables_exist", lambda: None)
    monkeypatch.setattr(seed_mod, "SessionLocal", lambda: _Session(db_session))
    monkeypatch.setattr(seed_mod.sys, "argv", ["seed_jobs", "--force"])
    seed_mod.main()
    assert db_session.query(Job).count() == 1 + len(seed_mod.SEED_JOBS)


def test_ensure_tables_main_reports_created(monkeypatch, capsys):
    monkeypatch.setattr(ensure_mod, "ensure_tables_exist", lambda: ["jobs", "resumes"])
    monkeypatch.setattr(ensure_mod.sys, "argv", ["ensure_tables"])
    ensure_mod.main()
    assert "Created tables: jobs, resumes" in capsys.readouterr().out


def test_ensure_tables_dry_run_creates_nothing(monkeypatch, capsys):
    monkeypatch.setattr(ensure_mod, "missing_tables", lambda: ["job_alerts"])
    monkeypatch.setattr(ensure_mod, "ensure_tables_exist", lambda: pytest.fail("should not create"))
    monkeypatch.setattr(ensure_mod.sys, "argv", ["ensure_tables", "--dry-run"])
    ensure_mod.main()
    assert "Missing tables: job_alerts" in capsys.readouterr().out
