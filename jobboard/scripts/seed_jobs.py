"""
Seed a few companies and jobs for local development.
Usage: python -m jobboard.scripts.seed_jobs [--force]
Skips seeding when jobs already exist unless --force is given.
"""
import sys
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from jobboard.database import SessionLocal, ensure_tables_exist
from jobboard.models.job import Job
from jobboard.repos.company_repo import get_or_create_by_name
from jobboard.repos.job_repo import create as create_job

SEED_COMPANIES = {
    "Northwind Labs": {"website": "https://northwind.example.com", "location": "Remote"},
    "Contoso Mobility": {"website": "https://contoso.example.com", "location": "Munich, Germany"},
}

SEED_JOBS = [
    {
        "company": "Northwind Labs",
        "title": "Senior Software Engineer",
        "description": "Build and operate the services behind our hiring platform.",
        "location": "Remote",
        "type": "full-time",
        "salary_min": Decimal("90000"),
        "salary_max": Decimal("130000"),
        "skills": ["Python", "PostgreSQL", "FastAPI"],
        "requirements": "5+ years of backend development",
    },
    {
        "company": "Northwind Labs",
        "title": "Data Engineering Intern",
        "description": "Help us build reliable data pipelines.",
        "location": "Remote",
        "type": "internship",
        "salary_min": Decimal("20000"),
        "salary_max": Decimal("30000"),
        "skills": ["SQL", "pandas"],
        "requirements": "Currently enrolled in a CS or related program",
    },
    {
        "company": "Contoso Mobility",
        "title": "UX Designer",
        "description": "Design intuitive booking flows for our mobility apps.",
        "location": "Munich, Germany",
        "type": "contract",
        "salary_min": Decimal("60000"),
        "salary_max": Decimal("80000"),
        "skills": ["Figma", "User Research"],
        "requirements": "Portfolio of shipped mobile work",
    },
]


def seed(db) -> int:
    """Insert the seed companies and jobs. Returns number of jobs created."""
    companies = {}
    for name, fields in SEED_COMPANIES.items():
        companies[name], _ = get_or_create_by_name(db, name, **fields)
    created = 0
    for row in SEED_JOBS:
        row = dict(row)
        company = companies[row.pop("company")]
        create_job(db, commit=False, company_id=company.id, **row)
        created += 1
    db.commit()
    return created


def main():
    force = "--force" in sys.argv[1:]
    ensure_tables_exist()
    db = SessionLocal()
    try:
        if not force and db.query(Job.id).first() is not None:
            print("Jobs already present; nothing seeded. Use --force to add the seed set anyway.")
            return
        created = seed(db)
        print(f"Seeded {created} jobs.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
