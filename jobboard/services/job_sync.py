import logging
from decimal import Decimal

import pandas as pd
from sqlalchemy.orm import Session

from jobboard.config import settings
from jobboard.models.job import Job
from jobboard.repos.company_repo import get_or_create_by_name
from jobboard.repos.external_job_source_repo import create as create_source
from jobboard.repos.job_repo import create as create_job
from jobboard.services.job_sources import JobSourceProvider

logger = logging.getLogger(__name__)


def filter_postings(postings: list[dict], keywords: str | None = None) -> list[dict]:
    """
    Keep postings whose title or description contains `keywords` (case-insensitive)
    and drop in-batch duplicates by title + location. Input order is preserved.
    """
    if not postings:
        return []
    df = pd.DataFrame(postings)
    for col in ("title", "description", "location"):
        if col not in df.columns:
            df[col] = ""
        df[col] = df[col].fillna("").astype(str)
    if keywords:
        mask = df["title"].str.contains(keywords, case=False, regex=False) | df["description"].str.contains(
            keywords, case=False, regex=False
        )
        df = df[mask]
    df["title_clean"] = df["title"].str.lower().str.strip()
    df["location_clean"] = df["location"].str.lower().str.strip()
    df = df.drop_duplicates(subset=["title_clean", "location_clean"], keep="first")
    return [postings[i] for i in df.index]


def _decimal_or_none(value) -> Decimal | None:
    if value is None or value == "":
        return None
    return Decimal(str(value))


def sync_external_jobs(
    db: Session,
    provider: JobSourceProvider,
    location: str | None = None,
    keywords: str | None = None,
) -> list[Job]:
    """
    Pull postings from `provider`, keep the keyword matches, and insert them as jobs
    under the shared placeholder company with one provenance row each.
    Everything is written in one transaction.
    """
    postings = provider.fetch(location=location, keywords=keywords)
    matching = filter_postings(postings, keywords)
    logger.info(
        "Sync %s: fetched=%d matching=%d (location=%r keywords=%r)",
        provider.source, len(postings), len(matching), location, keywords,
    )
    if not matching:
        return []

    created_jobs: list[Job] = []
    try:
        company, company_created = get_or_create_by_name(
            db,
            settings.sync_placeholder_company,
            description=provider.company_description,
            website=provider.company_website,
            location=matching[0].get("location"),
        )
        if company_created:
            logger.info("Created placeholder company %r", company.name)
        for posting in matching:
            job = create_job(
                db,
                commit=False,
                title=str(posting["title"])[:255],
                description=str(posting["description"]),
                company_id=company.id,
                location=posting.get("location"),
                type=posting.get("type") or "full-time",
                salary_min=_decimal_or_none(posting.get("salary_min")),
                salary_max=_decimal_or_none(posting.get("salary_max")),
                skills=list(posting.get("skills") or []),
                requirements=posting.get("requirements"),
            )
            create_source(
                db,
                provider.source,
                posting["external_id"],
                job.id,
                data={"original_data": posting},
                commit=False,
            )
            created_jobs.append(job)
        db.commit()
    except Exception:
        db.rollback()
        raise

    for job in created_jobs:
        db.refresh(job)
    logger.info("Sync %s: inserted %d jobs", provider.source, len(created_jobs))
    return created_jobs
