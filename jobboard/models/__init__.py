from jobboard.models.user import User
from jobboard.models.company import Company
from jobboard.models.job import Job
from jobboard.models.application import Application
from jobboard.models.saved_job import SavedJob
from jobboard.models.job_alert import JobAlert
from jobboard.models.resume import Resume
from jobboard.models.external_job_source import ExternalJobSource

__all__ = [
    "User",
    "Company",
    "Job",
    "Application",
    "SavedJob",
    "JobAlert",
    "Resume",
    "ExternalJobSource",
]
