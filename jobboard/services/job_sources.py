"""
External job feeds. Ingestion only talks to JobSourceProvider, so a real
HTTP-backed provider can replace the mock without touching sync logic.
"""
import random
import time
from abc import ABC, abstractmethod


class JobSourceProvider(ABC):
    """A feed of external job postings."""

    source: str = ""
    display_name: str = ""
    company_description: str | None = None
    company_website: str | None = None

    @abstractmethod
    def fetch(self, location: str | None = None, keywords: str | None = None) -> list[dict]:
        """
        Return postings as dicts with keys: external_id, title, description,
        location, type, salary_min, salary_max, skills, requirements.
        """


class StepstoneMockProvider(JobSourceProvider):
    """Canned Stepstone postings. Stands in for the real API."""

    source = "stepstone"
    display_name = "Stepstone"
    company_description = "A leading technology company sourced from Stepstone"
    company_website = "https://stepstone.com"

    def _external_id(self) -> str:
        # Time plus a random fraction: not stable across syncs and may collide.
        return f"{self.source}_{int(time.time() * 1000)}_{random.random()}"

    def fetch(self, location: str | None = None, keywords: str | None = None) -> list[dict]:
        return [
            {
                "external_id": self._external_id(),
                "title": "Senior Software Engineer",
                "description": (
                    "Join our growing team as a Senior Software Engineer. We're looking for "
                    "someone with 5+ years of experience in full-stack development."
                ),
                "location": location or "Remote",
                "type": "full-time",
                "salary_min": "80000",
                "salary_max": "120000",
                "skills": ["React", "Node.js", "TypeScript", "PostgreSQL"],
                "requirements": "5+ years of experience in software development",
            },
            {
                "external_id": self._external_id(),
                "title": "Product Manager",
                "description": (
                    "Lead product development and strategy for our innovative platform. "
                    "Experience with agile methodologies required."
                ),
                "location": location or "Berlin, Germany",
                "type": "full-time",
                "salary_min": "70000",
                "salary_max": "95000",
                "skills": ["Product Management", "Agile", "Analytics", "UX Design"],
                "requirements": "3+ years of product management experience",
            },
            {
                "external_id": self._external_id(),
                "title": "UX Designer",
                "description": (
                    "Create beautiful and intuitive user experiences. Work closely with "
                    "development and product teams."
                ),
                "location": location or "Munich, Germany",
                "type": "full-time",
                "salary_min": "60000",
                "salary_max": "85000",
                "skills": ["Figma", "Adobe Creative Suite", "User Research", "Prototyping"],
                "requirements": "2+ years of UX design experience",
            },
        ]


PROVIDERS: dict[str, type[JobSourceProvider]] = {
    StepstoneMockProvider.source: StepstoneMockProvider,
}


def get_provider(source: str = "stepstone") -> JobSourceProvider:
    try:
        return PROVIDERS[source]()
    except KeyError:
        raise ValueError(f"Unknown job source: {source}") from None
