from datetime import datetime

from pydantic import BaseModel, Field, model_validator

NULLABLE_UPDATE_FIELDS = {"personal_info"}


class PersonalInfo(BaseModel):
    full_name: str
    email: str
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    website: str | None = None
    summary: str | None = None


class ExperienceEntry(BaseModel):
    id: str | None = None
    company: str
    position: str
    start_date: str
    end_date: str | None = None
    current: bool = False
    description: str = ""
    location: str | None = None


class EducationEntry(BaseModel):
    id: str | None = None
    institution: str
    degree: str
    field: str
    start_date: str
    end_date: str | None = None
    current: bool = False
    gpa: str | None = None


class ProjectEntry(BaseModel):
    id: str | None = None
    name: str
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    url: str | None = None
    start_date: str
    end_date: str | None = None


class CertificationEntry(BaseModel):
    id: str | None = None
    name: str
    issuer: str
    issue_date: str
    expiry_date: str | None = None
    credential_id: str | None = None


class ResumeCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    personal_info: PersonalInfo | None = None
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    projects: list[ProjectEntry] = Field(default_factory=list)
    certifications: list[CertificationEntry] = Field(default_factory=list)
    template: str = Field(default="modern", max_length=50)
    is_default: bool = False


class ResumeUpdate(BaseModel):
    """Partial update: only fields that are sent are changed."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    personal_info: PersonalInfo | None = None
    experience: list[ExperienceEntry] | None = None
    education: list[EducationEntry] | None = None
    skills: list[str] | None = None
    projects: list[ProjectEntry] | None = None
    certifications: list[CertificationEntry] | None = None
    template: str | None = Field(default=None, max_length=50)
    is_default: bool | None = None

    @model_validator(mode="after")
    def no_null_for_required_fields(self):
        # Omit a field to leave it unchanged; only personal_info may be cleared.
        nulled = sorted(
            name
            for name in self.model_fields_set
            if name not in NULLABLE_UPDATE_FIELDS and getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self


class ResumeResponse(BaseModel):
    id: int
    user_id: str
    title: str
    personal_info: PersonalInfo | None = None
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    projects: list[ProjectEntry] = Field(default_factory=list)
    certifications: list[CertificationEntry] = Field(default_factory=list)
    template: str = "modern"
    is_default: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
