from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

EmploymentType = Literal["Full-time", "Part-time", "Contract"]
PreferredGender = Literal["Male", "Female", "Any"]

REQUIRED_JOB_FIELDS = ("title", "location", "type", "salary", "category", "requirements")


def split_requirements(value: list[str] | str | None) -> list[str]:
    """Accept a list or newline-delimited text; blank entries are dropped."""
    if value is None:
        return []
    lines = value.splitlines() if isinstance(value, str) else value
    return [line.strip() for line in lines if line and line.strip()]


class JobPayload(BaseModel):
    """Create/update body. Every field is resupplied; absent optional fields get server defaults."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    location: str | None = None
    type: EmploymentType | None = None
    salary: str | None = None
    category: str | None = None
    requirements: list[str] | str | None = None
    deadline: date | None = None
    vacancy: int | None = Field(default=None, ge=1)
    preferred_gender: PreferredGender | None = Field(default=None, alias="preferredGender")

    def missing_fields(self) -> list[str]:
        missing = [
            name for name in REQUIRED_JOB_FIELDS
            if name != "requirements" and not (getattr(self, name) or "").strip()
        ]
        if not split_requirements(self.requirements):
            missing.append("requirements")
        return missing

    def to_record(self) -> dict:
        return {
            "title": self.title.strip(),
            "location": self.location.strip(),
            "type": self.type,
            "salary": self.salary.strip(),
            "category": self.category.strip(),
            "requirements": split_requirements(self.requirements),
            "deadline": (self.deadline or date.today()).isoformat(),
            "vacancy": self.vacancy or 1,
            "preferred_gender": self.preferred_gender or "Any",
        }


class JobResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    title: str
    location: str
    type: str
    salary: str
    category: str
    requirements: list[str] = []
    deadline: str
    vacancy: int = 1
    preferred_gender: str = Field(default="Any", alias="preferredGender")
    created_at: str | None = Field(default=None, alias="createdAt")
